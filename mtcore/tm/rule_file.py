# coding=utf-8
# Copyright 2018 The Google AI Language Team Authors.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Write rules to human readable txt files."""

from absl import logging

from tensorflow.io import gfile


def write_rules(rules, vocab, filename, target_vocab=None, with_scores=True):
  """Write rules to txt file, one rendered rule per line."""
  with gfile.GFile(filename, "w") as txt_file:
    for rule in rules:
      if with_scores:
        line = rule.render(vocab, target_vocab)
      else:
        line = rule.render_without_scores(vocab, target_vocab)
      txt_file.write("%s\n" % line)
  logging.info("Wrote %s rules to %s.", len(rules), filename)
