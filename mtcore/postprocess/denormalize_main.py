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
"""Detokenize a txt file of decoder output, one sentence per line."""

from absl import app
from absl import flags

from mtcore.common import file_utils
from mtcore.postprocess import denormalize

FLAGS = flags.FLAGS

flags.DEFINE_string("input", "", "Input txt file of tokenized translations.")

flags.DEFINE_string("output", "", "Output txt file.")


def denormalize_file(input_file, output_file):
  lines = file_utils.read_lines(input_file)
  outputs = [denormalize.process_single_line(line) for line in lines]
  file_utils.write_lines(outputs, output_file)


def main(unused_argv):
  denormalize_file(FLAGS.input, FLAGS.output)


if __name__ == "__main__":
  app.run(main)
