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
"""Utilities for reading and writing text and JSON files."""

import json

from absl import logging

from tensorflow.io import gfile


def read_lines(filename):
  """Read file to list of lines without trailing newlines."""
  lines = []
  with gfile.GFile(filename, "r") as txt_file:
    for line in txt_file:
      lines.append(line.rstrip("\n"))
  logging.info("Loaded %s lines from %s.", len(lines), filename)
  return lines


def write_lines(lines, filename):
  """Write lines to file, one per line."""
  with gfile.GFile(filename, "w") as txt_file:
    for line in lines:
      txt_file.write("%s\n" % line)
  logging.info("Wrote %s lines to %s.", len(lines), filename)


def json_file_to_dict(filename):
  with gfile.GFile(filename, "r") as json_file:
    return json.load(json_file)
