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
"""Detokenization and capitalization of decoder output.

The decoder emits whitespace tokenized text such as

  my son 's friend , however , plays a high - risk game .

which these functions turn back into

  My son 's friend, however, plays a high-risk game.

Input is expected to be tokenized; applying `process_single_line` to its own
output is not guaranteed to leave it unchanged.
"""

import re
import string

# First character that is neither whitespace nor punctuation.
_FIRST_CHAR_REGEX = re.compile(r"[^\s%s¡¿]" % re.escape(string.punctuation))

# A token made only of periods and commas, with the whitespace before it.
_PERIODS_COMMAS_REGEX = re.compile(r"\s+([.,]+)(?=\s|$)")

_HYPHEN_TOKEN = " - "


def capitalize_first_letter(line):
  """Upper-cases the first character that is not whitespace or punctuation."""
  match = _FIRST_CHAR_REGEX.search(line)
  if not match:
    return line
  index = match.start()
  return line[:index] + line[index].upper() + line[index + 1:]


def join_periods_commas(line):
  """Attaches period and comma tokens to the preceding token."""
  return _PERIODS_COMMAS_REGEX.sub(r"\1", line)


def join_hyphen(line):
  """Joins hyphen tokens to both neighbours.

  Matches are non-overlapping and scanned left to right, so "a - - b" becomes
  "a-- b" while "a -  - b" becomes "a--b".

  Args:
    line: Tokenized string.

  Returns:
    The string with hyphens joined.
  """
  return line.replace(_HYPHEN_TOKEN, "-")


def process_single_line(line):
  """Applies all detokenization steps to one line."""
  line = capitalize_first_letter(line)
  line = join_periods_commas(line)
  line = join_hyphen(line)
  return line
