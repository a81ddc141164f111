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
"""Symbol table mapping surface strings to integer ids.

Terminal symbols receive positive ids and nonterminal symbols receive negative
ids, so the sign of an id is enough to tell them apart. Nonterminals are
written in brackets, either as a bare label (`[X]`, used for rule left-hand
sides) or with a linking index (`[X,1]`, used in right-hand sides).
"""

import re
import typing

from typing_extensions import Protocol

# Matches `[X]` and `[X,1]`; group 1 is the label.
NONTERMINAL_REGEX = re.compile(r"^\[([^\[\],]+)(?:,\d+)?\]$")


class SymbolResolver(Protocol):
  """Converts integer symbol ids back to surface strings."""

  def get_word(self, symbol_id):
    Ellipsis

  def get_words(self, symbol_ids):
    Ellipsis

  def get_label(self, symbol_id):
    Ellipsis


def is_nonterminal_string(word):
  return NONTERMINAL_REGEX.match(word) is not None


class SymbolTable(object):
  """Interns symbols as integers."""

  def __init__(self):
    self._word_to_id: typing.Dict[str, int] = {}
    self._id_to_word: typing.Dict[int, str] = {}
    self._num_terminals = 0
    self._num_nonterminals = 0

  def __len__(self):
    return len(self._word_to_id)

  def __contains__(self, word):
    return word in self._word_to_id

  def add(self, word):
    """Returns the id for `word`, assigning a new one if needed."""
    if word in self._word_to_id:
      return self._word_to_id[word]
    if is_nonterminal_string(word):
      self._num_nonterminals += 1
      symbol_id = -self._num_nonterminals
    else:
      self._num_terminals += 1
      symbol_id = self._num_terminals
    self._word_to_id[word] = symbol_id
    self._id_to_word[symbol_id] = word
    return symbol_id

  def add_all(self, words):
    """Interns a sequence of words, e.g. `"[X,1] de la".split()`."""
    return tuple(self.add(word) for word in words)

  def get_id(self, word):
    if word not in self._word_to_id:
      raise ValueError("Unknown symbol: %s" % word)
    return self._word_to_id[word]

  def get_word(self, symbol_id):
    if symbol_id not in self._id_to_word:
      raise ValueError("Unknown symbol id: %s" % symbol_id)
    return self._id_to_word[symbol_id]

  def get_words(self, symbol_ids):
    return " ".join(self.get_word(symbol_id) for symbol_id in symbol_ids)

  def get_label(self, symbol_id):
    """Returns the bare label of a nonterminal, e.g. `X` for `[X,1]`."""
    word = self.get_word(symbol_id)
    match = NONTERMINAL_REGEX.match(word)
    if not match:
      raise ValueError("Not a nonterminal: %s" % word)
    return match.group(1)

  def is_nonterminal(self, symbol_id):
    return symbol_id < 0

  def count_nonterminals(self, symbol_ids):
    """Returns the arity implied by a right-hand side."""
    return sum(1 for symbol_id in symbol_ids if self.is_nonterminal(symbol_id))
