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
"""Tests for vocab."""

from absl.testing import absltest
from absl.testing import parameterized
from mtcore.common import vocab as vocab_lib


class SymbolTableTest(parameterized.TestCase):

  def setUp(self):
    super().setUp()
    self.vocab = vocab_lib.SymbolTable()

  def test_add_is_idempotent(self):
    first = self.vocab.add("house")
    self.assertEqual(self.vocab.add("house"), first)
    self.assertLen(self.vocab, 1)
    self.assertIn("house", self.vocab)

  def test_terminal_and_nonterminal_ids(self):
    terminal = self.vocab.add("house")
    nonterminal = self.vocab.add("[X,1]")
    self.assertGreater(terminal, 0)
    self.assertLess(nonterminal, 0)
    self.assertFalse(self.vocab.is_nonterminal(terminal))
    self.assertTrue(self.vocab.is_nonterminal(nonterminal))

  def test_get_words(self):
    ids = self.vocab.add_all("[X,1] of the house".split())
    self.assertEqual(self.vocab.get_words(ids), "[X,1] of the house")
    self.assertEqual(self.vocab.get_id("the"), ids[2])

  @parameterized.parameters(("[X]", "X"), ("[X,1]", "X"), ("[NP,2]", "NP"))
  def test_get_label(self, word, label):
    self.assertEqual(self.vocab.get_label(self.vocab.add(word)), label)

  def test_get_label_of_terminal(self):
    with self.assertRaises(ValueError):
      self.vocab.get_label(self.vocab.add("house"))

  def test_unknown_symbols(self):
    with self.assertRaises(ValueError):
      self.vocab.get_word(42)
    with self.assertRaises(ValueError):
      self.vocab.get_id("house")

  def test_count_nonterminals(self):
    ids = self.vocab.add_all("[X,1] de [X,2]".split())
    self.assertEqual(self.vocab.count_nonterminals(ids), 2)
    self.assertEqual(self.vocab.count_nonterminals(ids[1:2]), 0)

  @parameterized.parameters("[X]", "[X,1]", "[S,12]")
  def test_is_nonterminal_string(self, word):
    self.assertTrue(vocab_lib.is_nonterminal_string(word))

  @parameterized.parameters("X", "[", "[]", "[X", "a[X]")
  def test_is_not_nonterminal_string(self, word):
    self.assertFalse(vocab_lib.is_nonterminal_string(word))


if __name__ == "__main__":
  absltest.main()
