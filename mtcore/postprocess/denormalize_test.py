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
"""Tests for denormalize."""

from absl.testing import absltest
from absl.testing import parameterized
from mtcore.postprocess import denormalize

_TOKENIZED = "my son 's friend , however , plays a high - risk game ."


class DenormalizeTest(parameterized.TestCase):

  def test_process_single_line(self):
    self.assertEqual(
        denormalize.process_single_line(_TOKENIZED),
        "My son 's friend, however, plays a high-risk game.")

  @parameterized.parameters(
      (_TOKENIZED, "My son 's friend , however , plays a high - risk game ."),
      ("", ""),
      ("1", "1"),
      ("a", "A"),
      ("  \" quoted", "  \" Quoted"),
  )
  def test_capitalize_first_letter(self, line, expected):
    self.assertEqual(denormalize.capitalize_first_letter(line), expected)

  @parameterized.parameters(
      (_TOKENIZED, "my son 's friend, however, plays a high - risk game."),
      ("", ""),
      ("wait ...", "wait..."),
      ("3 .5 percent", "3 .5 percent"),
  )
  def test_join_periods_commas(self, line, expected):
    self.assertEqual(denormalize.join_periods_commas(line), expected)

  @parameterized.parameters(
      (_TOKENIZED, "my son 's friend , however , plays a high-risk game ."),
      ("", ""),
      ("a - - b", "a-- b"),
      ("a -  - b", "a--b"),
  )
  def test_join_hyphen(self, line, expected):
    self.assertEqual(denormalize.join_hyphen(line), expected)


if __name__ == "__main__":
  absltest.main()
