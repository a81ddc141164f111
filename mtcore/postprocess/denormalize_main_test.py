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
"""Tests for denormalize_main."""

import os

from absl.testing import absltest
from mtcore.postprocess import denormalize_main


class DenormalizeMainTest(absltest.TestCase):

  def setUp(self):
    super(DenormalizeMainTest, self).setUp()
    self.input_file = self.create_tempfile(
        content="the house .\nhello , world - wide\n")
    self.output_file = os.path.join(self.create_tempdir().full_path,
                                    "output.txt")

  def _read_output(self):
    with open(self.output_file) as f:
      return f.read()

  def test_denormalize_file(self):
    denormalize_main.denormalize_file(self.input_file.full_path,
                                      self.output_file)
    self.assertEqual(self._read_output(),
                     "The house.\nHello, world-wide\n")


if __name__ == "__main__":
  absltest.main()
