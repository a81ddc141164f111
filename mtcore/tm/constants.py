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
"""Constants shared by rules and the grammars that build them."""

# Rules synthesized to cover input tokens absent from the grammar carry this
# id. Grammar loaders number table rules from 1.
OOV_RULE_ID = 0

# Placeholders for rules built without a grammar, e.g. in tests.
DUMMY_RULE_ID = 1
DUMMY_OWNER = 1

# Separates the fields of a rendered rule.
FIELD_SEPARATOR = "|||"

# Format of each feature score in a rendered rule.
SCORE_FORMAT = " %.4f"
