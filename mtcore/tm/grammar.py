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
"""Builds rules for one grammar and estimates their stateless costs.

A `Grammar` owns the feature layout shared by its rules: every rule it creates
carries the grammar's owner tag and exactly `num_features` scores. Rule tables
are populated by a loader calling `add_rule`; tokens the table cannot cover are
handled by `oov_rule`, which synthesizes a pass-through rule instead of looking
anything up.
"""

import dataclasses
import typing

from absl import logging
from mtcore.common import file_utils
from mtcore.tm import constants
from mtcore.tm import rule as rule_lib
import numpy as np


@dataclasses.dataclass
class GrammarConfig:
  """Feature layout and weights for the rules of one grammar."""
  owner: int = constants.DUMMY_OWNER
  num_features: int = 0
  # One weight per feature score; cost is the weighted sum of scores.
  weights: typing.List[float] = dataclasses.field(default_factory=list)
  # Left-hand side label given to synthesized OOV rules.
  default_lhs: str = "[X]"

  def __post_init__(self):
    if len(self.weights) != self.num_features:
      raise ValueError("Expected %s weights, got %s." %
                       (self.num_features, len(self.weights)))

  @classmethod
  def from_json_file(cls, filename):
    config = cls(**file_utils.json_file_to_dict(filename))
    logging.info("Loaded grammar config from %s: %s", filename, config)
    return config


class StatelessScorer(object):
  """Weighted sum of the feature scores of rules with a given owner."""

  def __init__(self, owner, weights):
    self.owner = owner
    self.weights = np.asarray(weights, dtype=np.float32)

  def estimate(self, rule):
    if rule.owner != self.owner:
      return 0.0
    if len(rule.feature_scores) != len(self.weights):
      raise ValueError("Rule %s has %s feature scores, scorer has %s weights." %
                       (rule.rule_id, len(rule.feature_scores),
                        len(self.weights)))
    if not rule.feature_scores:
      return 0.0
    scores = np.asarray(rule.feature_scores, dtype=np.float32)
    return float(np.dot(self.weights, scores))


def estimate_rule(rule, scorers):
  """Sets and returns the stateless cost of `rule`."""
  cost = sum(scorer.estimate(rule) for scorer in scorers)
  rule.set_stateless_cost(cost)
  return cost


class Grammar(object):
  """Constructs and estimates the rules of one grammar."""

  def __init__(self, config, vocab, scorers=None):
    self.config = config
    self.vocab = vocab
    if scorers is None:
      scorers = [StatelessScorer(config.owner, config.weights)]
    self.scorers = scorers
    self.rules = []
    self._default_lhs = vocab.add(config.default_lhs)

  def add_rule(self, rule_id, lhs, source, target, feature_scores, arity=0):
    """Adds a scored table rule, checking its feature count."""
    if rule_id == constants.OOV_RULE_ID:
      raise ValueError("Rule id %s is reserved for OOV rules." % rule_id)
    rule = rule_lib.Rule(
        rule_id=rule_id,
        lhs=lhs,
        source=source,
        target=target,
        owner=self.config.owner,
        feature_scores=feature_scores,
        arity=arity,
        num_features=self.config.num_features)
    estimate_rule(rule, self.scorers)
    self.rules.append(rule)
    return rule

  def oov_rule(self, token):
    """Returns an estimated pass-through rule for an unknown token string."""
    symbol = self.vocab.add(token)
    rule = rule_lib.oov_rule(self._default_lhs, symbol, self.config.owner,
                             self.config.num_features)
    estimate_rule(rule, self.scorers)
    logging.vlog(1, "Created OOV rule for token %s.", token)
    return rule
