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
"""Synchronous grammar rules as consumed by the hypergraph decoder.

The string format of a rule is:

  [LHS] ||| source symbols ||| target symbols ||| feature scores

Symbols are integers assigned by a symbol table (see `common/vocab.py`), with
nonterminals linking the source and target sides.

Rules are immutable apart from two write-once cells: the stateless cost
assigned by the estimation step, and the memoized full rendering. Both are
deterministic, so concurrent readers that race on them write identical values.
"""

import dataclasses
import typing

from mtcore.tm import constants


@dataclasses.dataclass(frozen=True)
class Rule:
  """A scored synchronous production."""
  rule_id: int
  # Nonterminal label of the left-hand side.
  lhs: int
  # Tuple of source symbol ids.
  source: typing.Tuple[int, Ellipsis]
  # Tuple of target symbol ids.
  target: typing.Tuple[int, Ellipsis]
  # Feature functions only score rules whose owner matches their own.
  owner: int
  # Tuple of scores aligned with the feature functions of `owner`.
  feature_scores: typing.Tuple[float, Ellipsis]
  # Number of nonterminals in `source`; 0 when the loader cannot supply it.
  arity: int = 0
  # Cost of the input lattice edge this instance is attached to.
  lattice_cost: float = 0.0
  # Declared feature count of the owning grammar, checked when given.
  num_features: dataclasses.InitVar[typing.Optional[int]] = None
  # Sum of stateless feature costs, excluding the language model.
  stateless_cost: float = dataclasses.field(
      default=0.0, init=False, compare=False)
  _estimated: bool = dataclasses.field(
      default=False, init=False, compare=False, repr=False)
  _cached_str: typing.Optional[str] = dataclasses.field(
      default=None, init=False, compare=False, repr=False)

  def __post_init__(self, num_features):
    if self.source is None or self.target is None:
      raise ValueError("Rule %s requires source and target symbols." %
                       self.rule_id)
    # tuple() returns tuples unchanged, so shared sequences are not copied.
    object.__setattr__(self, "source", tuple(self.source))
    object.__setattr__(self, "target", tuple(self.target))
    object.__setattr__(self, "feature_scores", tuple(self.feature_scores))
    if num_features is not None and len(self.feature_scores) != num_features:
      raise ValueError("Rule %s has %s feature scores, grammar declares %s." %
                       (self.rule_id, len(self.feature_scores), num_features))

  def clone_with_lattice_cost(self, cost):
    """Returns a copy attached to a lattice edge of the given cost."""
    clone = dataclasses.replace(self, lattice_cost=cost)
    object.__setattr__(clone, "stateless_cost", self.stateless_cost)
    object.__setattr__(clone, "_estimated", self._estimated)
    object.__setattr__(clone, "_cached_str", self._cached_str)
    return clone

  def is_out_of_vocabulary(self):
    return self.rule_id == constants.OOV_RULE_ID

  def get_stateless_cost(self):
    """Returns the estimated stateless cost, or 0 before estimation."""
    return self.stateless_cost

  def set_stateless_cost(self, cost):
    """Records the stateless cost; may only be set once."""
    if self._estimated:
      if self.stateless_cost == cost:
        return
      raise ValueError("Stateless cost of rule %s already set to %s." %
                       (self.rule_id, self.stateless_cost))
    object.__setattr__(self, "stateless_cost", cost)
    object.__setattr__(self, "_estimated", True)

  def render_without_scores(self, vocab, target_vocab=None):
    """Returns `[LHS] ||| source ||| target`."""
    if target_vocab is None:
      target_vocab = vocab
    return "[%s] %s %s %s %s" % (
        vocab.get_label(self.lhs), constants.FIELD_SEPARATOR,
        vocab.get_words(self.source), constants.FIELD_SEPARATOR,
        target_vocab.get_words(self.target))

  def render(self, vocab, target_vocab=None):
    """Returns the full rendering including feature scores.

    The result is computed on the first call and cached, so the resolvers
    passed to later calls are not consulted.

    Args:
      vocab: SymbolResolver for the left-hand side and source symbols.
      target_vocab: Optional SymbolResolver for the target symbols, for
        grammars with separate source and target vocabularies.

    Returns:
      The rule string.
    """
    if self._cached_str is None:
      scores = "".join(
          constants.SCORE_FORMAT % score for score in self.feature_scores)
      rendered = "%s %s%s" % (self.render_without_scores(vocab, target_vocab),
                              constants.FIELD_SEPARATOR, scores)
      object.__setattr__(self, "_cached_str", rendered)
    return self._cached_str


def make_rule(lhs, source, target, feature_scores, arity):
  """Returns a rule with placeholder id and owner."""
  return Rule(
      rule_id=constants.DUMMY_RULE_ID,
      lhs=lhs,
      source=source,
      target=target,
      owner=constants.DUMMY_OWNER,
      feature_scores=feature_scores,
      arity=arity)


def single_token_rule(rule_id, lhs, token, owner, num_features):
  """Returns a rule translating `token` as itself, with zero scores."""
  return Rule(
      rule_id=rule_id,
      lhs=lhs,
      source=(token,),
      target=(token,),
      owner=owner,
      feature_scores=(0.0,) * num_features,
      arity=0)


def oov_rule(lhs, token, owner, num_features):
  """Returns a pass-through rule for a token unknown to the grammar."""
  return single_token_rule(constants.OOV_RULE_ID, lhs, token, owner,
                           num_features)


def is_oov(rule):
  return rule.is_out_of_vocabulary()
