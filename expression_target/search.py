"""
Target search over enumerated expressions.

Enumerates every tree over the full input sequence, evaluates each one and
keeps the rendered string of those that equal the target, in enumeration
order.
"""

from dataclasses import dataclass, field, replace
from typing import Iterator, List, Optional, Sequence, Union
import time

from .enumerator import ExpressionEnumerator, as_int_sequence, count_trees
from .errors import BudgetExceeded, DivisionByZero, EmptyInput
from .expression_tree import Node, DivisionPolicy
from .expression_tree.core.operators import is_integer_value
from .logging_system import get_logger

STRATEGIES = ('eager', 'lazy')


@dataclass
class SearchConfig:
  division_policy: Union[DivisionPolicy, str] = DivisionPolicy.EXCLUDE
  strategy: str = 'eager'          # 'eager' materializes all trees, 'lazy' filters as it builds
  max_nodes: Optional[int] = None  # None means no budget

  def __post_init__(self):
    self.division_policy = DivisionPolicy(self.division_policy)
    if self.strategy not in STRATEGIES:
      raise ValueError(f"Invalid strategy: {self.strategy!r}, expected one of {STRATEGIES}")
    if self.max_nodes is not None and self.max_nodes < 1:
      raise ValueError(f"max_nodes must be positive, got {self.max_nodes}")


@dataclass
class SearchResult:
  expressions: List[str] = field(default_factory=list)
  matches: List[Node] = field(default_factory=list)  # trees behind expressions, same order
  candidates: int = 0        # trees evaluated
  excluded: int = 0          # trees dropped for dividing by zero
  nodes_allocated: int = 0
  elapsed: float = 0.0

  def __len__(self) -> int:
    return len(self.expressions)

  def __iter__(self) -> Iterator[str]:
    return iter(self.expressions)


class ExpressionSearch:
  """Finds every fully parenthesized expression over a sequence that equals a target"""

  def __init__(self, sequence: Sequence[int], target: int,
               config: Optional[SearchConfig] = None, **overrides):
    self.sequence = as_int_sequence(sequence)
    if not self.sequence:
      raise EmptyInput()
    if not is_integer_value(target):
      raise TypeError(f"Target must be an integer, got {type(target).__name__}")
    self.target = int(target)

    config = config if config is not None else SearchConfig()
    self.config = replace(config, **overrides) if overrides else config

  def _candidates(self, enumerator: ExpressionEnumerator) -> Iterator[Node]:
    end = len(self.sequence) - 1
    if self.config.strategy == 'lazy':
      return enumerator.iter_candidates(0, end)
    return iter(enumerator.generate(0, end))

  def search(self) -> SearchResult:
    logger = get_logger()
    policy = self.config.division_policy
    result = SearchResult()
    start_time = time.time()

    logger.milestone(f"Searching {len(self.sequence)} numbers for target {self.target} "
                     f"({count_trees(len(self.sequence))} candidates, "
                     f"{self.config.strategy} strategy, {policy.value} division policy)")

    enumerator = ExpressionEnumerator(self.sequence, max_nodes=self.config.max_nodes)
    try:
      for tree in self._candidates(enumerator):
        result.candidates += 1
        try:
          value = tree.evaluate(policy)
        except DivisionByZero:
          result.excluded += 1
          continue
        if value == self.target:
          result.expressions.append(tree.to_string())
          result.matches.append(tree)
    except BudgetExceeded:
      logger.warning(f"Node budget of {self.config.max_nodes} exceeded after "
                     f"{result.candidates} candidates")
      raise
    finally:
      result.nodes_allocated = enumerator.arena.allocated
      logger.debug(f"Arena stats: {enumerator.arena.get_stats()}")
      enumerator.clear()

    result.elapsed = time.time() - start_time
    logger.result_summary({
      'Numbers': list(self.sequence),
      'Target': self.target,
      'Candidates': result.candidates,
      'Excluded (division by zero)': result.excluded,
      'Matches': len(result.expressions),
      'Nodes allocated': result.nodes_allocated,
      'Elapsed (s)': result.elapsed,
    })
    return result


def find_expressions(sequence: Sequence[int], target: int,
                     config: Optional[SearchConfig] = None, **overrides) -> List[str]:
  """
  Every fully parenthesized expression over sequence that evaluates to target.

  Args:
      sequence: Non-empty sequence of integers, used in order, each exactly once
      target: Integer to match
      config: Search configuration; keyword overrides replace its fields

  Returns:
      Matching expression strings in enumeration order, duplicates kept

  Raises:
      EmptyInput: sequence is empty
      BudgetExceeded: more nodes were needed than config.max_nodes
  """
  return ExpressionSearch(sequence, target, config, **overrides).search().expressions
