from functools import lru_cache
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from .errors import InvalidRange
from .expression_tree import Node, NodeArena, OPERATORS
from .expression_tree.core.operators import is_integer_value
from .logging_system import get_logger


def as_int_sequence(sequence: Sequence[int]) -> Tuple[int, ...]:
  """Freeze the input as a tuple of Python ints"""
  values = tuple(sequence)
  for i, value in enumerate(values):
    if not is_integer_value(value):
      raise TypeError(f"Sequence element {i} must be an integer, got {type(value).__name__}")
  return tuple(int(v) for v in values)


@lru_cache(maxsize=None)
def count_trees(n: int) -> int:
  """Number of trees the enumerator produces for a range of n elements"""
  if n < 1:
    raise ValueError(f"count_trees needs at least one element, got {n}")
  if n == 1:
    return 1
  return sum(count_trees(k) * count_trees(n - k) * len(OPERATORS) for k in range(1, n))


class ExpressionEnumerator:
  """Builds every binary expression tree over a contiguous range of a sequence.

  Trees come out in a fixed order: split index ascending, then left trees,
  then right trees, then operators in OPERATORS order. Results for each
  sub-range are memoized, so parents built from the same sub-range share
  those subtrees.
  """

  def __init__(self, sequence: Sequence[int], arena: Optional[NodeArena] = None,
               max_nodes: Optional[int] = None):
    self.sequence = as_int_sequence(sequence)
    self.arena = arena if arena is not None else NodeArena(max_nodes)
    self._cache: Dict[Tuple[int, int], List[Node]] = {}

  def _check_range(self, start: int, end: int):
    if not (0 <= start <= end < len(self.sequence)):
      raise InvalidRange(start, end, len(self.sequence))

  def generate(self, start: int, end: int) -> List[Node]:
    """All trees for [start, end], fully materialized"""
    self._check_range(start, end)
    return self._generate(start, end)

  def _generate(self, start: int, end: int) -> List[Node]:
    key = (start, end)
    cached = self._cache.get(key)
    if cached is not None:
      return cached

    if start == end:
      result = [self.arena.new_literal(self.sequence[start])]
    else:
      result = list(self._combine(start, end, retain=True))

    self._cache[key] = result
    get_logger().progress(f"range [{start}, {end}]: {len(result)} trees "
                          f"({self.arena.allocated} nodes allocated)")
    return result

  def iter_candidates(self, start: int, end: int) -> Iterator[Node]:
    """Same trees and order as generate(), without keeping the top-level list.

    Sub-ranges are still materialized; only the trees for [start, end] itself
    are built one at a time and released once the caller drops them.
    """
    self._check_range(start, end)
    if start == end:
      return iter(self._generate(start, end))
    return self._combine(start, end, retain=False)

  def _combine(self, start: int, end: int, retain: bool) -> Iterator[Node]:
    new_binary = self.arena.new_binary
    for i in range(start, end):
      left_trees = self._generate(start, i)
      right_trees = self._generate(i + 1, end)
      for left in left_trees:
        for right in right_trees:
          for operator in OPERATORS:
            yield new_binary(operator, left, right, retain=retain)

  def clear(self):
    """Drop memoized sub-ranges and release the arena"""
    self._cache.clear()
    self.arena.clear()


def generate_expressions(sequence: Sequence[int], start: int, end: int,
                         max_nodes: Optional[int] = None) -> List[Node]:
  """Every expression tree over sequence[start..end] (inclusive)"""
  return ExpressionEnumerator(sequence, max_nodes=max_nodes).generate(start, end)
