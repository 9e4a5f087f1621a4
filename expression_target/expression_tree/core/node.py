import sympy as sp
from abc import ABC, abstractmethod
from typing import Optional, Dict, List
from .operators import (
  NodeType, DivisionPolicy, OPERATORS, evaluate_binary_op, is_integer_value, op_type
)
from ...errors import DivisionByZero, InvalidOperator


class Node(ABC):
  """Base node class with value/string caching.

  Nodes are immutable once built, so a subtree may be shared by any number of
  parents and its cached results stay valid for all of them.
  """

  __slots__ = ('handle', '_hash_cache', '_size_cache', '_string_cache', '_value_cache')

  def __init__(self):
    self.handle: Optional[int] = None
    self._hash_cache: Optional[int] = None
    self._size_cache: Optional[int] = None
    self._string_cache: Optional[str] = None
    self._value_cache: Dict[DivisionPolicy, object] = {}

  def evaluate(self, division_policy: DivisionPolicy = DivisionPolicy.EXCLUDE) -> int:
    """Integer value of the subtree.

    Raises DivisionByZero under DivisionPolicy.EXCLUDE when any division in
    the subtree has a zero divisor. The outcome is cached either way.
    """
    cached = self._value_cache.get(division_policy)
    if cached is None:
      try:
        cached = self._compute_value(division_policy)
      except DivisionByZero as e:
        cached = e
      self._value_cache[division_policy] = cached
    if isinstance(cached, DivisionByZero):
      raise DivisionByZero(*cached.args)
    return cached

  def to_string(self) -> str:
    if self._string_cache is None:
      self._string_cache = self._compute_string()
    return self._string_cache

  def size(self) -> int:
    """Node count"""
    if self._size_cache is None:
      self._size_cache = self._compute_size()
    return self._size_cache

  @abstractmethod
  def depth(self) -> int:
    pass

  @abstractmethod
  def literals(self) -> List[int]:
    """Literal values in left-to-right order"""
    pass

  @abstractmethod
  def to_sympy(self) -> sp.Expr:
    pass

  @abstractmethod
  def _compute_value(self, division_policy: DivisionPolicy) -> int:
    pass

  @abstractmethod
  def _compute_string(self) -> str:
    pass

  @abstractmethod
  def _compute_size(self) -> int:
    pass

  @abstractmethod
  def _compute_hash(self) -> int:
    pass

  @abstractmethod
  def _structure(self) -> tuple:
    pass

  def __hash__(self) -> int:
    if self._hash_cache is None:
      self._hash_cache = self._compute_hash()
    return self._hash_cache

  def __eq__(self, other) -> bool:
    if not isinstance(other, Node):
      return NotImplemented
    return self is other or self._structure() == other._structure()

  def __str__(self) -> str:
    return self.to_string()

  def __repr__(self) -> str:
    return f"{type(self).__name__}({self.to_string()})"


class LiteralNode(Node):
  __slots__ = ('value',)

  def __init__(self, value: int):
    super().__init__()
    if not is_integer_value(value):
      raise TypeError(f"Literal value must be an integer, got {type(value).__name__}")
    self.value = int(value)

  def depth(self) -> int:
    return 0

  def literals(self) -> List[int]:
    return [self.value]

  def to_sympy(self) -> sp.Expr:
    return sp.Integer(self.value)

  def _compute_value(self, division_policy):
    return self.value

  def _compute_string(self) -> str:
    return str(self.value)

  def _compute_size(self) -> int:
    return 1

  def _compute_hash(self) -> int:
    return hash((NodeType.LITERAL, self.value))

  def _structure(self) -> tuple:
    return (NodeType.LITERAL, self.value)


class BinaryOpNode(Node):
  __slots__ = ('operator', 'left', 'right')

  def __init__(self, operator: str, left: Node, right: Node):
    super().__init__()
    if operator not in OPERATORS:
      raise InvalidOperator(operator)
    if not isinstance(left, Node) or not isinstance(right, Node):
      raise TypeError("BinaryOpNode children must be Node instances")
    self.operator = operator
    self.left = left
    self.right = right

  def depth(self) -> int:
    return 1 + max(self.left.depth(), self.right.depth())

  def literals(self) -> List[int]:
    return self.left.literals() + self.right.literals()

  def to_sympy(self) -> sp.Expr:
    # Imported here to avoid circular imports
    from ..utils.sympy_utils import binary_to_sympy
    return binary_to_sympy(self.operator, self.left.to_sympy(), self.right.to_sympy())

  def _compute_value(self, division_policy):
    left_val = self.left.evaluate(division_policy)
    right_val = self.right.evaluate(division_policy)
    return evaluate_binary_op(left_val, right_val, self.operator, division_policy)

  def _compute_string(self) -> str:
    return f"({self.left.to_string()}{self.operator}{self.right.to_string()})"

  def _compute_size(self) -> int:
    return 1 + self.left.size() + self.right.size()

  def _compute_hash(self) -> int:
    return hash((NodeType.BINARY_OP, op_type(self.operator), hash(self.left), hash(self.right)))

  def _structure(self) -> tuple:
    return (NodeType.BINARY_OP, self.operator, self.left._structure(), self.right._structure())
