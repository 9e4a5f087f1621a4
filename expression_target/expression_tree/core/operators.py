import numpy as np
from enum import Enum, IntEnum

from ...errors import DivisionByZero, InvalidOperator

class NodeType(IntEnum):
  LITERAL = 0
  BINARY_OP = 1

class OpType(IntEnum):
  ADD = 0
  SUB = 1
  MUL = 2
  DIV = 3

class DivisionPolicy(Enum):
  EXCLUDE = 'exclude'    # raise DivisionByZero, candidate is dropped
  SENTINEL = 'sentinel'  # substitute DIVISION_SENTINEL and keep going

# Enumeration order of operators is part of the output ordering
OPERATORS = ('+', '-', '*', '/')

BINARY_OP_MAP = {'+': OpType.ADD, '-': OpType.SUB, '*': OpType.MUL, '/': OpType.DIV}

# Largest signed 64-bit integer
DIVISION_SENTINEL = int(np.iinfo(np.int64).max)

def is_integer_value(value) -> bool:
  """True for Python and numpy integers, False for bool"""
  if isinstance(value, (bool, np.bool_)):
    return False
  return isinstance(value, (int, np.integer))

def op_type(operator: str) -> OpType:
  try:
    return BINARY_OP_MAP[operator]
  except (KeyError, TypeError):
    raise InvalidOperator(operator) from None

def truncating_div(left_val: int, right_val: int) -> int:
  """Integer quotient rounded toward zero, e.g. -7 / 2 == -3"""
  quotient = abs(left_val) // abs(right_val)
  return -quotient if (left_val < 0) != (right_val < 0) else quotient

def evaluate_binary_op(left_val: int, right_val: int, operator: str,
                       division_policy: DivisionPolicy = DivisionPolicy.EXCLUDE) -> int:
  op = op_type(operator)
  if op == OpType.ADD:
    return left_val + right_val
  elif op == OpType.SUB:
    return left_val - right_val
  elif op == OpType.MUL:
    return left_val * right_val
  # OpType.DIV
  if right_val == 0:
    if division_policy == DivisionPolicy.SENTINEL:
      return DIVISION_SENTINEL
    raise DivisionByZero(f"{left_val} / 0")
  return truncating_div(left_val, right_val)
