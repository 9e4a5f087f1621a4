import pytest

from expression_target import BinaryOpNode, LiteralNode, OPERATORS
from expression_target.logging_system import LogLevel, configure_logging


def parse_expression(text):
  """Parse the fully parenthesized output grammar back into a tree.

  expr := INT | '(' expr OP expr ')'
  """
  node, pos = _parse(text, 0)
  if pos != len(text):
    raise ValueError(f"Trailing input at {pos} in {text!r}")
  return node


def _parse(text, pos):
  if pos < len(text) and text[pos] == '(':
    left, pos = _parse(text, pos + 1)
    operator = text[pos]
    if operator not in OPERATORS:
      raise ValueError(f"Expected operator at {pos} in {text!r}")
    right, pos = _parse(text, pos + 1)
    if text[pos] != ')':
      raise ValueError(f"Expected ')' at {pos} in {text!r}")
    return BinaryOpNode(operator, left, right), pos + 1

  end = pos + 1 if pos < len(text) and text[pos] == '-' else pos
  while end < len(text) and text[end].isdigit():
    end += 1
  digits = text[pos:end]
  if not digits.lstrip('-'):
    raise ValueError(f"Expected integer at {pos} in {text!r}")
  return LiteralNode(int(digits)), end


@pytest.fixture(autouse=True)
def quiet_logging():
  configure_logging(LogLevel.MINIMAL)
  yield
  configure_logging(LogLevel.MINIMAL)
