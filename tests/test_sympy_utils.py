import sympy as sp
import pytest

from expression_target import BinaryOpNode, DivisionByZero, LiteralNode, generate_expressions
from expression_target.expression_tree.utils import TruncatedDiv, latex_representation


@pytest.mark.parametrize("p, q, expected", [(7, 2, 3), (-7, 2, -3), (7, -2, -3), (-9, -4, 2)])
def test_truncated_div_evaluates_integers(p, q, expected):
  assert TruncatedDiv(p, q) == sp.Integer(expected)


def test_truncated_div_stays_symbolic():
  x = sp.Symbol('x')
  assert not TruncatedDiv(x, 2).is_Integer
  assert not TruncatedDiv(5, 0).is_Integer


def test_sympy_values_agree_with_evaluate():
  for tree in generate_expressions([3, -2, 5, 4], 0, 3):
    symbolic = tree.to_sympy()
    try:
      expected = tree.evaluate()
    except DivisionByZero:
      assert not symbolic.is_Integer
      continue
    assert symbolic.is_Integer
    assert int(symbolic) == expected


def test_latex_of_evaluated_tree():
  tree = BinaryOpNode('/', BinaryOpNode('+', LiteralNode(2), LiteralNode(5)), LiteralNode(2))
  assert tree.to_sympy() == sp.Integer(3)
  assert latex_representation(tree) == "3"


def test_latex_of_unevaluated_division():
  tree = BinaryOpNode('/', LiteralNode(1), LiteralNode(0))
  assert latex_representation(tree) == r"\operatorname{tdiv}\left(1, 0\right)"
