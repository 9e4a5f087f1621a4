import numpy as np
import pytest

from expression_target import (
  BudgetExceeded, ExpressionEnumerator, InvalidRange, LiteralNode, count_trees,
  generate_expressions
)


def test_single_element_range_yields_one_literal():
  trees = generate_expressions([7, 8, 9], 1, 1)
  assert len(trees) == 1
  assert isinstance(trees[0], LiteralNode)
  assert trees[0].value == 8


def test_operator_order_for_two_elements():
  trees = generate_expressions([1, 2], 0, 1)
  assert [t.to_string() for t in trees] == ["(1+2)", "(1-2)", "(1*2)", "(1/2)"]


def test_enumeration_order_for_three_elements():
  strings = [t.to_string() for t in generate_expressions([1, 2, 3], 0, 2)]
  assert len(strings) == 32
  # split after the first element: left literal, right trees outer, operators inner
  assert strings[:8] == [
    "(1+(2+3))", "(1-(2+3))", "(1*(2+3))", "(1/(2+3))",
    "(1+(2-3))", "(1-(2-3))", "(1*(2-3))", "(1/(2-3))",
  ]
  assert strings[15] == "(1/(2/3))"
  # split after the second element
  assert strings[16:20] == ["((1+2)+3)", "((1+2)-3)", "((1+2)*3)", "((1+2)/3)"]
  assert strings[-1] == "((1/2)/3)"


def test_left_trees_iterate_outside_right_trees():
  strings = [t.to_string() for t in generate_expressions([1, 2, 3, 4], 0, 3)]
  # split at index 1: left [1, 2], right [3, 4]; first left tree paired with every right tree
  start = count_trees(1) * count_trees(3) * 4
  block = strings[start:start + 16]
  assert all(s.startswith("((1+2)") for s in block)
  assert strings[start + 16].startswith("((1-2)")


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5, 6])
def test_count_property(n):
  trees = generate_expressions(list(range(1, n + 1)), 0, n - 1)
  assert len(trees) == count_trees(n)


def test_count_trees_values():
  assert [count_trees(n) for n in range(1, 6)] == [1, 4, 32, 320, 3584]


def test_count_trees_rejects_empty():
  with pytest.raises(ValueError):
    count_trees(0)


def test_every_tree_uses_each_element_once_in_order():
  sequence = [4, -1, 0, 6]
  for tree in generate_expressions(sequence, 0, 3):
    assert tree.literals() == sequence


def test_sub_range_uses_only_elements_in_range():
  for tree in generate_expressions([9, 1, 2, 3, 9], 1, 3):
    assert tree.literals() == [1, 2, 3]


@pytest.mark.parametrize("start, end", [(2, 1), (-1, 0), (0, 3), (3, 3)])
def test_invalid_range(start, end):
  enumerator = ExpressionEnumerator([1, 2, 3])
  with pytest.raises(InvalidRange):
    enumerator.generate(start, end)
  with pytest.raises(InvalidRange):
    enumerator.iter_candidates(start, end)


def test_empty_sequence_has_no_valid_range():
  with pytest.raises(InvalidRange):
    ExpressionEnumerator([]).generate(0, 0)


def test_non_integer_elements_rejected():
  with pytest.raises(TypeError):
    ExpressionEnumerator([1, 2.5, 3])


def test_numpy_input_accepted():
  trees = generate_expressions(np.array([2, 3], dtype=np.int32), 0, 1)
  assert [t.evaluate() for t in trees] == [5, -1, 6, 0]


def test_sub_ranges_are_shared_between_parents():
  enumerator = ExpressionEnumerator([1, 2, 3])
  trees = enumerator.generate(0, 2)
  first_split = trees[:16]
  assert all(t.left is first_split[0].left for t in first_split)
  # right subtree object reused across the four operators
  assert len({id(t.right) for t in first_split}) == 4
  # memoized results come back as the same list
  assert enumerator.generate(1, 2) is enumerator.generate(1, 2)


def test_lazy_candidates_match_generate():
  sequence = [3, 1, 4, 1]
  eager = [t.to_string() for t in ExpressionEnumerator(sequence).generate(0, 3)]
  lazy = [t.to_string() for t in ExpressionEnumerator(sequence).iter_candidates(0, 3)]
  assert lazy == eager


def test_lazy_candidates_are_not_retained():
  enumerator = ExpressionEnumerator([1, 2, 3])
  candidates = list(enumerator.iter_candidates(0, 2))
  assert len(candidates) == 32
  assert all(t.handle is None for t in candidates)
  # three literals and the two 2-element sub-ranges stay in the arena
  assert len(enumerator.arena) == 3 + 4 + 4
  assert enumerator.arena.allocated == 3 + 4 + 4 + 32


def test_budget_exceeded_during_generation():
  enumerator = ExpressionEnumerator([1, 2, 3, 4], max_nodes=50)
  with pytest.raises(BudgetExceeded):
    enumerator.generate(0, 3)


def test_clear_releases_memoized_ranges():
  enumerator = ExpressionEnumerator([1, 2])
  first = enumerator.generate(0, 1)
  enumerator.clear()
  assert len(enumerator.arena) == 0
  second = enumerator.generate(0, 1)
  assert second is not first
  assert [t.to_string() for t in second] == [t.to_string() for t in first]
