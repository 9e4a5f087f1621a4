import sympy as sp

from ..core.operators import OpType, op_type


class TruncatedDiv(sp.Function):
  """Integer division rounding toward zero.

  Evaluates to an Integer when both arguments are integers and the divisor is
  non-zero, and stays unevaluated otherwise.
  """

  nargs = 2

  @classmethod
  def eval(cls, p, q):
    if p.is_Integer and q.is_Integer and not q.is_zero:
      p_val, q_val = int(p), int(q)
      quotient = abs(p_val) // abs(q_val)
      return sp.Integer(-quotient if (p_val < 0) != (q_val < 0) else quotient)
    return None

  def _latex(self, printer):
    p, q = self.args
    return r"\operatorname{tdiv}\left(%s, %s\right)" % (printer._print(p), printer._print(q))


def binary_to_sympy(operator: str, left: sp.Expr, right: sp.Expr) -> sp.Expr:
  op = op_type(operator)
  if op == OpType.ADD:
    return sp.Add(left, right)
  elif op == OpType.SUB:
    return sp.Add(left, sp.Mul(-1, right))
  elif op == OpType.MUL:
    return sp.Mul(left, right)
  return TruncatedDiv(left, right)


def latex_representation(node) -> str:
  """LaTeX form of a tree, with division shown as tdiv"""
  return sp.latex(node.to_sympy())
