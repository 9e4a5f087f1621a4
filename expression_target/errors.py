"""Exception hierarchy for expression search.

Everything except DivisionByZero aborts a query. DivisionByZero only marks a
single candidate as invalid and is filtered by the search driver.
"""


class ExpressionSearchError(Exception):
  """Base class for all expression search errors"""


class InvalidRange(ExpressionSearchError, ValueError):
  """Start/end indices do not address a non-empty range of the sequence"""

  def __init__(self, start: int, end: int, length: int):
    super().__init__(f"Invalid range [{start}, {end}] for sequence of length {length}")
    self.start = start
    self.end = end
    self.length = length


class EmptyInput(ExpressionSearchError, ValueError):
  """The input sequence has no elements"""

  def __init__(self, message: str = "Cannot build expressions from an empty sequence"):
    super().__init__(message)


class InvalidOperator(ExpressionSearchError, ValueError):

  def __init__(self, operator):
    super().__init__(f"Invalid operator: {operator!r}")
    self.operator = operator


class DivisionByZero(ExpressionSearchError, ZeroDivisionError):
  """A candidate expression divides by zero"""


class BudgetExceeded(ExpressionSearchError, RuntimeError):

  def __init__(self, max_nodes: int):
    super().__init__(f"Node budget of {max_nodes} exceeded")
    self.max_nodes = max_nodes
