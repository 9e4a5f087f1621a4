"""Expression Target Package

Enumerates every fully parenthesized +, -, *, / expression over an ordered
sequence of integers and returns those that evaluate to a target.
"""

from .errors import (
  ExpressionSearchError, InvalidRange, EmptyInput, InvalidOperator,
  DivisionByZero, BudgetExceeded
)
from .expression_tree import (
  Node, LiteralNode, BinaryOpNode,
  DivisionPolicy, OPERATORS, DIVISION_SENTINEL, NodeArena
)
from .enumerator import ExpressionEnumerator, generate_expressions, count_trees
from .search import SearchConfig, SearchResult, ExpressionSearch, find_expressions
from .logging_system import LogLevel, get_logger, set_log_level, configure_logging

__version__ = "0.1.0"
__all__ = [
  "ExpressionSearchError", "InvalidRange", "EmptyInput", "InvalidOperator",
  "DivisionByZero", "BudgetExceeded",
  "Node", "LiteralNode", "BinaryOpNode",
  "DivisionPolicy", "OPERATORS", "DIVISION_SENTINEL", "NodeArena",
  "ExpressionEnumerator", "generate_expressions", "count_trees",
  "SearchConfig", "SearchResult", "ExpressionSearch", "find_expressions",
  "LogLevel", "get_logger", "set_log_level", "configure_logging"
]
