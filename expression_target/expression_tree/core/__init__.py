"""Core expression tree components."""

from .node import Node, LiteralNode, BinaryOpNode
from .operators import (
    NodeType, OpType, DivisionPolicy, OPERATORS, BINARY_OP_MAP, DIVISION_SENTINEL,
    evaluate_binary_op, truncating_div, is_integer_value
)

__all__ = [
    'Node', 'LiteralNode', 'BinaryOpNode',
    'NodeType', 'OpType', 'DivisionPolicy', 'OPERATORS', 'BINARY_OP_MAP', 'DIVISION_SENTINEL',
    'evaluate_binary_op', 'truncating_div', 'is_integer_value'
]
