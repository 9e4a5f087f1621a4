"""Expression Tree Module

Integer expression trees over literals and the four arithmetic operators.
"""

from .core.node import Node, LiteralNode, BinaryOpNode
from .core.operators import (
    NodeType,
    OpType,
    DivisionPolicy,
    OPERATORS,
    BINARY_OP_MAP,
    DIVISION_SENTINEL,
    evaluate_binary_op,
    truncating_div
)
from .optimization import NodeArena
from .utils import latex_representation

__all__ = [
    "Node", "LiteralNode", "BinaryOpNode",
    "NodeType", "OpType", "DivisionPolicy",
    "OPERATORS", "BINARY_OP_MAP", "DIVISION_SENTINEL",
    "evaluate_binary_op", "truncating_div",
    "NodeArena",
    "latex_representation"
]
