"""Expression Tree Module

Parsed arithmetic expressions in one variable.
"""

from .expression import Expression
from .core.node import (
    Node,
    VariableNode,
    ConstantNode,
    BinaryOpNode,
    UnaryOpNode
)
from .core.operators import (
    NodeType,
    OpType,
    BINARY_OP_MAP,
    UNARY_OP_MAP,
    SPLIT_PRECEDENCE,
    evaluate_binary_op,
    evaluate_unary_op
)

__all__ = [
    "Expression",
    "Node", "VariableNode", "ConstantNode", "BinaryOpNode", "UnaryOpNode",
    "NodeType", "OpType",
    "BINARY_OP_MAP", "UNARY_OP_MAP", "SPLIT_PRECEDENCE",
    "evaluate_binary_op", "evaluate_unary_op"
]
