"""Core expression tree components."""

from .node import Node, VariableNode, ConstantNode, BinaryOpNode, UnaryOpNode
from .visitor import postvisitor
from .operators import (
    NodeType, OpType, BINARY_OP_MAP, UNARY_OP_MAP, OP_SYMBOLS, SPLIT_PRECEDENCE,
    evaluate_binary_op, evaluate_unary_op
)

__all__ = [
    'Node', 'VariableNode', 'ConstantNode', 'BinaryOpNode', 'UnaryOpNode', 'postvisitor',
    'NodeType', 'OpType', 'BINARY_OP_MAP', 'UNARY_OP_MAP', 'OP_SYMBOLS', 'SPLIT_PRECEDENCE',
    'evaluate_binary_op', 'evaluate_unary_op'
]
