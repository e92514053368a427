"""Expression Solver Package

Parses single-line arithmetic expressions in one variable x, evaluates them
and finds roots of '=expression' equations with Newton's method.
"""

from .expression_tree import (
  Expression, Node, VariableNode, ConstantNode,
  BinaryOpNode, UnaryOpNode, NodeType, OpType
)
from .errors import (
  ExpressionError, ParseError, MalformedLiteralError,
  UnmatchedParenthesisError, UnboundVariableError
)
from .parser import parse, parse_expression, find_split, find_end
from .solver import solve, newton_solve, solve_with_config, SolveResult
from .config import SolverConfig
from .logging_system import LogLevel, configure_logging, get_logger, set_log_level

__version__ = "0.1.0"
__all__ = [
  "Expression", "Node", "VariableNode", "ConstantNode",
  "BinaryOpNode", "UnaryOpNode", "NodeType", "OpType",
  "ExpressionError", "ParseError", "MalformedLiteralError",
  "UnmatchedParenthesisError", "UnboundVariableError",
  "parse", "parse_expression", "find_split", "find_end",
  "solve", "newton_solve", "solve_with_config", "SolveResult",
  "SolverConfig",
  "LogLevel", "configure_logging", "get_logger", "set_log_level"
]
