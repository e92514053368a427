import numpy as np
import sympy as sp
from abc import ABC, abstractmethod
from typing import Optional, Tuple, Union
from .operators import (
  NodeType, OpType, BINARY_OPS, UNARY_OPS, OP_SYMBOLS,
  evaluate_binary_op, evaluate_unary_op
)
from .visitor import postvisitor
from ...errors import UnboundVariableError

Value = Union[float, np.ndarray]

VARIABLE_NAME = 'x'


class Node(ABC):
  """
  Base node class. Trees are built once by the parser and never mutated.

  Whole-tree operations run through ``postvisitor``; subclasses only
  describe one step (``apply``, ``format``, ``sympy_step``) given the
  results already computed for their children.
  """

  __slots__ = ()

  node_type: NodeType

  def children(self) -> Tuple['Node', ...]:
    return ()

  @abstractmethod
  def apply(self, child_values: Tuple[Value, ...], x: Optional[Value]) -> Value:
    """Value of this node given the values of its children."""
    pass

  @abstractmethod
  def format(self, child_strings: Tuple[str, ...]) -> str:
    pass

  @abstractmethod
  def sympy_step(self, child_exprs: Tuple[sp.Expr, ...]) -> sp.Expr:
    pass

  def evaluate(self, x: Optional[Value] = None) -> Value:
    """Evaluate the subtree; ``x=None`` means no variable binding."""
    return postvisitor(self, lambda node, *values: node.apply(values, x))

  def to_string(self) -> str:
    return postvisitor(self, lambda node, *parts: node.format(parts))

  def to_sympy(self) -> sp.Expr:
    return postvisitor(self, lambda node, *exprs: node.sympy_step(exprs))

  def size(self) -> int:
    return postvisitor(self, lambda node, *sizes: 1 + sum(sizes))

  def __repr__(self) -> str:
    return f"{type(self).__name__}<{self.to_string()}>"


class VariableNode(Node):
  __slots__ = ()

  node_type = NodeType.VARIABLE

  def apply(self, child_values, x):
    if x is None:
      raise UnboundVariableError()
    if isinstance(x, np.ndarray):
      return x.astype(np.float64, copy=False)
    return float(x)

  def format(self, child_strings):
    return VARIABLE_NAME

  def sympy_step(self, child_exprs):
    return sp.Symbol(VARIABLE_NAME)


class ConstantNode(Node):
  __slots__ = ('value',)

  node_type = NodeType.CONSTANT

  def __init__(self, value: float):
    self.value = float(value)

  def apply(self, child_values, x):
    if isinstance(x, np.ndarray):
      return np.full(x.shape, self.value, dtype=np.float64)
    return self.value

  def format(self, child_strings):
    return repr(self.value)

  def sympy_step(self, child_exprs):
    return sp.Float(self.value)


class BinaryOpNode(Node):
  __slots__ = ('operator', 'left', 'right')

  node_type = NodeType.BINARY_OP

  def __init__(self, operator: OpType, left: Node, right: Node):
    if operator not in BINARY_OPS:
      raise ValueError(f"Not a binary operator: {operator!r}")
    self.operator = OpType(operator)
    self.left = left
    self.right = right

  def children(self):
    # Left operand is always evaluated first
    return (self.left, self.right)

  def apply(self, child_values, x):
    left_val, right_val = child_values
    return evaluate_binary_op(left_val, right_val, self.operator)

  def format(self, child_strings):
    left, right = child_strings
    return f"({left} {OP_SYMBOLS[self.operator]} {right})"

  def sympy_step(self, child_exprs):
    left, right = child_exprs
    if self.operator == OpType.ADD:
      return sp.Add(left, right)
    elif self.operator == OpType.SUB:
      return sp.Add(left, sp.Mul(-1, right))
    elif self.operator == OpType.MUL:
      return sp.Mul(left, right)
    elif self.operator == OpType.DIV:
      return sp.Mul(left, sp.Pow(right, -1))
    else:
      return sp.Pow(left, right)


class UnaryOpNode(Node):
  __slots__ = ('operator', 'operand')

  node_type = NodeType.UNARY_OP

  def __init__(self, operator: OpType, operand: Node):
    if operator not in UNARY_OPS:
      raise ValueError(f"Not a unary operator: {operator!r}")
    self.operator = OpType(operator)
    self.operand = operand

  def children(self):
    return (self.operand,)

  def apply(self, child_values, x):
    return evaluate_unary_op(child_values[0], self.operator)

  def format(self, child_strings):
    return f"{OP_SYMBOLS[self.operator]}({child_strings[0]})"

  def sympy_step(self, child_exprs):
    return -child_exprs[0]
