import numpy as np
import sympy as sp
from typing import Optional, Union, Iterable
from .core.node import Node
from .utils.tree_utils import calculate_tree_depth, contains_variable


class Expression:
  """Holder for the root of a parsed expression tree"""

  __slots__ = ('root', 'source')

  def __init__(self, root: Node, source: Optional[str] = None):
    self.root = root
    self.source = source

  @classmethod
  def from_string(cls, expr_str: str) -> 'Expression':
    from ..parser import parse
    return cls(parse(expr_str), source=expr_str)

  def evaluate(self, x: Optional[float] = None) -> float:
    """Closed-form value when x is None, otherwise the value at x"""
    if x is not None:
      x = float(x)
    return self.root.evaluate(x)

  def evaluate_many(self, xs: Union[Iterable[float], np.ndarray]) -> np.ndarray:
    """Vectorised evaluation over a 1-D grid of x values"""
    X = np.asarray(xs, dtype=np.float64).ravel()
    with np.errstate(all='ignore'):
      result = self.root.evaluate(X)
    return np.asarray(result, dtype=np.float64)

  def __call__(self, x: float) -> float:
    return self.evaluate(x)

  def to_string(self) -> str:
    return self.root.to_string()

  def to_sympy(self) -> sp.Expr:
    return self.root.to_sympy()

  def size(self) -> int:
    """Node count"""
    return self.root.size()

  def depth(self) -> int:
    return calculate_tree_depth(self.root)

  def has_variable(self) -> bool:
    return contains_variable(self.root)

  def __repr__(self) -> str:
    return f"Expression({self.to_string()})"
