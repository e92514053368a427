import sympy as sp
from typing import Callable
from ..core.node import Node, VARIABLE_NAME


def to_sympy_expression(node: Node) -> sp.Expr:
  """Convert a parsed tree to SymPy without simplifying it"""
  return node.to_sympy()


def latex_representation(node: Node) -> str:
  """Get LaTeX representation of the expression"""
  return sp.latex(to_sympy_expression(node))


def sympy_lambdify(node: Node) -> Callable:
  """
  Build a numpy-backed callable f(x) from the SymPy form of the tree.

  Useful for cross-checking the tree evaluator; constant expressions
  still accept (and ignore) the x argument.
  """
  return sp.lambdify(sp.Symbol(VARIABLE_NAME), to_sympy_expression(node), modules='numpy')
