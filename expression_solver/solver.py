"""
Newton's method root finder.

The derivative is a forward difference, dy = (f(x + dx) - f(x)) / dx, and
the loop stops only once |f(x)| drops below DBL_MIN, which is effectively
an exact-zero test. Reaching the iteration cap is not an error: the last
estimate is returned. A zero derivative produces inf/nan, which propagates
without raising.
"""

from dataclasses import dataclass
from typing import Union

import numpy as np

from .config import SolverConfig, DEFAULT_DX, DEFAULT_MAX_ITERATIONS, DEFAULT_TOLERANCE
from .expression_tree.core.node import Node
from .expression_tree.expression import Expression
from .logging_system import log_iteration, log_warning, log_info, get_logger


@dataclass
class SolveResult:
  """Outcome of a Newton run"""
  root: float
  iterations: int    # Newton steps actually taken
  residual: float    # f(x) at the start of the last step
  converged: bool    # |residual| fell below the tolerance


def _root_node(expression: Union[Node, Expression]) -> Node:
  if isinstance(expression, Expression):
    return expression.root
  return expression


def newton_solve(expression: Union[Node, Expression], x0: float,
                 dx: float = DEFAULT_DX,
                 max_iterations: int = DEFAULT_MAX_ITERATIONS,
                 tolerance: float = DEFAULT_TOLERANCE) -> SolveResult:
  root = _root_node(expression)
  x = np.float64(x0)
  step = np.float64(dx)
  y = np.float64(np.nan)

  with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
    for i in range(max_iterations):
      y = np.float64(root.evaluate(float(x)))
      dy = (np.float64(root.evaluate(float(x + step))) - y) / step
      x = x - y / dy
      log_iteration(i + 1, float(x), float(y), float(dy))
      if abs(y) < tolerance:
        result = SolveResult(float(x), i + 1, float(y), True)
        log_info(f"Converged after {i + 1} iterations: x={float(x):.12g}")
        return result

  if not np.isfinite(x):
    log_warning(f"Newton estimate is not finite after {max_iterations} iterations")
  else:
    log_warning(f"No exact root after {max_iterations} iterations, "
                f"returning x={float(x):.12g} (f(x)={float(y):.6g})")
  return SolveResult(float(x), max_iterations, float(y), False)


def solve_with_config(expression: Union[Node, Expression], x0: float,
                      config: SolverConfig) -> SolveResult:
  result = newton_solve(expression, x0, dx=config.dx,
                        max_iterations=config.max_iterations,
                        tolerance=config.tolerance)
  get_logger().result_summary({
    'root': result.root,
    'iterations': result.iterations,
    'residual': result.residual,
    'converged': result.converged,
  })
  return result


def solve(expression: Union[Node, Expression], x0: float,
          dx: float = DEFAULT_DX,
          max_iterations: int = DEFAULT_MAX_ITERATIONS,
          tolerance: float = DEFAULT_TOLERANCE) -> float:
  """Approximate a root of expression(x) = 0 near x0."""
  return newton_solve(expression, x0, dx, max_iterations, tolerance).root
