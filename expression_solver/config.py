"""
Solver configuration.

Defaults reproduce the behaviour of the original calculator: a forward
difference step of 1e-12, at most 1000 Newton steps, and a residual
threshold equal to the smallest positive normal double (DBL_MIN).
"""

from dataclasses import dataclass

import numpy as np

DEFAULT_DX: float = 1e-12
DEFAULT_MAX_ITERATIONS: int = 1000
DEFAULT_TOLERANCE: float = float(np.finfo(np.float64).tiny)


@dataclass
class SolverConfig:
    """Tunable parameters for Newton's method."""
    dx: float = DEFAULT_DX
    max_iterations: int = DEFAULT_MAX_ITERATIONS
    tolerance: float = DEFAULT_TOLERANCE

    def __post_init__(self):
        if self.max_iterations < 0:
            raise ValueError("max_iterations must be non-negative")
        if self.tolerance < 0:
            raise ValueError("tolerance must be non-negative")
