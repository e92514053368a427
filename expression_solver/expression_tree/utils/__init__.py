"""Utilities for expression trees."""

from .sympy_utils import to_sympy_expression, latex_representation, sympy_lambdify
from .tree_utils import (
    get_children, get_all_nodes, calculate_tree_depth, find_nodes_by_type,
    get_constants, get_variables, contains_variable, count_operators
)

__all__ = [
    'to_sympy_expression', 'latex_representation', 'sympy_lambdify',
    'get_children', 'get_all_nodes', 'calculate_tree_depth', 'find_nodes_by_type',
    'get_constants', 'get_variables', 'contains_variable', 'count_operators'
]
