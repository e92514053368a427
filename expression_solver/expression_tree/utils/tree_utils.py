"""
Tree Utility Functions

Traversal and inspection helpers for parsed expression trees.
"""

from typing import List, Dict, Type, TypeVar
from collections import Counter

from ..core.node import Node, BinaryOpNode, UnaryOpNode, ConstantNode, VariableNode
from ..core.operators import OP_SYMBOLS

T = TypeVar('T', bound=Node)


def get_children(node: Node) -> List[Node]:
    """Direct children in evaluation order (left before right)."""
    if isinstance(node, BinaryOpNode):
        return [node.left, node.right]
    if isinstance(node, UnaryOpNode):
        return [node.operand]
    return []


def get_all_nodes(node: Node, traversal_order: str = 'breadth_first') -> List[Node]:
    """
    Get all nodes in the tree using specified traversal order.

    Args:
        node: Root node of the tree
        traversal_order: 'breadth_first' (default) or 'depth_first'

    Returns:
        List of all nodes in the tree
    """
    if traversal_order == 'breadth_first':
        return _breadth_first_traversal(node)
    elif traversal_order == 'depth_first':
        return _depth_first_traversal(node)
    else:
        raise ValueError(f"Invalid traversal_order: {traversal_order}")


def _breadth_first_traversal(node: Node) -> List[Node]:
    """Breadth-first traversal (iterative, non-recursive)"""
    nodes_to_visit = [node]
    all_nodes = []

    while nodes_to_visit:
        current_node = nodes_to_visit.pop(0)  # FIFO for breadth-first
        all_nodes.append(current_node)
        nodes_to_visit.extend(get_children(current_node))

    return all_nodes


def _depth_first_traversal(node: Node) -> List[Node]:
    """Depth-first pre-order traversal (iterative, non-recursive)"""
    nodes_to_visit = [node]
    all_nodes = []

    while nodes_to_visit:
        current_node = nodes_to_visit.pop()  # LIFO for depth-first
        all_nodes.append(current_node)
        nodes_to_visit.extend(reversed(get_children(current_node)))

    return all_nodes


def calculate_tree_depth(node: Node) -> int:
    """
    Calculate the maximum depth of the tree.

    Args:
        node: Root node of the tree

    Returns:
        Maximum depth (leaf nodes have depth 1)
    """
    max_depth = 0
    stack = [(node, 1)]
    while stack:
        current_node, depth = stack.pop()
        max_depth = max(max_depth, depth)
        for child in get_children(current_node):
            stack.append((child, depth + 1))
    return max_depth


def find_nodes_by_type(node: Node, node_type: Type[T]) -> List[T]:
    """Find all nodes of a specific type"""
    return [n for n in get_all_nodes(node, 'depth_first') if isinstance(n, node_type)]


def get_constants(node: Node) -> List[float]:
    """Constant values in left-to-right order."""
    return [n.value for n in find_nodes_by_type(node, ConstantNode)]


def get_variables(node: Node) -> List[VariableNode]:
    return find_nodes_by_type(node, VariableNode)


def contains_variable(node: Node) -> bool:
    """True if closed-form evaluation of the tree would hit the variable."""
    return any(isinstance(n, VariableNode) for n in get_all_nodes(node, 'depth_first'))


def count_operators(node: Node) -> Dict[str, int]:
    """Operator symbol -> number of occurrences (unary minus counted as 'neg')."""
    counts: Counter = Counter()
    for n in get_all_nodes(node):
        if isinstance(n, BinaryOpNode):
            counts[OP_SYMBOLS[n.operator]] += 1
        elif isinstance(n, UnaryOpNode):
            counts['neg'] += 1
    return dict(counts)
