"""
Tree Utility Functions

Traversal and query helpers shared by the serializer, the simplifier and the
validator. The traversals here are iterative so they are safe to call on
trees that are too deep for the recursive algorithms.
"""

from collections import deque
from typing import List, Set

from ..core.node import Node, ConstantNode, VariableNode, children_of, iter_nodes
from ..core.operators import MAX_EXPRESSION_DEPTH
from ..core.errors import ExpressionDepthError, InvalidExpressionError
from ...logging_system import log_warning


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
        return list(iter_nodes(node))
    else:
        raise ValueError(f"Invalid traversal_order: {traversal_order}")


def _breadth_first_traversal(node: Node) -> List[Node]:
    nodes_to_visit = deque([node])
    all_nodes = []

    while nodes_to_visit:
        current_node = nodes_to_visit.popleft()
        all_nodes.append(current_node)
        nodes_to_visit.extend(children_of(current_node, 'get_all_nodes'))

    return all_nodes


def calculate_tree_depth(node: Node) -> int:
    """
    Calculate the maximum depth of the tree.

    Args:
        node: Root node of the tree

    Returns:
        Maximum depth (leaf nodes have depth 1)

    Raises:
        InvalidExpressionError: if the tree contains a cycle
    """
    max_depth = 0
    distinct = set()
    stack = [(node, 1)]
    while stack:
        current, depth = stack.pop()
        distinct.add(id(current))
        # an acyclic path can never be longer than the number of distinct nodes
        if depth > len(distinct):
            raise InvalidExpressionError("expression contains a cycle")
        if depth > max_depth:
            max_depth = depth
        for child in children_of(current, 'calculate_tree_depth'):
            stack.append((child, depth + 1))
    return max_depth


def ensure_within_depth(node: Node, max_depth: int = MAX_EXPRESSION_DEPTH) -> int:
    """Raise ExpressionDepthError if the tree is deeper than max_depth; returns the depth"""
    depth = calculate_tree_depth(node)
    if depth > max_depth:
        log_warning(f"refusing to traverse expression of depth {depth} (limit {max_depth})")
        raise ExpressionDepthError(depth, max_depth)
    return depth


def get_constants(node: Node) -> List[float]:
    """Constant values in left-to-right order"""
    return [n.value for n in iter_nodes(node) if isinstance(n, ConstantNode)]


def get_variables(node: Node) -> Set[str]:
    return {n.name for n in iter_nodes(node) if isinstance(n, VariableNode)}


def clone_tree(node: Node, max_depth: int = MAX_EXPRESSION_DEPTH) -> Node:
    """Deep copy of a tree; copying recurses, so the depth guard applies"""
    ensure_within_depth(node, max_depth)
    return node.copy()
