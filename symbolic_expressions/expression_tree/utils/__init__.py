"""Algorithms and utilities for expression trees."""

from .serializer import render, measure, render_into
from .simplifier import ExpressionSimplifier, simplify, simplify_node
from .validator import ExpressionValidator
from .tree_utils import (
    get_all_nodes, calculate_tree_depth, ensure_within_depth,
    get_constants, get_variables, clone_tree
)

__all__ = [
    'render', 'measure', 'render_into',
    'ExpressionSimplifier', 'simplify', 'simplify_node',
    'ExpressionValidator',
    'get_all_nodes', 'calculate_tree_depth', 'ensure_within_depth',
    'get_constants', 'get_variables', 'clone_tree'
]
