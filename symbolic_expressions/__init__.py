# Python

"""Symbolic Expressions Package

Symbolic arithmetic expression trees with canonical rendering and
constant-folding simplification.
"""

from .expression_tree import (
  Expression, Node, VariableNode, ConstantNode, BinaryOpNode, UnaryOpNode,
  NodeType, OpType, ExprKind, MAX_EXPRESSION_DEPTH,
  ExpressionError, CorruptedExpressionError, ExpressionDepthError, InvalidExpressionError,
  make_constant, make_variable,
  make_negation, make_inverse, make_sin, make_cos, make_tan,
  make_product, make_quotient, make_sum, make_difference,
  make_exponential, make_logarithm, make_power,
  is_binary, is_foldable, count_by_kind,
  render, measure, render_into,
  ExpressionSimplifier, simplify, simplify_node,
  ExpressionValidator
)
from .logging_system import LogLevel, get_logger, set_log_level, configure_logging

__version__ = "0.1.0"
__all__ = [
  "Expression", "Node", "VariableNode", "ConstantNode", "BinaryOpNode", "UnaryOpNode",
  "NodeType", "OpType", "ExprKind", "MAX_EXPRESSION_DEPTH",
  "ExpressionError", "CorruptedExpressionError", "ExpressionDepthError", "InvalidExpressionError",
  "make_constant", "make_variable",
  "make_negation", "make_inverse", "make_sin", "make_cos", "make_tan",
  "make_product", "make_quotient", "make_sum", "make_difference",
  "make_exponential", "make_logarithm", "make_power",
  "is_binary", "is_foldable", "count_by_kind",
  "render", "measure", "render_into",
  "ExpressionSimplifier", "simplify", "simplify_node",
  "ExpressionValidator",
  "LogLevel", "get_logger", "set_log_level", "configure_logging"
]
