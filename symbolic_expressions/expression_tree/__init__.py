"""Expression Tree Module

Expression model, canonical serializer and constant-folding simplifier.
"""

from .expression import Expression
from .core.node import (
    Node,
    VariableNode,
    ConstantNode,
    BinaryOpNode,
    UnaryOpNode,
    is_binary,
    is_foldable,
    count_by_kind
)
from .core.operators import NodeType, OpType, ExprKind, MAX_EXPRESSION_DEPTH
from .core.errors import (
    ExpressionError, CorruptedExpressionError, ExpressionDepthError, InvalidExpressionError
)
from .constructors import (
    make_constant, make_variable,
    make_negation, make_inverse, make_sin, make_cos, make_tan,
    make_product, make_quotient, make_sum, make_difference,
    make_exponential, make_logarithm, make_power
)
from .utils import (
    render, measure, render_into,
    ExpressionSimplifier, simplify, simplify_node,
    ExpressionValidator,
    get_all_nodes, calculate_tree_depth, get_constants, get_variables, clone_tree
)

__all__ = [
    "Expression",
    "Node", "VariableNode", "ConstantNode", "BinaryOpNode", "UnaryOpNode",
    "is_binary", "is_foldable", "count_by_kind",
    "NodeType", "OpType", "ExprKind", "MAX_EXPRESSION_DEPTH",
    "ExpressionError", "CorruptedExpressionError", "ExpressionDepthError", "InvalidExpressionError",
    "make_constant", "make_variable",
    "make_negation", "make_inverse", "make_sin", "make_cos", "make_tan",
    "make_product", "make_quotient", "make_sum", "make_difference",
    "make_exponential", "make_logarithm", "make_power",
    "render", "measure", "render_into",
    "ExpressionSimplifier", "simplify", "simplify_node",
    "ExpressionValidator",
    "get_all_nodes", "calculate_tree_depth", "get_constants", "get_variables", "clone_tree"
]
