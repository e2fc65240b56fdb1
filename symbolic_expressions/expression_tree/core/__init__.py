"""Core expression tree components."""

from .node import (
    Node, VariableNode, ConstantNode, BinaryOpNode, UnaryOpNode,
    is_binary, is_foldable, node_kind, iter_nodes, count_by_kind
)
from .operators import (
    NodeType, OpType, ExprKind, BINARY_OPS, UNARY_OPS, FOLDING_UNARY_OPS,
    MAX_EXPRESSION_DEPTH, fold_binary_op, fold_unary_op,
    evaluate_binary_op, evaluate_unary_op
)
from .errors import (
    ExpressionError, CorruptedExpressionError, ExpressionDepthError, InvalidExpressionError
)

__all__ = [
    'Node', 'VariableNode', 'ConstantNode', 'BinaryOpNode', 'UnaryOpNode',
    'is_binary', 'is_foldable', 'node_kind', 'iter_nodes', 'count_by_kind',
    'NodeType', 'OpType', 'ExprKind', 'BINARY_OPS', 'UNARY_OPS', 'FOLDING_UNARY_OPS',
    'MAX_EXPRESSION_DEPTH', 'fold_binary_op', 'fold_unary_op',
    'evaluate_binary_op', 'evaluate_unary_op',
    'ExpressionError', 'CorruptedExpressionError', 'ExpressionDepthError', 'InvalidExpressionError'
]
