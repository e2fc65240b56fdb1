from ..core.node import Node, ConstantNode, node_kind, is_foldable
from ..core.operators import ExprKind, BINARY_OPS, MAX_EXPRESSION_DEPTH
from .tree_utils import ensure_within_depth
from ...logging_system import LogLevel, log_debug, log_info


class ExpressionSimplifier:
  """Constant folding with one opportunistic extra pass per rebuilt node"""

  @staticmethod
  def simplify_node(node: Node) -> Node:
    """Simplify in place and return the node that should take this node's slot.

    Child slots are overwritten with their simplified replacements. The return
    value is either ``node`` itself or a new ConstantNode when it folded.
    """
    kind = node_kind(node, 'simplify')

    if kind in (ExprKind.CONSTANT, ExprKind.VARIABLE):
      return node

    if kind in BINARY_OPS:
      if isinstance(node.left, ConstantNode) and isinstance(node.right, ConstantNode):
        return ExpressionSimplifier._fold(node, kind)
      node.left = ExpressionSimplifier.simplify_node(node.left)
      node.right = ExpressionSimplifier.simplify_node(node.right)

    elif kind == ExprKind.NEGATION:
      # never folded, even over a constant operand
      node.operand = ExpressionSimplifier.simplify_node(node.operand)

    else:
      if isinstance(node.operand, ConstantNode):
        return ExpressionSimplifier._fold(node, kind)
      node.operand = ExpressionSimplifier.simplify_node(node.operand)

    # Children may have turned constant; one more pass folds the rebuilt node
    if is_foldable(node):
      return ExpressionSimplifier.simplify_node(node)
    return node

  @staticmethod
  def _fold(node: Node, kind: ExprKind) -> ConstantNode:
    value = node.fold()
    log_debug(f"folded {kind.name.lower()} to {value!r}")
    return ConstantNode(value)


def simplify_node(node: Node, max_depth: int = MAX_EXPRESSION_DEPTH) -> Node:
  ensure_within_depth(node, max_depth)
  return ExpressionSimplifier.simplify_node(node)


def simplify(expression, max_depth: int = MAX_EXPRESSION_DEPTH) -> None:
  """Constant-fold an Expression in place.

  The wrapper's root is replaced when the whole tree folds to a constant.
  Bare nodes cannot be rebound from here; use simplify_node for those.
  """
  if not hasattr(expression, 'root'):
    raise TypeError("simplify() rewrites an Expression in place; use simplify_node() for a bare node")

  size_before = expression.root.size()
  expression.root = simplify_node(expression.root, max_depth=max_depth)
  log_info(f"simplified expression from {size_before} to {expression.root.size()} nodes",
           LogLevel.DETAILED)
