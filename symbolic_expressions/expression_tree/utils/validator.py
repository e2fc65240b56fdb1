from ..core.node import Node, ConstantNode, VariableNode, node_kind
from ..core.operators import MAX_EXPRESSION_DEPTH
from ..core.errors import InvalidExpressionError, ExpressionDepthError
from .tree_utils import ensure_within_depth


class ExpressionValidator:
  """Explicit structural checks; construction itself never validates"""

  @staticmethod
  def validate(node: Node, max_depth: int = MAX_EXPRESSION_DEPTH) -> None:
    # Ownership first: a cycle would otherwise never finish the depth walk
    ExpressionValidator._check_ownership(node)
    ensure_within_depth(node, max_depth)

  @staticmethod
  def is_valid_expression(node: Node, max_depth: int = MAX_EXPRESSION_DEPTH) -> bool:
    try:
      ExpressionValidator.validate(node, max_depth)
    except (InvalidExpressionError, ExpressionDepthError):
      return False
    return True

  @staticmethod
  def _check_ownership(node: Node) -> None:
    seen = set()
    stack = [node]
    while stack:
      current = stack.pop()
      if id(current) in seen:
        raise InvalidExpressionError(
          f"{type(current).__name__} ({node_kind(current, 'validate').name}) is reachable more than once; "
          "children must not be shared")
      seen.add(id(current))
      # unknown node kinds are fatal, not a validation failure
      node_kind(current, 'validate')
      ExpressionValidator._check_payload(current)
      stack.extend(current.children())

  @staticmethod
  def _check_payload(node: Node) -> None:
    if isinstance(node, VariableNode):
      name = node.name
      if not (isinstance(name, str) and len(name) == 1 and name.isascii()):
        raise InvalidExpressionError(f"variable name must be a single ASCII character, got {name!r}")
    elif isinstance(node, ConstantNode):
      if not isinstance(node.value, float):
        raise InvalidExpressionError(f"constant must hold a float, got {node.value!r}")
