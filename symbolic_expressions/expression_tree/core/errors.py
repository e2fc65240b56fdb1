"""Exceptions raised by the expression tree."""


class ExpressionError(Exception):
  """Base class for all expression tree errors"""


class CorruptedExpressionError(ExpressionError, RuntimeError):
  """A node carries a kind outside the known set.

  This signals a corrupted tree, not bad user input. Nothing in the package
  catches it.
  """

  def __init__(self, where: str, node):
    self.where = where
    self.node = node
    super().__init__(f"{where}: corrupted/unhandled expression variant {node!r}")


class ExpressionDepthError(ExpressionError, ValueError):
  """Tree is deeper than the traversal limit"""

  def __init__(self, depth: int, max_depth: int):
    self.depth = depth
    self.max_depth = max_depth
    super().__init__(f"expression depth {depth} exceeds maximum of {max_depth}")


class InvalidExpressionError(ExpressionError, ValueError):
  """Tree breaks a structural invariant (shared child, bad variable name, ...)"""
