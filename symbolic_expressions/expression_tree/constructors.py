"""One constructor per expression kind.

Children are taken by ownership: a node passed in must not be reused
elsewhere in the same tree. Nothing is validated here; see
``ExpressionValidator`` for an explicit check.
"""

from .core.node import Node, ConstantNode, VariableNode, BinaryOpNode, UnaryOpNode
from .core.operators import OpType


def make_constant(value: float) -> ConstantNode:
  return ConstantNode(value)


def make_variable(name: str) -> VariableNode:
  return VariableNode(name)


def make_negation(operand: Node) -> UnaryOpNode:
  return UnaryOpNode(OpType.NEGATION, operand)


def make_inverse(operand: Node) -> UnaryOpNode:
  return UnaryOpNode(OpType.INVERSE, operand)


def make_sin(operand: Node) -> UnaryOpNode:
  return UnaryOpNode(OpType.SIN, operand)


def make_cos(operand: Node) -> UnaryOpNode:
  return UnaryOpNode(OpType.COS, operand)


def make_tan(operand: Node) -> UnaryOpNode:
  return UnaryOpNode(OpType.TAN, operand)


def make_product(left: Node, right: Node) -> BinaryOpNode:
  return BinaryOpNode(OpType.PRODUCT, left, right)


def make_quotient(left: Node, right: Node) -> BinaryOpNode:
  return BinaryOpNode(OpType.QUOTIENT, left, right)


def make_sum(left: Node, right: Node) -> BinaryOpNode:
  return BinaryOpNode(OpType.SUM, left, right)


def make_difference(left: Node, right: Node) -> BinaryOpNode:
  return BinaryOpNode(OpType.DIFFERENCE, left, right)


def make_exponential(left: Node, right: Node) -> BinaryOpNode:
  return BinaryOpNode(OpType.EXPONENTIAL, left, right)


def make_logarithm(base: Node, argument: Node) -> BinaryOpNode:
  return BinaryOpNode(OpType.LOGARITHM, base, argument)


def make_power(left: Node, right: Node) -> BinaryOpNode:
  return BinaryOpNode(OpType.POWER, left, right)
