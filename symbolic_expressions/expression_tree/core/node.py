import numpy as np
import sympy as sp
from abc import ABC, abstractmethod
from typing import Dict, Iterator, Mapping, Union
from .operators import (
  NodeType, OpType, ExprKind, BINARY_OPS, UNARY_OPS, FOLDING_UNARY_OPS,
  fold_binary_op, fold_unary_op, evaluate_binary_op, evaluate_unary_op
)
from .errors import CorruptedExpressionError
from ...logging_system import log_critical

Binding = Union[float, np.ndarray]


def corrupted_expression(where: str, node) -> CorruptedExpressionError:
  """Log and build the fatal error for a node of unknown kind"""
  error = CorruptedExpressionError(where, node)
  log_critical(str(error))
  return error


class Node(ABC):
  """Base node class; one subclass per payload shape"""

  __slots__ = ()

  node_type: NodeType

  @property
  @abstractmethod
  def kind(self) -> ExprKind:
    pass

  @abstractmethod
  def children(self) -> tuple:
    pass

  @abstractmethod
  def evaluate(self, bindings: Mapping[str, Binding]) -> np.ndarray:
    pass

  @abstractmethod
  def copy(self) -> 'Node':
    pass

  @abstractmethod
  def to_sympy(self) -> sp.Expr:
    pass

  def size(self) -> int:
    """Node count of the subtree"""
    count = 0
    stack = [self]
    while stack:
      node = stack.pop()
      count += 1
      stack.extend(children_of(node, 'size'))
    return count

  def __str__(self) -> str:
    from ..utils.serializer import render
    return render(self)


class VariableNode(Node):
  __slots__ = ('name',)
  node_type = NodeType.VARIABLE

  def __init__(self, name: str):
    self.name = name

  @property
  def kind(self) -> ExprKind:
    return ExprKind.VARIABLE

  def children(self) -> tuple:
    return ()

  def evaluate(self, bindings: Mapping[str, Binding]) -> np.ndarray:
    if self.name not in bindings:
      raise KeyError(f"no value bound for variable '{self.name}'")
    return np.atleast_1d(np.asarray(bindings[self.name], dtype=np.float64))

  def copy(self) -> 'VariableNode':
    return VariableNode(self.name)

  def to_sympy(self) -> sp.Expr:
    return sp.Symbol(self.name)

  def __repr__(self) -> str:
    return f"VariableNode({self.name!r})"


class ConstantNode(Node):
  __slots__ = ('value',)
  node_type = NodeType.CONSTANT

  def __init__(self, value: float):
    self.value = float(value)

  @property
  def kind(self) -> ExprKind:
    return ExprKind.CONSTANT

  def children(self) -> tuple:
    return ()

  def evaluate(self, bindings: Mapping[str, Binding]) -> np.ndarray:
    return np.array([self.value], dtype=np.float64)

  def copy(self) -> 'ConstantNode':
    return ConstantNode(self.value)

  def to_sympy(self) -> sp.Expr:
    return sp.Float(self.value)

  def __repr__(self) -> str:
    return f"ConstantNode({self.value!r})"


class BinaryOpNode(Node):
  __slots__ = ('operator', 'left', 'right')
  node_type = NodeType.BINARY_OP

  def __init__(self, operator: OpType, left: Node, right: Node):
    self.operator = operator
    self.left = left
    self.right = right

  @property
  def kind(self) -> ExprKind:
    if self.operator not in BINARY_OPS:
      raise corrupted_expression('BinaryOpNode.kind', self)
    return ExprKind(self.operator)

  def children(self) -> tuple:
    return (self.left, self.right)

  def fold(self) -> float:
    """Fold two constant children; caller guarantees both are ConstantNode"""
    return float(fold_binary_op(self.left.value, self.right.value, OpType(self.kind)))

  def evaluate(self, bindings: Mapping[str, Binding]) -> np.ndarray:
    op_type = OpType(self.kind)
    left_val, right_val = np.broadcast_arrays(self.left.evaluate(bindings), self.right.evaluate(bindings))
    return evaluate_binary_op(np.ascontiguousarray(left_val), np.ascontiguousarray(right_val), op_type)

  def copy(self) -> 'BinaryOpNode':
    return BinaryOpNode(self.operator, self.left.copy(), self.right.copy())

  def to_sympy(self) -> sp.Expr:
    kind = self.kind
    left = self.left.to_sympy()
    right = self.right.to_sympy()
    if kind == ExprKind.SUM:
      return sp.Add(left, right)
    elif kind == ExprKind.DIFFERENCE:
      return sp.Add(left, sp.Mul(-1, right))
    elif kind == ExprKind.PRODUCT:
      return sp.Mul(left, right)
    elif kind == ExprKind.QUOTIENT:
      return sp.Mul(left, sp.Pow(right, -1))
    elif kind in (ExprKind.POWER, ExprKind.EXPONENTIAL):
      return sp.Pow(left, right)
    else:
      # logarithm: left is the base
      return sp.log(right, left)

  def __repr__(self) -> str:
    return f"BinaryOpNode({self.operator!r}, {self.left!r}, {self.right!r})"


class UnaryOpNode(Node):
  __slots__ = ('operator', 'operand')
  node_type = NodeType.UNARY_OP

  def __init__(self, operator: OpType, operand: Node):
    self.operator = operator
    self.operand = operand

  @property
  def kind(self) -> ExprKind:
    if self.operator not in UNARY_OPS:
      raise corrupted_expression('UnaryOpNode.kind', self)
    return ExprKind(self.operator)

  def children(self) -> tuple:
    return (self.operand,)

  def fold(self) -> float:
    """Fold a constant operand; caller guarantees operand is ConstantNode"""
    return float(fold_unary_op(self.operand.value, OpType(self.kind)))

  def evaluate(self, bindings: Mapping[str, Binding]) -> np.ndarray:
    op_type = OpType(self.kind)
    return evaluate_unary_op(np.ascontiguousarray(self.operand.evaluate(bindings)), op_type)

  def copy(self) -> 'UnaryOpNode':
    return UnaryOpNode(self.operator, self.operand.copy())

  def to_sympy(self) -> sp.Expr:
    kind = self.kind
    operand = self.operand.to_sympy()
    if kind == ExprKind.NEGATION:
      return sp.Mul(-1, operand)
    elif kind == ExprKind.INVERSE:
      return sp.Pow(operand, -1)
    elif kind == ExprKind.SIN:
      return sp.sin(operand)
    elif kind == ExprKind.COS:
      return sp.cos(operand)
    else:
      return sp.tan(operand)

  def __repr__(self) -> str:
    return f"UnaryOpNode({self.operator!r}, {self.operand!r})"


def node_kind(node: Node, where: str) -> ExprKind:
  """Kind of any node, failing hard on anything outside the hierarchy"""
  if not isinstance(node, (ConstantNode, VariableNode, BinaryOpNode, UnaryOpNode)):
    raise corrupted_expression(where, node)
  return node.kind


def is_binary(node: Node) -> bool:
  """True for the seven two-child kinds; no recursion"""
  return node_kind(node, 'is_binary') in BINARY_OPS


def is_foldable(node: Node) -> bool:
  """True if the node or any descendant has all-constant operands the simplifier reduces.

  A negation of a constant is never reported foldable.
  """
  kind = node_kind(node, 'is_foldable')
  if kind in (ExprKind.CONSTANT, ExprKind.VARIABLE):
    return False
  if kind in BINARY_OPS:
    if isinstance(node.left, ConstantNode) and isinstance(node.right, ConstantNode):
      return True
    return is_foldable(node.left) or is_foldable(node.right)
  if isinstance(node.operand, ConstantNode):
    return kind in FOLDING_UNARY_OPS
  return is_foldable(node.operand)


def children_of(node: Node, where: str) -> tuple:
  if not isinstance(node, Node):
    raise corrupted_expression(where, node)
  return node.children()


def iter_nodes(node: Node) -> Iterator[Node]:
  """Pre-order, left to right, without recursion"""
  stack = [node]
  while stack:
    current = stack.pop()
    yield current
    stack.extend(reversed(children_of(current, 'iter_nodes')))


def count_by_kind(node: Node) -> Dict[ExprKind, int]:
  counts: Dict[ExprKind, int] = {}
  for current in iter_nodes(node):
    kind = node_kind(current, 'count_by_kind')
    counts[kind] = counts.get(kind, 0) + 1
  return counts
