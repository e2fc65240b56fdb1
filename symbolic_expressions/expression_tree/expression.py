import numpy as np
import sympy as sp
from typing import Mapping, Optional, Union
from .core.node import Node, Binding
from .core.operators import MAX_EXPRESSION_DEPTH
from .utils.serializer import render, measure, render_into
from .utils.simplifier import simplify
from .utils.tree_utils import calculate_tree_depth, clone_tree, ensure_within_depth
from .utils.validator import ExpressionValidator


class Expression:
  """Owns the root of an expression tree.

  Simplification may replace the root node itself (a fully constant tree
  folds to a single ConstantNode); holding the root here keeps that an
  in-place change for whoever holds the Expression.
  """

  __slots__ = ('root',)

  def __init__(self, root: Node):
    self.root = root

  def to_string(self, max_depth: int = MAX_EXPRESSION_DEPTH) -> str:
    return render(self.root, max_depth=max_depth)

  def measure(self, max_depth: int = MAX_EXPRESSION_DEPTH) -> int:
    """UTF-8 byte size of the rendering"""
    return measure(self.root, max_depth=max_depth)

  def render_into(self, buffer, max_depth: int = MAX_EXPRESSION_DEPTH) -> int:
    return render_into(buffer, self.root, max_depth=max_depth)

  def simplify(self, max_depth: int = MAX_EXPRESSION_DEPTH) -> None:
    simplify(self, max_depth=max_depth)

  def evaluate(self, bindings: Optional[Mapping[str, Binding]] = None,
               max_depth: int = MAX_EXPRESSION_DEPTH) -> Union[float, np.ndarray]:
    """Numeric value for the given variable bindings.

    Returns a float when every binding is a scalar, otherwise an array
    broadcast across the bound arrays.
    """
    bindings = {} if bindings is None else bindings
    ensure_within_depth(self.root, max_depth)
    result = self.root.evaluate(bindings)
    arrays = [np.asarray(value) for value in bindings.values() if np.ndim(value) > 0]
    if not arrays:
      return float(result[0])
    # a subtree without variables evaluates to one element
    return np.array(np.broadcast_to(result, np.broadcast(result, *arrays).shape))

  def copy(self) -> 'Expression':
    return Expression(clone_tree(self.root))

  def size(self) -> int:
    """Node count"""
    return self.root.size()

  def depth(self) -> int:
    return calculate_tree_depth(self.root)

  def validate(self, max_depth: int = MAX_EXPRESSION_DEPTH) -> None:
    ExpressionValidator.validate(self.root, max_depth)

  def to_sympy(self, max_depth: int = MAX_EXPRESSION_DEPTH) -> sp.Expr:
    ensure_within_depth(self.root, max_depth)
    return self.root.to_sympy()

  def to_latex(self) -> str:
    return sp.latex(self.to_sympy())

  def __str__(self) -> str:
    return self.to_string()

  def __repr__(self) -> str:
    return f"Expression({self.root!r})"
