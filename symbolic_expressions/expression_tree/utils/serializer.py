"""Canonical text rendering of expression trees.

``render``, ``measure`` and ``render_into`` all consume the same fragment
stream from ``_fragments``, so the measured size and the written bytes always
agree.
"""

from typing import Iterator, Union

from ..core.node import Node, node_kind
from ..core.operators import (
  ExprKind, BINARY_GLYPHS, FUNCTION_NAMES, SELF_DELIMITED_KINDS,
  NEGATION_PREFIX, INVERSE_SUFFIX, CONSTANT_FORMAT, MAX_EXPRESSION_DEPTH
)
from .tree_utils import ensure_within_depth

ENCODING = 'utf-8'


def _fragments(node: Node, depth: int) -> Iterator[str]:
  kind = node_kind(node, 'serialize')
  parenthesize = depth > 0 and kind not in SELF_DELIMITED_KINDS

  if parenthesize:
    yield '('

  if kind == ExprKind.CONSTANT:
    yield format(node.value, CONSTANT_FORMAT)

  elif kind == ExprKind.VARIABLE:
    yield node.name

  elif kind == ExprKind.PRODUCT:
    left_kind = node_kind(node.left, 'serialize')
    right_kind = node_kind(node.right, 'serialize')

    if (left_kind == ExprKind.CONSTANT and right_kind == ExprKind.VARIABLE) or left_kind == ExprKind.SUM:
      yield from _fragments(node.left, depth + 1)
      yield from _fragments(node.right, depth + 1)
    elif (left_kind == ExprKind.VARIABLE and right_kind == ExprKind.CONSTANT) or right_kind == ExprKind.SUM:
      # coefficient or bracketed sum goes first: x*3 -> 3x
      yield from _fragments(node.right, depth + 1)
      yield from _fragments(node.left, depth + 1)
    else:
      yield from _fragments(node.left, depth + 1)
      yield BINARY_GLYPHS[kind]
      yield from _fragments(node.right, depth + 1)

  elif kind == ExprKind.LOGARITHM:
    yield FUNCTION_NAMES[kind] + '('
    yield from _fragments(node.left, depth + 1)
    yield ','
    yield from _fragments(node.right, depth + 1)
    yield ')'

  elif kind in BINARY_GLYPHS:
    yield from _fragments(node.left, depth + 1)
    yield BINARY_GLYPHS[kind]
    yield from _fragments(node.right, depth + 1)

  elif kind in (ExprKind.SIN, ExprKind.COS, ExprKind.TAN):
    yield FUNCTION_NAMES[kind] + '('
    yield from _fragments(node.operand, depth + 1)
    yield ')'

  elif kind == ExprKind.NEGATION:
    yield NEGATION_PREFIX
    yield from _fragments(node.operand, depth + 1)

  else:
    # inverse
    yield from _fragments(node.operand, depth + 1)
    yield INVERSE_SUFFIX

  if parenthesize:
    yield ')'


def _root_of(target) -> Node:
  # Accept an Expression wrapper as well as a bare node
  return getattr(target, 'root', target)


def render(target, max_depth: int = MAX_EXPRESSION_DEPTH) -> str:
  """Canonical rendering of a node or Expression"""
  root = _root_of(target)
  ensure_within_depth(root, max_depth)
  return ''.join(_fragments(root, 0))


def measure(target, max_depth: int = MAX_EXPRESSION_DEPTH) -> int:
  """Exact size in UTF-8 bytes of what render_into will write"""
  root = _root_of(target)
  ensure_within_depth(root, max_depth)
  return sum(len(fragment.encode(ENCODING)) for fragment in _fragments(root, 0))


def render_into(buffer: Union[bytearray, memoryview], target,
                max_depth: int = MAX_EXPRESSION_DEPTH) -> int:
  """Write the UTF-8 rendering into a caller-sized buffer and return the bytes written.

  The buffer must hold at least measure(target) bytes; a smaller one raises
  ValueError and is left untouched. No terminator is written.
  """
  view = memoryview(buffer).cast('B')
  if view.readonly:
    raise TypeError("render_into needs a writable buffer")

  encoded = render(target, max_depth=max_depth).encode(ENCODING)
  written = len(encoded)
  if written > len(view):
    raise ValueError(f"buffer of {len(view)} bytes cannot hold {written}-byte rendering")

  view[:written] = encoded
  return written
