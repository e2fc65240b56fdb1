import numpy as np
import numba
from enum import IntEnum

class NodeType(IntEnum):
  VARIABLE = 0
  CONSTANT = 1
  BINARY_OP = 2
  UNARY_OP = 3

class OpType(IntEnum):
  # Binary ops
  PRODUCT = 0
  QUOTIENT = 1
  SUM = 2
  DIFFERENCE = 3
  EXPONENTIAL = 4
  LOGARITHM = 5
  POWER = 6
  # Unary ops
  NEGATION = 7
  INVERSE = 8
  SIN = 9
  COS = 10
  TAN = 11

class ExprKind(IntEnum):
  """Discriminant of every node: the two leaf kinds plus one per operator"""
  PRODUCT = 0
  QUOTIENT = 1
  SUM = 2
  DIFFERENCE = 3
  EXPONENTIAL = 4
  LOGARITHM = 5
  POWER = 6
  NEGATION = 7
  INVERSE = 8
  SIN = 9
  COS = 10
  TAN = 11
  CONSTANT = 12
  VARIABLE = 13

BINARY_OPS = frozenset({
  OpType.PRODUCT, OpType.QUOTIENT, OpType.SUM, OpType.DIFFERENCE,
  OpType.EXPONENTIAL, OpType.LOGARITHM, OpType.POWER
})
UNARY_OPS = frozenset({OpType.NEGATION, OpType.INVERSE, OpType.SIN, OpType.COS, OpType.TAN})

# Unary ops that fold a constant operand; negation deliberately absent
FOLDING_UNARY_OPS = frozenset({OpType.INVERSE, OpType.SIN, OpType.COS, OpType.TAN})

# Infix glyphs; exponential and power share '^'
BINARY_GLYPHS = {
  OpType.PRODUCT: '*',
  OpType.QUOTIENT: '/',
  OpType.SUM: '+',
  OpType.DIFFERENCE: '-',
  OpType.EXPONENTIAL: '^',
  OpType.POWER: '^',
}

FUNCTION_NAMES = {
  OpType.LOGARITHM: 'log',
  OpType.SIN: 'sin',
  OpType.COS: 'cos',
  OpType.TAN: 'tan',
}

# Kinds that never take depth parentheses
SELF_DELIMITED_KINDS = frozenset({
  ExprKind.CONSTANT, ExprKind.VARIABLE, ExprKind.PRODUCT,
  ExprKind.LOGARITHM, ExprKind.SIN, ExprKind.COS, ExprKind.TAN
})

NEGATION_PREFIX = '-'
INVERSE_SUFFIX = '⁻¹'  # superscript minus one
CONSTANT_FORMAT = '.3g'

# Deepest tree the recursive traversals accept
MAX_EXPRESSION_DEPTH = 256

@numba.njit(cache=True, error_model='numpy')
def fold_binary_op(left, right, op_type):
  if op_type == OpType.SUM:
    return left + right
  elif op_type == OpType.DIFFERENCE:
    return left - right
  elif op_type == OpType.PRODUCT:
    return left * right
  elif op_type == OpType.QUOTIENT:
    return left / right
  elif op_type == OpType.POWER or op_type == OpType.EXPONENTIAL:
    return np.power(left, right)
  elif op_type == OpType.LOGARITHM:
    # left is the base
    return np.log(right) / np.log(left)
  return np.nan

@numba.njit(cache=True, error_model='numpy')
def fold_unary_op(operand, op_type):
  if op_type == OpType.NEGATION:
    return -operand
  elif op_type == OpType.INVERSE:
    return 1.0 / operand
  elif op_type == OpType.SIN:
    return np.sin(operand)
  elif op_type == OpType.COS:
    return np.cos(operand)
  elif op_type == OpType.TAN:
    return np.tan(operand)
  return np.nan

@numba.njit(cache=True, error_model='numpy')
def evaluate_binary_op(left_val, right_val, op_type):
  out = np.empty_like(left_val)
  for i in range(left_val.shape[0]):
    out[i] = fold_binary_op(left_val[i], right_val[i], op_type)
  return out

@numba.njit(cache=True, error_model='numpy')
def evaluate_unary_op(operand_val, op_type):
  out = np.empty_like(operand_val)
  for i in range(operand_val.shape[0]):
    out[i] = fold_unary_op(operand_val[i], op_type)
  return out
