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
  ADD = 0
  SUB = 1
  MUL = 2
  DIV = 3
  POW = 4
  # Unary ops
  NEG = 5

BINARY_OPS = frozenset({OpType.ADD, OpType.SUB, OpType.MUL, OpType.DIV, OpType.POW})
UNARY_OPS = frozenset({OpType.NEG})

# Mapping dictionaries
BINARY_OP_MAP = {'+': OpType.ADD, '-': OpType.SUB, '*': OpType.MUL, '/': OpType.DIV, '^': OpType.POW}
# Unary '+' is deliberately absent: the parser drops it instead of building a node
UNARY_OP_MAP = {'-': OpType.NEG}

OP_SYMBOLS = {
  OpType.ADD: '+', OpType.SUB: '-', OpType.MUL: '*',
  OpType.DIV: '/', OpType.POW: '^', OpType.NEG: '-'
}

# Lower value splits first when scanning for the root operator
SPLIT_PRECEDENCE = {'+': 0, '-': 0, '*': 1, '/': 1, '^': 2}

# error_model='numpy' keeps IEEE results (inf/nan) instead of raising ZeroDivisionError.
# No fastmath: it would allow the compiler to assume values are finite.
@numba.njit(cache=True, error_model='numpy')
def evaluate_binary_op(left_val, right_val, op_type):
  if op_type == OpType.ADD:
    return left_val + right_val
  elif op_type == OpType.SUB:
    return left_val - right_val
  elif op_type == OpType.MUL:
    return left_val * right_val
  elif op_type == OpType.DIV:
    return left_val / right_val
  else:
    return np.power(left_val, right_val)

@numba.njit(cache=True, error_model='numpy')
def evaluate_unary_op(operand_val, op_type):
  if op_type == OpType.NEG:
    return -operand_val
  return operand_val
