"""
Split-based parser for single-line arithmetic expressions in x.

The parser does not tokenize. It looks for the operator that becomes the
root of the (sub)tree and splits the text there. '+'/'-' bind loosest and
group to the right, so the leftmost binary one is the root: "1-2-3" reads
as 1-(2-3). '*'/'/' come next and also group to the right ("8/2/2" is
8/(2/2)). '^' binds tightest and groups to the left, so the rightmost one
is the root: "2^3^2" reads as (2^3)^2. A '+'/'-' at the start of the text
or right after another operator is a sign, not a binary operator.

Runs of the same operator class are folded in one pass instead of one
recursion level per operator, so long flat sums and products parse at
any length.
"""

import re
from typing import List, Optional, Tuple

from .errors import ParseError, MalformedLiteralError, UnmatchedParenthesisError
from .expression_tree.core.node import (
  Node, VariableNode, ConstantNode, BinaryOpNode, UnaryOpNode, VARIABLE_NAME
)
from .expression_tree.core.operators import BINARY_OP_MAP, UNARY_OP_MAP, SPLIT_PRECEDENCE
from .expression_tree.expression import Expression
from .logging_system import log_debug, debug_enabled

# Characters that start an operand run; the scan jumps to the next delimiter
_OPERAND_CHARS = frozenset('0123456789.' + VARIABLE_NAME)
_DELIMITER_RE = re.compile(r'[-+*/^()]')
_SIGNS = frozenset('+') | frozenset(UNARY_OP_MAP)

_ADDITIVE = 0
_MULTIPLICATIVE = 1
_POWER = 2

# (index, operator character, is a sign)
OperatorEvent = Tuple[int, str, bool]


def find_end(text: str, pos: int) -> Optional[int]:
  """
  Index of the ')' matching the '(' at ``pos``.

  Returns None when ``text[pos]`` is not '('. Raises
  UnmatchedParenthesisError when the group is never closed.
  """
  if pos >= len(text) or text[pos] != '(':
    return None
  depth = 0
  for i in range(pos, len(text)):
    if text[i] == '(':
      depth += 1
    elif text[i] == ')':
      depth -= 1
    if depth == 0:
      return i
  raise UnmatchedParenthesisError(text, pos)


def _top_level_operators(text: str) -> List[OperatorEvent]:
  """Every operator outside parentheses, left to right."""
  events = []
  after_operator = True
  i = 0
  n = len(text)
  while i < n:
    c = text[i]
    if c in _OPERAND_CHARS:
      after_operator = False
      match = _DELIMITER_RE.search(text, i)
      if match is None:
        break
      i = match.start()
      continue
    if c == '(':
      after_operator = False
      i = find_end(text, i) + 1
      continue
    if c == ')':
      raise UnmatchedParenthesisError(text, i)
    if c in SPLIT_PRECEDENCE:
      events.append((i, c, after_operator and c in _SIGNS))
      after_operator = True
    elif not c.isspace():
      after_operator = False
    i += 1
  return events


def _pick_split(events: List[OperatorEvent]) -> Optional[OperatorEvent]:
  if not events:
    return None
  for event in events:
    if not event[2] and SPLIT_PRECEDENCE[event[1]] == _ADDITIVE:
      return event
  if events[0][2]:
    return events[0]
  for event in events:
    if SPLIT_PRECEDENCE[event[1]] == _MULTIPLICATIVE:
      return event
  return [e for e in events if SPLIT_PRECEDENCE[e[1]] == _POWER][-1]


def find_split(text: str) -> Optional[int]:
  """Index of the top-level operator to split on, or None for a leaf."""
  event = _pick_split(_top_level_operators(text))
  return None if event is None else event[0]


def _chain(events: List[OperatorEvent], rank: int) -> List[int]:
  """Positions of the operators folded together with the root split."""
  if rank == _ADDITIVE:
    return [i for i, c, sign in events if not sign and SPLIT_PRECEDENCE[c] == rank]
  if rank == _POWER:
    return [i for i, c, _ in events if SPLIT_PRECEDENCE[c] == rank]
  chain = []
  for k, (i, c, _) in enumerate(events):
    if SPLIT_PRECEDENCE[c] != rank:
      continue
    chain.append(i)
    # A sign after '*' or '/' negates everything to its right
    if k + 1 < len(events) and events[k + 1][2]:
      break
  return chain


def strip_parentheses(text: str) -> str:
  """Remove every layer of parentheses that wraps the whole text."""
  while text and find_end(text, 0) == len(text) - 1:
    text = text[1:-1]
  return text


def _parse_leaf(text: str) -> Node:
  leaf = text.strip()
  if leaf == VARIABLE_NAME:
    return VariableNode()
  try:
    return ConstantNode(float(leaf))
  except ValueError:
    raise MalformedLiteralError("Malformed numeric literal", text) from None


def parse(text: str) -> Node:
  """Parse ``text`` into an expression tree and return its root node."""
  if not text:
    raise MalformedLiteralError("Empty expression", text)

  signs = []
  expr = text
  while True:
    expr = strip_parentheses(expr)
    if not expr:
      message = "Missing operand after sign" if signs else "Empty parentheses"
      raise MalformedLiteralError(message, text)
    events = _top_level_operators(expr)
    split = _pick_split(events)
    if split is None or not split[2]:
      break
    signs.append(split[1])
    expr = expr[split[0] + 1:]

  if split is None:
    node = _parse_leaf(expr)
  else:
    pos, op, _ = split
    if not expr[:pos].strip():
      raise ParseError(f"Operator {op!r} has no left operand", expr)
    rank = SPLIT_PRECEDENCE[op]
    positions = _chain(events, rank)
    bounds = [-1] + positions + [len(expr)]
    operands = [parse(expr[bounds[k] + 1:bounds[k + 1]]) for k in range(len(bounds) - 1)]
    op_types = [BINARY_OP_MAP[expr[i]] for i in positions]
    if rank == _POWER:
      node = operands[0]
      for op_type, operand in zip(op_types, operands[1:]):
        node = BinaryOpNode(op_type, node, operand)
    else:
      node = operands[-1]
      for op_type, operand in zip(reversed(op_types), reversed(operands[:-1])):
        node = BinaryOpNode(op_type, operand, node)

  # Unary plus is dropped rather than wrapped
  for sign in reversed(signs):
    if sign in UNARY_OP_MAP:
      node = UnaryOpNode(UNARY_OP_MAP[sign], node)

  if debug_enabled():
    log_debug(f"parsed {text!r} -> {node.to_string()}")
  return node


def parse_expression(text: str) -> Expression:
  """Parse ``text`` and wrap the tree in an Expression."""
  return Expression(parse(text), source=text)
