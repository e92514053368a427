"""
Command line entry point.

Reads an expression (or '=expression x0' to solve for a root) either from
the positional arguments or, when none are given, from stdin, and prints a
single result line:

    $ echo "2+3*4" | expression-solver
    =14
    $ echo "=x^2-4 1" | expression-solver
    x=2
"""

import argparse
import sys
from typing import List, Optional, TextIO

from .config import SolverConfig, DEFAULT_DX, DEFAULT_MAX_ITERATIONS
from .errors import ExpressionError, ParseError, MalformedLiteralError
from .logging_system import LogLevel, configure_logging, log_critical, log_info
from .parser import parse_expression
from .solver import solve_with_config

SOLVE_PREFIX = '='


def format_value(value: float) -> str:
  """Six significant digits, like the default C++ stream formatting."""
  return '%g' % value


def read_tokens(stream: TextIO) -> List[str]:
  return stream.read().split()


def run(tokens: List[str], config: Optional[SolverConfig] = None) -> str:
  """Evaluate or solve according to the input tokens and return the output line."""
  if config is None:
    config = SolverConfig()
  if not tokens:
    raise ParseError("No expression given")

  text = tokens[0]
  if not text.startswith(SOLVE_PREFIX):
    expr = parse_expression(text)
    log_info(f"Evaluating {expr.source}")
    return f"={format_value(expr.evaluate())}"

  if len(tokens) < 2:
    raise ParseError("Missing initial guess", text)
  expr = parse_expression(text[len(SOLVE_PREFIX):])
  try:
    x0 = float(tokens[1])
  except ValueError:
    raise MalformedLiteralError("Malformed initial guess", tokens[1]) from None
  log_info(f"Solving {expr.source} = 0 from x0={x0:g}")
  result = solve_with_config(expr, x0, config)
  return f"x={format_value(result.root)}"


def build_arg_parser() -> argparse.ArgumentParser:
  parser = argparse.ArgumentParser(
    prog="expression-solver",
    description="Evaluate an arithmetic expression in x, or solve '=expr' for a root with Newton's method",
  )
  parser.add_argument(
    "tokens",
    nargs="*",
    help="Expression, or '=expression' followed by the initial guess (read from stdin when omitted; "
         "put '--' before tokens that start with '-')",
  )
  parser.add_argument("--dx", type=float, default=DEFAULT_DX,
                      help=f"Forward difference step (default: {DEFAULT_DX:g})")
  parser.add_argument("--max-iterations", type=int, default=DEFAULT_MAX_ITERATIONS,
                      dest="max_iterations",
                      help=f"Newton iteration cap (default: {DEFAULT_MAX_ITERATIONS})")
  parser.add_argument("--log-level", default="minimal", dest="log_level",
                      choices=[level.name.lower() for level in LogLevel],
                      help="Verbosity of the log written to stderr (default: minimal)")
  return parser


def main(argv: Optional[List[str]] = None) -> int:
  parser = build_arg_parser()
  args = parser.parse_args(argv)

  configure_logging(LogLevel[args.log_level.upper()])
  try:
    config = SolverConfig(dx=args.dx, max_iterations=args.max_iterations)
  except ValueError as e:
    parser.error(str(e))

  tokens = args.tokens or read_tokens(sys.stdin)
  try:
    line = run(tokens, config)
  except ExpressionError as e:
    log_critical(str(e))
    return 1

  print(line)
  return 0


if __name__ == "__main__":
  sys.exit(main())
