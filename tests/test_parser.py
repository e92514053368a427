import math

import pytest

from expression_solver import (
    parse, parse_expression, find_split, find_end,
    ParseError, MalformedLiteralError, UnmatchedParenthesisError,
    VariableNode, ConstantNode, BinaryOpNode, UnaryOpNode, OpType, Expression
)
from expression_solver.parser import strip_parentheses


# ---------------------------------------------------------------- find_end

def test_find_end_simple_group():
    assert find_end("(1+2)*3", 0) == 4


def test_find_end_nested_group():
    assert find_end("((1)+(2))", 0) == 8
    assert find_end("((1)+(2))", 1) == 3


def test_find_end_not_a_group():
    assert find_end("1+2", 0) is None
    assert find_end("", 0) is None


def test_find_end_unclosed():
    with pytest.raises(UnmatchedParenthesisError) as excinfo:
        find_end("((1)", 0)
    assert excinfo.value.position == 0


# ---------------------------------------------------------------- find_split

@pytest.mark.parametrize("text, expected", [
    ("42", None),
    ("x", None),
    ("3.25", None),
    ("2+3*4", 1),
    ("2*3+4", 3),
    ("1-2-3", 1),          # leftmost binary '+'/'-' wins
    ("8/2/2", 1),          # leftmost '*'/'/' wins
    ("2^3^2", 3),          # rightmost '^' wins
    ("2^3*4", 3),
    ("2*3^4", 1),
    ("x^2-4", 3),
    ("(1+2)*3", 5),
    ("(1+2)", None),
    ("-x", 0),
    ("-2+3", 2),
    ("-2*3", 0),
    ("2*-3", 1),
    ("1--2", 1),
    ("2^-1", 1),
    ("-(1+2)", 0),
])
def test_find_split(text, expected):
    assert find_split(text) == expected


def test_find_split_stray_close_paren():
    with pytest.raises(UnmatchedParenthesisError) as excinfo:
        find_split("1+2)")
    assert excinfo.value.position == 3


# ---------------------------------------------------------------- parse

def test_strip_parentheses():
    assert strip_parentheses("((x))") == "x"
    assert strip_parentheses("(1)+(2)") == "(1)+(2)"
    assert strip_parentheses("()") == ""


@pytest.mark.parametrize("value", [0.0, 1.0, 0.5, 3.14159, 42.0, 123456.789, 0.0025, 1e15, -3.5])
def test_literal_round_trip(value):
    assert parse(str(value)).evaluate() == value


@pytest.mark.parametrize("text, expected", [
    ("2+3*4", 14.0),
    ("1-2-3", 2.0),
    ("2^3^2", 64.0),
    ("(1+2)*3", 9.0),
    ("((5))", 5.0),
    ("8/2/2", 8.0),
    ("2*3-4*5", -14.0),
    ("-2^2", -4.0),
    ("-(2+3)", -5.0),
    ("+7", 7.0),
    ("2.5*(4-1)", 7.5),
    ("-2+3", 1.0),
    ("2*-3", -6.0),
    ("2^-1", 0.5),
    ("1--2", 3.0),
    ("--2", 2.0),
    ("10-4+3", 3.0),
    ("8/2*2", 2.0),
    ("2*3^2", 18.0),
])
def test_parse_and_evaluate(text, expected):
    assert parse(text).evaluate() == expected


def test_non_finite_results_flow_through():
    assert parse("1/0").evaluate() == math.inf
    assert parse("-1/0").evaluate() == -math.inf
    assert math.isnan(parse("0/0").evaluate())
    assert math.isnan(parse("(-8)^(1/3)").evaluate())


def test_variable_leaf():
    assert isinstance(parse("x"), VariableNode)
    assert isinstance(parse("(x)"), VariableNode)


def test_unary_plus_is_discarded():
    node = parse("+x")
    assert isinstance(node, VariableNode)
    node = parse("+(2*3)")
    assert isinstance(node, BinaryOpNode)
    assert node.operator == OpType.MUL


def test_unary_minus_wraps_operand():
    node = parse("-x")
    assert isinstance(node, UnaryOpNode)
    assert node.operator == OpType.NEG
    assert isinstance(node.operand, VariableNode)


def test_tree_shape_of_right_split():
    node = parse("1-2-3")
    assert isinstance(node, BinaryOpNode)
    assert node.operator == OpType.SUB
    assert isinstance(node.left, ConstantNode) and node.left.value == 1.0
    assert isinstance(node.right, BinaryOpNode)
    assert node.right.to_string() == "(2.0 - 3.0)"


@pytest.mark.parametrize("text", ["", "()", "2x", "abc", "3+", "1..2", "-", "2*", "y-2"])
def test_malformed_literal(text):
    with pytest.raises(MalformedLiteralError):
        parse(text)


@pytest.mark.parametrize("text", ["(1+2", "((1)", "1+2)", "(x))"])
def test_unmatched_parentheses(text):
    with pytest.raises(UnmatchedParenthesisError):
        parse(text)


@pytest.mark.parametrize("text", ["*3", "/x", "^2"])
def test_leading_binary_operator(text):
    with pytest.raises(ParseError):
        parse(text)


def test_parse_errors_are_value_errors():
    with pytest.raises(ValueError):
        parse("2x")


def test_parse_expression_keeps_source():
    expr = parse_expression("x^2-4")
    assert isinstance(expr, Expression)
    assert expr.source == "x^2-4"
    assert expr.evaluate(3) == 5.0


def test_expression_from_string():
    expr = Expression.from_string("(x+1)*2")
    assert expr.evaluate(4) == 10.0


def test_exponent_literal_without_sign():
    assert parse("1e5").evaluate() == 100000.0
    assert parse("2.5e3*x").evaluate(2) == 5000.0


@pytest.mark.parametrize("text", [str(1e-05), "1e+16", "2.5E-3"])
def test_signed_exponent_literal_is_split(text):
    # The sign in the exponent is read as an operator, leaving "1e" behind
    with pytest.raises(MalformedLiteralError):
        parse(text)


def test_long_flat_sum():
    n = 5000
    assert parse("+".join(["1"] * n)).evaluate() == float(n)


def test_long_subtraction_chain_groups_right():
    # 1-(1-(1-...)) with an odd number of terms
    assert parse("-".join(["1"] * 5001)).evaluate() == 1.0


def test_long_mixed_chains():
    assert parse("+".join(["2*x"] * 3000)).evaluate(0.5) == 3000.0
    assert parse("^".join(["1"] * 3000)).evaluate() == 1.0
    assert parse("*".join(["x"] * 3000)).to_string().count("x") == 3000
