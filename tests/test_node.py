import math

import numpy as np
import pytest
import sympy as sp

from expression_solver import (
    parse, parse_expression, Node, VariableNode, ConstantNode,
    BinaryOpNode, UnaryOpNode, OpType, NodeType, UnboundVariableError
)
from expression_solver.expression_tree.utils import sympy_lambdify, latex_representation


class RecordingNode(Node):
    """Leaf that records the order in which it is evaluated."""

    def __init__(self, name, log, value):
        self.name = name
        self.log = log
        self.value = value

    def apply(self, child_values, x):
        self.log.append(self.name)
        return self.value

    def format(self, child_strings):
        return self.name

    def sympy_step(self, child_exprs):
        return sp.Symbol(self.name)


def test_constant_ignores_binding():
    node = ConstantNode(2.5)
    assert node.node_type == NodeType.CONSTANT
    assert node.evaluate() == 2.5
    assert node.evaluate(100.0) == 2.5


def test_variable_requires_binding():
    node = VariableNode()
    assert node.node_type == NodeType.VARIABLE
    with pytest.raises(UnboundVariableError):
        node.evaluate()
    assert node.evaluate(3) == 3.0


def test_closed_form_evaluation_with_variable_fails():
    with pytest.raises(UnboundVariableError):
        parse("x+1").evaluate()


@pytest.mark.parametrize("v", [-2.0, 0.0, 1.5, 1e10])
def test_variable_identity_and_negation(v):
    assert parse("x").evaluate(v) == v
    assert parse("-x").evaluate(v) == -v


def test_left_operand_evaluated_first():
    log = []
    node = BinaryOpNode(OpType.SUB,
                        RecordingNode('L', log, 5.0),
                        RecordingNode('R', log, 2.0))
    assert node.evaluate() == 3.0
    assert log == ['L', 'R']


def test_operator_must_match_node_kind():
    with pytest.raises(ValueError):
        BinaryOpNode(OpType.NEG, ConstantNode(1), ConstantNode(2))
    with pytest.raises(ValueError):
        UnaryOpNode(OpType.ADD, ConstantNode(1))
    with pytest.raises(ValueError):
        BinaryOpNode('+', ConstantNode(1), ConstantNode(2))


def test_reevaluation_is_pure():
    expr = parse_expression("(x-1)^2/(x+3)")
    first = expr.evaluate(0.75)
    second = expr.evaluate(0.75)
    assert first == second


def test_to_string_is_fully_parenthesised():
    assert parse("1-2-3").to_string() == "(1.0 - (2.0 - 3.0))"
    assert parse("-x").to_string() == "-(x)"
    assert parse("2^3^2").to_string() == "((2.0 ^ 3.0) ^ 2.0)"


def test_size():
    assert parse("x").size() == 1
    assert parse("-x").size() == 2
    assert parse("(x+1)*2").size() == 5


def test_evaluate_many():
    expr = parse_expression("x^2")
    np.testing.assert_array_equal(expr.evaluate_many([1, 2, 3]), [1.0, 4.0, 9.0])
    np.testing.assert_array_equal(parse_expression("2").evaluate_many([1, 2]), [2.0, 2.0])


def test_evaluate_many_keeps_non_finite_values():
    result = parse_expression("1/x").evaluate_many([0.0, 2.0])
    assert result[0] == math.inf
    assert result[1] == 0.5


def test_to_sympy_matches_evaluation():
    expr = parse_expression("x^3-(2*x+5)")
    sym = expr.to_sympy()
    for v in (0.0, 0.5, 2.0, 3.25):
        assert math.isclose(float(sym.subs(sp.Symbol('x'), v)), expr.evaluate(v), rel_tol=1e-12)


def test_sympy_lambdify_cross_check():
    expr = parse_expression("(x+1)/(x-2)")
    f = sympy_lambdify(expr.root)
    xs = np.array([-3.0, 0.0, 1.0, 5.0])
    np.testing.assert_allclose(f(xs), expr.evaluate_many(xs))


def test_latex_representation():
    assert 'x' in latex_representation(parse("x^2"))


def test_nested_evaluation_order():
    log = []
    node = BinaryOpNode(OpType.ADD,
                        BinaryOpNode(OpType.MUL, RecordingNode('a', log, 2.0), RecordingNode('b', log, 3.0)),
                        UnaryOpNode(OpType.NEG, RecordingNode('c', log, 4.0)))
    assert node.evaluate() == 2.0
    assert log == ['a', 'b', 'c']
    assert node.to_string() == "((a * b) + -(c))"


def test_deep_tree_does_not_hit_recursion_limit():
    node = VariableNode()
    for _ in range(5000):
        node = BinaryOpNode(OpType.ADD, ConstantNode(1.0), node)
    assert node.evaluate(0.0) == 5000.0
    assert node.size() == 10001
    assert node.to_string().startswith("(1.0 + (1.0 + ")
    np.testing.assert_array_equal(node.evaluate(np.array([0.0, 1.0])), [5000.0, 5001.0])


def test_deep_unary_chain():
    node = ConstantNode(3.0)
    for _ in range(10001):
        node = UnaryOpNode(OpType.NEG, node)
    assert node.evaluate() == -3.0
