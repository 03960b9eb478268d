# File: tests/test_expression.py

import copy
import dataclasses
import pickle

import pytest
from expression import (
    Expression, add, subtract, multiply, divide, negate, pow, sin, cos, exp, log,
)
from nodes import Kind, Node, NodeVisitor

x = Expression("x")
y = Expression("y")


# ─── 1) Construction ───────────────────────────────────────────────────────────

def test_default_is_zero_constant():
    e = Expression()
    assert e.root.kind is Kind.CONSTANT
    assert e.evaluate() == 0
    assert str(e) == "0"

@pytest.mark.parametrize("source, kind", [
    (2.5,          Kind.CONSTANT),
    (3,            Kind.CONSTANT),
    (complex(1, 2), Kind.CONSTANT),
    ("x",          Kind.VARIABLE),
    ("long_name",  Kind.VARIABLE),
])
def test_leaf_construction(source, kind):
    assert Expression(source).root.kind is kind

def test_named_constructors():
    assert Expression.constant(4).root == Node.constant(4)
    assert Expression.variable("t").root == Node.variable("t")

def test_empty_variable_name_rejected():
    with pytest.raises(ValueError):
        Expression("")

@pytest.mark.parametrize("bad", [None, [1, 2], object()])
def test_unsupported_source_rejected(bad):
    with pytest.raises(TypeError):
        Expression(bad)

@pytest.mark.parametrize("kind, left, right", [
    (Kind.ADD,      Node.constant(1), None),
    (Kind.SIN,      Node.constant(1), Node.constant(2)),
    (Kind.CONSTANT, Node.constant(1), None),
    (Kind.NEGATE,   None,             None),
])
def test_node_arity_is_enforced(kind, left, right):
    with pytest.raises(ValueError):
        Node(kind, value=1, left=left, right=right)


# ─── 2) Builders share structure and never mutate ──────────────────────────────

def test_builders_reuse_operand_roots():
    s = x + y
    assert s.root.left is x.root
    assert s.root.right is y.root
    assert sin(s).root.left is s.root

def test_copies_share_the_tree():
    e = sin(x) + 1
    assert copy.copy(e) is e
    assert copy.deepcopy(e) is e
    restored = pickle.loads(pickle.dumps(e))
    assert restored.root == e.root
    assert str(restored) == "(sin(x) + 1)"

def test_handles_and_nodes_are_immutable():
    with pytest.raises(AttributeError):
        x.root = Node.constant(1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        x.root.name = "y"

@pytest.mark.parametrize("built, expected", [
    (add(x, 1),        "(x + 1)"),
    (subtract(x, y),   "(x - y)"),
    (multiply(2, x),   "(2 * x)"),
    (divide(x, y),     "(x / y)"),
    (negate(x),        "-(x)"),
    (pow(x, 3),        "pow(x, 3)"),
    (pow(x, y),        "pow(x, y)"),
])
def test_named_builders(built, expected):
    assert str(built) == expected

@pytest.mark.parametrize("built, expected", [
    (x + 1,   "(x + 1)"),
    (1 + x,   "(1 + x)"),
    (1 - x,   "(1 - x)"),
    (2 * x,   "(2 * x)"),
    (1 / x,   "(1 / x)"),
    (x ** 2,  "pow(x, 2)"),
    (2 ** x,  "pow(2, x)"),
    (-x,      "-(x)"),
])
def test_operator_overloads(built, expected):
    assert str(built) == expected

def test_non_numeric_operand_is_a_type_error():
    with pytest.raises(TypeError):
        x + "a"
    with pytest.raises(TypeError):
        sin("x")


# ─── 3) Rendering ──────────────────────────────────────────────────────────────

@pytest.mark.parametrize("expr, expected", [
    (Expression(1.5),            "1.5"),
    (Expression(2.0),            "2"),
    (Expression(123456789),      "123456789"),
    (Expression(complex(1, 1)),  "(1+1j)"),
    (Expression(complex(1, -2)), "(1-2j)"),
    (pow(x, 2.0) + sin(x),       "(pow(x, 2) + sin(x))"),
    (log(exp(x)) * cos(y),       "(log(exp(x)) * cos(y))"),
    (-(x - y) / 2,               "(-((x - y)) / 2)"),
    (x + y * 2 - 1,              "((x + (y * 2)) - 1)"),
])
def test_rendering(expr, expected):
    assert expr.to_string() == expected
    assert str(expr) == expected

def test_rendering_is_balanced():
    text = str(pow(sin(x) + 1, y / (x * 2)) - exp(-x))
    assert text.count("(") == text.count(")")
    assert "^" not in text

def test_repr():
    assert repr(x + 1) == "Expression('(x + 1)')"


# ─── 4) Predicates ─────────────────────────────────────────────────────────────

@pytest.mark.parametrize("expr, expected", [
    (Expression(3),                True),
    (pow(Expression(2), 3) + 1,    True),
    (sin(Expression(0.5)),         True),
    (x,                            False),
    (Expression(1) + x * 0,        False),
    (exp(-(Expression(1) / y)),    False),
])
def test_is_constant(expr, expected):
    assert expr.is_constant() is expected

def test_is_variable():
    assert x.is_variable()
    assert x.is_variable("x")
    assert not x.is_variable("y")
    assert not (x + 1).is_variable()
    assert not Expression(1).is_variable()
    assert not (x + 1).is_variable("x")


# ─── 5) Tree walking ───────────────────────────────────────────────────────────

def test_missing_visitor_method_refuses():
    class OnlyConstants(NodeVisitor):
        def visit_constant(self, node):
            return node.value

    assert OnlyConstants().visit(Node.constant(7)) == 7
    with pytest.raises(TypeError):
        OnlyConstants().visit(Node.variable("x"))
