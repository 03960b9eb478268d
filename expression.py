"""
Immutable symbolic expressions over a scalar type (float or complex).

    >>> x = Expression("x")
    >>> f = pow(x, 2.0) + sin(x)
    >>> str(f)
    '(pow(x, 2) + sin(x))'
    >>> str(f.derivative("x"))
    '(((2 * pow(x, 1)) * 1) + (cos(x) * 1))'

Every builder wraps one new node around the roots of its operands, so
expressions share structure freely and are never modified afterwards.
"""
import numbers
from typing import Mapping, Optional

from differentiator import derivative as _derivative
from evaluator import evaluate as _evaluate
from nodes import Kind, Node, is_constant
from renderer import render
from substitutor import substitute as _substitute


class Expression:
    """Handle to the root node of an expression tree."""

    __slots__ = ("root",)

    def __init__(self, source=0):
        if isinstance(source, Node):
            root = source
        elif isinstance(source, Expression):
            root = source.root
        elif isinstance(source, str):
            root = Node.variable(source)
        elif isinstance(source, numbers.Number):
            root = Node.constant(source)
        else:
            raise TypeError(
                f"Expression accepts a number, a variable name or a Node, "
                f"but got {type(source).__name__}"
            )
        object.__setattr__(self, "root", root)

    def __setattr__(self, name, value):
        raise AttributeError("Expression is immutable")

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return (Expression, (self.root,))

    @classmethod
    def constant(cls, value) -> "Expression":
        return cls(Node.constant(value))

    @classmethod
    def variable(cls, name: str) -> "Expression":
        return cls(Node.variable(name))

    # ─── builders ────────────────────────────────────────────────────────────

    def __add__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return add(self, other)

    def __radd__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return add(other, self)

    def __sub__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return subtract(self, other)

    def __rsub__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return subtract(other, self)

    def __mul__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return multiply(self, other)

    def __rmul__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return multiply(other, self)

    def __truediv__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return divide(self, other)

    def __rtruediv__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return divide(other, self)

    def __pow__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return pow(self, other)

    def __rpow__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return pow(other, self)

    def __neg__(self):
        return negate(self)

    # ─── queries ─────────────────────────────────────────────────────────────

    def evaluate(self, bindings: Optional[Mapping[str, object]] = None):
        """
        Value of the expression with `bindings` supplying every variable.
        Raises UndefinedVariableError for a variable that is not bound.
        """
        return _evaluate(self.root, bindings)

    def derivative(self, variable: str) -> "Expression":
        """
        Symbolic derivative with respect to `variable`, unsimplified.
        Raises UnsupportedDerivativeError for u ** v where v holds a variable.
        """
        return Expression(_derivative(self.root, variable))

    def substitute(self, variable: str, replacement) -> "Expression":
        """Replace every occurrence of `variable` with `replacement`."""
        return Expression(_substitute(self.root, variable, _as_node(replacement)))

    def to_string(self) -> str:
        return render(self.root)

    def is_constant(self) -> bool:
        return is_constant(self.root)

    def is_variable(self, name: Optional[str] = None) -> bool:
        if self.root.kind is not Kind.VARIABLE:
            return False
        return name is None or self.root.name == name

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f"Expression({self.to_string()!r})"


def _is_operand(operand) -> bool:
    return isinstance(operand, (Expression, numbers.Number))


def _as_node(operand) -> Node:
    if isinstance(operand, Expression):
        return operand.root
    if isinstance(operand, numbers.Number):
        return Node.constant(operand)
    raise TypeError(f"Cannot use {type(operand).__name__} as an expression operand")


def _binary(kind: Kind, left, right) -> Expression:
    return Expression(Node.binary(kind, _as_node(left), _as_node(right)))


def _unary(kind: Kind, operand) -> Expression:
    return Expression(Node.unary(kind, _as_node(operand)))


def add(left, right) -> Expression:
    return _binary(Kind.ADD, left, right)


def subtract(left, right) -> Expression:
    return _binary(Kind.SUBTRACT, left, right)


def multiply(left, right) -> Expression:
    return _binary(Kind.MULTIPLY, left, right)


def divide(left, right) -> Expression:
    return _binary(Kind.DIVIDE, left, right)


def pow(base, exponent) -> Expression:
    """base ** exponent; a plain number exponent becomes a constant leaf."""
    return _binary(Kind.POWER, base, exponent)


def negate(operand) -> Expression:
    return _unary(Kind.NEGATE, operand)


def sin(operand) -> Expression:
    return _unary(Kind.SIN, operand)


def cos(operand) -> Expression:
    return _unary(Kind.COS, operand)


def exp(operand) -> Expression:
    return _unary(Kind.EXP, operand)


def log(operand) -> Expression:
    return _unary(Kind.LOG, operand)
