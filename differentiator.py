import logging

from errors import UnsupportedDerivativeError
from evaluator import evaluate
from nodes import Kind, Node, NodeVisitor, is_constant

logger = logging.getLogger(__name__)

ZERO = 0
ONE = 1


class Differentiator(NodeVisitor):
    """
    Builds d(node)/d(variable) with the textbook rules:
      sum/difference, product, quotient, constant power, and the chain
      rule for sin, cos, exp and log.

    The result is never simplified: it may literally contain `* 1` or
    `+ 0`. Subtrees of the input are reused as-is inside the result.
    """

    def __init__(self, variable: str):
        self.variable = variable

    def visit_constant(self, node):
        return Node.constant(ZERO)

    def visit_variable(self, node):
        return Node.constant(ONE if node.name == self.variable else ZERO)

    def _sum_rule(self, node):
        return Node.binary(node.kind, self.visit(node.left), self.visit(node.right))

    visit_add = visit_subtract = _sum_rule

    def visit_multiply(self, node):
        # (uv)' = u'v + uv'
        u, v = node.left, node.right
        du, dv = self.visit(u), self.visit(v)
        return Node.binary(
            Kind.ADD,
            Node.binary(Kind.MULTIPLY, du, v),
            Node.binary(Kind.MULTIPLY, u, dv),
        )

    def visit_divide(self, node):
        # (u/v)' = (u'v - uv') / v^2
        u, v = node.left, node.right
        du, dv = self.visit(u), self.visit(v)
        numerator = Node.binary(
            Kind.SUBTRACT,
            Node.binary(Kind.MULTIPLY, du, v),
            Node.binary(Kind.MULTIPLY, u, dv),
        )
        denominator = Node.binary(Kind.POWER, v, Node.constant(2))
        return Node.binary(Kind.DIVIDE, numerator, denominator)

    def visit_power(self, node):
        # (u^n)' = n * u^(n-1) * u', n free of variables
        u, v = node.left, node.right
        if not is_constant(v):
            raise UnsupportedDerivativeError(node)
        n = evaluate(v)
        part = Node.binary(
            Kind.MULTIPLY,
            Node.constant(n),
            Node.binary(Kind.POWER, u, Node.constant(n - 1)),
        )
        return Node.binary(Kind.MULTIPLY, part, self.visit(u))

    def visit_sin(self, node):
        u = node.left
        return Node.binary(Kind.MULTIPLY, Node.unary(Kind.COS, u), self.visit(u))

    def visit_cos(self, node):
        u = node.left
        minus_sin = Node.unary(Kind.NEGATE, Node.unary(Kind.SIN, u))
        return Node.binary(Kind.MULTIPLY, minus_sin, self.visit(u))

    def visit_exp(self, node):
        u = node.left
        return Node.binary(Kind.MULTIPLY, Node.unary(Kind.EXP, u), self.visit(u))

    def visit_log(self, node):
        u = node.left
        return Node.binary(Kind.DIVIDE, self.visit(u), u)

    def visit_negate(self, node):
        return Node.unary(Kind.NEGATE, self.visit(node.left))


def derivative(node: Node, variable: str) -> Node:
    """Return the root of a new tree for d(node)/d(variable)."""
    logger.debug("Differentiating %s node with respect to %r", node.kind.name, variable)
    return Differentiator(variable).visit(node)
