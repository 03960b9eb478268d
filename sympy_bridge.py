import sympy
from sympy import sympify

from nodes import NodeVisitor


class SympyBuilder(NodeVisitor):
    """
    Rebuilds an expression tree as a SymPy expression.
    SymPy canonicalizes as it builds, so `1 * cos(x)` comes out as `cos(x)`.
    """

    def visit_constant(self, node):
        return sympify(node.value)

    def visit_variable(self, node):
        return sympy.Symbol(node.name)

    def visit_add(self, node):
        return self.visit(node.left) + self.visit(node.right)

    def visit_subtract(self, node):
        return self.visit(node.left) - self.visit(node.right)

    def visit_multiply(self, node):
        return self.visit(node.left) * self.visit(node.right)

    def visit_divide(self, node):
        return self.visit(node.left) / self.visit(node.right)

    def visit_power(self, node):
        return sympy.Pow(self.visit(node.left), self.visit(node.right))

    def visit_sin(self, node):
        return sympy.sin(self.visit(node.left))

    def visit_cos(self, node):
        return sympy.cos(self.visit(node.left))

    def visit_exp(self, node):
        return sympy.exp(self.visit(node.left))

    def visit_log(self, node):
        return sympy.log(self.visit(node.left))

    def visit_negate(self, node):
        return -self.visit(node.left)


def to_sympy(expression) -> sympy.Expr:
    """Convert an Expression (or a bare Node) into the equivalent SymPy expression."""
    root = getattr(expression, "root", expression)
    return SympyBuilder().visit(root)
