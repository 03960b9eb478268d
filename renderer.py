import numbers

from nodes import Node, NodeVisitor

INFIX = {
    "add": "+",
    "subtract": "-",
    "multiply": "*",
    "divide": "/",
}


def format_scalar(value) -> str:
    """Turn 2.0 into '2', 123456789 into '123456789' and 1+1j into '(1+1j)'."""
    if isinstance(value, numbers.Integral):
        return str(int(value))
    if isinstance(value, numbers.Complex) and not isinstance(value, numbers.Real):
        return f"({value.real:g}{value.imag:+g}j)"
    if isinstance(value, numbers.Real):
        return f"{value:g}"
    return str(value)


class Renderer(NodeVisitor):
    """
    Fully parenthesized text form of a tree.
    No precedence rules are applied, so every operator is wrapped:
      (a + b), pow(a, b), sin(a), -(a)
    """

    def visit_constant(self, node):
        return format_scalar(node.value)

    def visit_variable(self, node):
        return node.name

    def _infix(self, node):
        op = INFIX[node.kind.value]
        return f"({self.visit(node.left)} {op} {self.visit(node.right)})"

    visit_add = visit_subtract = visit_multiply = visit_divide = _infix

    def visit_power(self, node):
        return f"pow({self.visit(node.left)}, {self.visit(node.right)})"

    def _call(self, node):
        return f"{node.kind.value}({self.visit(node.left)})"

    visit_sin = visit_cos = visit_exp = visit_log = _call

    def visit_negate(self, node):
        return f"-({self.visit(node.left)})"


def render(node: Node) -> str:
    return Renderer().visit(node)
