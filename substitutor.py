import logging

from nodes import Node, NodeVisitor

logger = logging.getLogger(__name__)


class Substitutor(NodeVisitor):
    """
    Replaces every `variable` leaf with `replacement`.

    Subtrees without a match come back as the very same Node object,
    and the replacement is spliced in by reference without being walked.
    """

    def __init__(self, variable: str, replacement: Node):
        self.variable = variable
        self.replacement = replacement

    def visit_constant(self, node):
        return node

    def visit_variable(self, node):
        return self.replacement if node.name == self.variable else node

    def _unary(self, node):
        left = self.visit(node.left)
        if left is node.left:
            return node
        return Node.unary(node.kind, left)

    def _binary(self, node):
        left, right = self.visit(node.left), self.visit(node.right)
        if left is node.left and right is node.right:
            return node
        return Node.binary(node.kind, left, right)

    visit_add = visit_subtract = visit_multiply = visit_divide = visit_power = _binary
    visit_sin = visit_cos = visit_exp = visit_log = visit_negate = _unary


def substitute(node: Node, variable: str, replacement: Node) -> Node:
    logger.debug("Substituting %r in %s node", variable, node.kind.name)
    return Substitutor(variable, replacement).visit(node)
