import numbers
from typing import Mapping, Optional

import numpy as np

from errors import UndefinedVariableError
from nodes import Node, NodeVisitor


class Evaluator(NodeVisitor):
    """
    Reduces a tree to a scalar, post-order:
      1) leaves    → stored constant, or the bound value of the variable,
                     with integers promoted to float
      2) operators → NumPy ufunc over the children's values

    NumPy ufuncs are used for every operator so that float and complex
    scalars go through the same code path and numeric edge cases
    (x / 0, log(-1), ...) give the scalar type's own answer instead of
    a Python exception.
    """

    def __init__(self, bindings: Optional[Mapping[str, object]] = None):
        self.bindings = bindings if bindings is not None else {}

    def visit_constant(self, node):
        return _as_float(node.value)

    def visit_variable(self, node):
        try:
            value = self.bindings[node.name]
        except KeyError:
            raise UndefinedVariableError(node.name) from None
        return _as_float(value)

    def visit_add(self, node):
        return np.add(self.visit(node.left), self.visit(node.right))

    def visit_subtract(self, node):
        return np.subtract(self.visit(node.left), self.visit(node.right))

    def visit_multiply(self, node):
        return np.multiply(self.visit(node.left), self.visit(node.right))

    def visit_divide(self, node):
        return np.divide(self.visit(node.left), self.visit(node.right))

    def visit_power(self, node):
        return np.power(self.visit(node.left), self.visit(node.right))

    def visit_sin(self, node):
        return np.sin(self.visit(node.left))

    def visit_cos(self, node):
        return np.cos(self.visit(node.left))

    def visit_exp(self, node):
        return np.exp(self.visit(node.left))

    def visit_log(self, node):
        return np.log(self.visit(node.left))

    def visit_negate(self, node):
        return np.negative(self.visit(node.left))


def _as_float(value):
    # ints would otherwise become fixed-width int64 inside the ufuncs
    if isinstance(value, numbers.Integral):
        return float(value)
    return value


def evaluate(node: Node, bindings: Optional[Mapping[str, object]] = None):
    """Evaluate the tree rooted at `node` with the given variable values."""
    return Evaluator(bindings).visit(node)
