from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class Kind(Enum):
    CONSTANT = "constant"
    VARIABLE = "variable"
    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
    POWER = "power"
    SIN = "sin"
    COS = "cos"
    EXP = "exp"
    LOG = "log"
    NEGATE = "negate"


LEAF_KINDS = frozenset({Kind.CONSTANT, Kind.VARIABLE})
UNARY_KINDS = frozenset({Kind.SIN, Kind.COS, Kind.EXP, Kind.LOG, Kind.NEGATE})
BINARY_KINDS = frozenset({Kind.ADD, Kind.SUBTRACT, Kind.MULTIPLY, Kind.DIVIDE, Kind.POWER})


@dataclass(frozen=True)
class Node:
    """
    One element of an expression tree.

    Leaves carry either `value` (CONSTANT) or `name` (VARIABLE).
    Unary kinds carry only `left`, binary kinds carry `left` and `right`.
    Children are plain references, so several trees may share a subtree.
    """
    kind: Kind
    value: Any = None
    name: Optional[str] = None
    left: Optional["Node"] = None
    right: Optional["Node"] = None

    def __post_init__(self):
        if self.kind in LEAF_KINDS:
            arity_ok = self.left is None and self.right is None
        elif self.kind in UNARY_KINDS:
            arity_ok = self.left is not None and self.right is None
        elif self.kind in BINARY_KINDS:
            arity_ok = self.left is not None and self.right is not None
        else:
            raise TypeError(f"Unknown node kind: {self.kind!r}")
        if not arity_ok:
            raise ValueError(f"Wrong number of children for {self.kind.name} node")
        if self.kind is Kind.VARIABLE:
            if not isinstance(self.name, str):
                raise TypeError(f"Variable name must be a str, got {type(self.name).__name__}")
            if not self.name:
                raise ValueError("Variable name must not be empty")

    @classmethod
    def constant(cls, value) -> "Node":
        return cls(Kind.CONSTANT, value=value)

    @classmethod
    def variable(cls, name: str) -> "Node":
        return cls(Kind.VARIABLE, name=name)

    @classmethod
    def unary(cls, kind: Kind, operand: "Node") -> "Node":
        return cls(kind, left=operand)

    @classmethod
    def binary(cls, kind: Kind, left: "Node", right: "Node") -> "Node":
        return cls(kind, left=left, right=right)


class NodeVisitor:
    """
    Walks an expression tree the way ast.NodeVisitor walks a Python AST:
    visit() dispatches on the node kind to visit_<kind>(node).

    Subclasses must handle every kind they can meet; a missing handler
    ends up in generic_visit, which refuses instead of guessing a result.
    """

    def visit(self, node: Node):
        method = getattr(self, "visit_" + node.kind.value, self.generic_visit)
        return method(node)

    def generic_visit(self, node: Node):
        raise TypeError(f"{type(self).__name__} cannot handle {node.kind.name} nodes")


class ConstantChecker(NodeVisitor):
    """True iff no VARIABLE leaf appears anywhere below the node."""

    def visit_constant(self, node):
        return True

    def visit_variable(self, node):
        return False

    def _binary(self, node):
        return self.visit(node.left) and self.visit(node.right)

    def _unary(self, node):
        return self.visit(node.left)

    visit_add = visit_subtract = visit_multiply = visit_divide = visit_power = _binary
    visit_sin = visit_cos = visit_exp = visit_log = visit_negate = _unary


def is_constant(node: Node) -> bool:
    return ConstantChecker().visit(node)
