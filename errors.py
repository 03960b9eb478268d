class ExpressionError(Exception):
    """Base class for failures raised while working with an expression tree."""


class UndefinedVariableError(ExpressionError, LookupError):
    """A variable leaf had no value in the bindings passed to evaluate()."""

    def __init__(self, name: str):
        super().__init__(f"Undefined variable: {name}")
        self.name = name


class UnsupportedDerivativeError(ExpressionError, NotImplementedError):
    """The differentiation rule for this node is not implemented (u ** v with a variable v)."""

    def __init__(self, node, message: str = "Derivative of non-constant exponents not implemented"):
        super().__init__(message)
        self.node = node
