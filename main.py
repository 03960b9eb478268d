import logging

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from expression import Expression, exp, pow, sin
from renderer import format_scalar
from sympy_bridge import to_sympy

app = typer.Typer()
console = Console()


def parse_complex(text: str) -> complex:
    """Turn '1+1j' (or '1+1i') into complex(1, 1)."""
    try:
        return complex(text.replace(" ", "").replace("i", "j"))
    except ValueError:
        raise typer.BadParameter(f"not a complex number: {text!r}") from None


def show(
    title: str,
    variable: str,
    expr: Expression,
    point,
    with_sympy: bool,
):
    """
    1) Differentiate `expr` with respect to `variable`
    2) Evaluate both the expression and its derivative at `point`
    3) Print everything in one panel
    """
    d_expr = expr.derivative(variable)
    bindings = {variable: point}

    table = Table(show_header=False, box=None)
    table.add_row(f"{title}({variable})", str(expr))
    table.add_row(f"{title}'({variable})", str(d_expr))
    if with_sympy:
        table.add_row("sympy", str(to_sympy(d_expr)))
    at = format_scalar(point)
    table.add_row(f"{title}({at})", format_scalar(expr.evaluate(bindings)))
    table.add_row(f"{title}'({at})", format_scalar(d_expr.evaluate(bindings)))

    console.print(Panel(table, title=title, border_style="green"))


@app.command()
def main(
    x: float = typer.Option(
        1.5, "--x",
        help="Real point at which f = x^2 + sin(x) is evaluated"
    ),
    z: str = typer.Option(
        "1+1j", "--z",
        help="Complex point at which g = exp(z) + z^2 is evaluated"
    ),
    with_sympy: bool = typer.Option(
        False, "--sympy/--no-sympy",
        help="Also show SymPy's form of each derivative"
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log each differentiation"
    ),
):
    """
    Build a real and a complex sample expression, differentiate both and evaluate them.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )
    z_point = parse_complex(z)

    x_var = Expression("x")
    f = pow(x_var, 2.0) + sin(x_var)
    show("f", "x", f, x, with_sympy)

    z_var = Expression("z")
    g = exp(z_var) + pow(z_var, complex(2.0, 0.0))
    show("g", "z", g, z_point, with_sympy)


if __name__ == "__main__":
    app()
