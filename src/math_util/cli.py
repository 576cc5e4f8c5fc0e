"""
Command-line interface for math-util.

Usage:
    math-util info                    List available routines
    math-util stats 1 2 3 4           Descriptive statistics of the values
    math-util prime 97                Primality test
    math-util factorial 10            n!
    math-util gcd 48 18               Greatest common divisor
    math-util lcm 4 6                 Least common multiple
    math-util fib 10                  First n Fibonacci numbers
    math-util perfect 28              Perfect number test
    math-util matmul A B              Matrix product (JSON matrices)
    math-util transpose M             Matrix transpose (JSON matrix)
    math-util det M                   2×2 determinant (JSON matrix)
    math-util convert 100 c f         Unit conversion
"""

import json
from collections.abc import Callable
from typing import Annotated, TypeVar

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from math_util import __version__
from math_util.algorithms import matrices, number_theory, statistics
from math_util.data import Quantity, convert as convert_units, get_spec, list_units
from math_util.errors import MathUtilError
from math_util.logging import DEFAULT_LOG_LEVEL, configure_logging, get_logger

app = typer.Typer(
    name="math-util",
    help="Stateless numeric routines: statistics, number theory, matrices, units",
    add_completion=False,
)
console = Console()
logger = get_logger("cli")

T = TypeVar("T")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"math-util version {__version__}")
        raise typer.Exit()


def _run(command: str, func: Callable[[], T]) -> T:
    """Invoke a kernel call, turning library errors into exit code 1."""
    logger.debug("Running %s", command)
    try:
        return func()
    except (MathUtilError, ZeroDivisionError) as exc:
        logger.error("%s failed: %s", command, exc)
        console.print(f"[red]Error:[/] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc


def _parse_matrix(text: str) -> matrices.Matrix:
    """Parse a JSON matrix argument such as '[[1, 2], [3, 4]]'."""
    try:
        value = json.loads(text)
    except json.JSONDecodeError as exc:
        raise typer.BadParameter(f"Invalid JSON: {exc.msg}") from exc

    if not isinstance(value, list) or not all(isinstance(row, list) for row in value):
        raise typer.BadParameter("Matrix must be a JSON list of lists")

    for row in value:
        for entry in row:
            if isinstance(entry, bool) or not isinstance(entry, int | float):
                msg = f"Matrix entries must be numbers, got {entry!r}"
                raise typer.BadParameter(msg)

    try:
        matrices.validate_matrix(value)
    except MathUtilError as exc:
        raise typer.BadParameter(str(exc)) from exc
    return value


def _print_matrix(matrix: matrices.Matrix, title: str) -> None:
    # Heading printed separately; narrow tables would wrap a title
    console.print(f"[bold]{title}[/]")
    if not matrix:
        console.print("(empty)")
        return

    table = Table(show_header=False)
    for _ in range(matrices.shape(matrix).cols):
        table.add_column(justify="right")
    for row in matrix:
        table.add_row(*[f"{value:g}" for value in row])
    console.print(table)


@app.callback()  # type: ignore[misc]
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            "-l",
            help="Logging level (DEBUG, INFO, WARNING, ERROR).",
            envvar="MATH_UTIL_LOG_LEVEL",
        ),
    ] = DEFAULT_LOG_LEVEL,
) -> None:
    """math-util - Self-contained numeric primitives."""
    try:
        configure_logging(log_level)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--log-level") from exc


@app.command()  # type: ignore[misc]
def info() -> None:
    """Display the available routines and supported units."""
    table = Table(title="Available Routines")

    table.add_column("Domain", style="cyan", no_wrap=True)
    table.add_column("Functions")

    for name, module in (
        ("Statistics", statistics),
        ("Number theory", number_theory),
        ("Matrix", matrices),
    ):
        functions = [f for f in module.__all__ if f[0].islower()]
        table.add_row(name, ", ".join(functions))

    console.print(table)

    units = Table(title="Supported Units")
    units.add_column("Quantity", style="cyan")
    units.add_column("Units")
    for quantity in Quantity:
        names = [
            f"{unit.value} ({get_spec(unit).symbol})" for unit in list_units(quantity)
        ]
        units.add_row(quantity.value, ", ".join(names))

    console.print(units)


@app.command()  # type: ignore[misc]
def stats(
    values: Annotated[
        list[float] | None,
        typer.Argument(help="Numbers to summarize"),
    ] = None,
) -> None:
    """Compute descriptive statistics of a list of numbers."""
    values = values or []
    extremes = statistics.min_max(values)

    table = Table(title=f"Statistics ({len(values)} values)")
    table.add_column("Measure", style="bold")
    table.add_column("Value", justify="right")

    table.add_row("Mean", f"{statistics.mean(values):g}")
    table.add_row("Median", f"{statistics.median(values):g}")
    table.add_row("Mode", ", ".join(f"{m:g}" for m in statistics.mode(values)) or "-")
    table.add_row("Std. deviation", f"{statistics.standard_deviation(values):g}")
    table.add_row("Min", "-" if extremes.is_empty else f"{extremes.min:g}")
    table.add_row("Max", "-" if extremes.is_empty else f"{extremes.max:g}")
    table.add_row("Sum of squares", f"{statistics.sum_of_squares(values):g}")

    console.print(table)


@app.command()  # type: ignore[misc]
def prime(n: int) -> None:
    """Test whether N is prime."""
    result = _run("prime", lambda: number_theory.is_prime(n))
    verdict = "[green]prime[/]" if result else "[yellow]not prime[/]"
    console.print(f"{n} is {verdict}")


@app.command()  # type: ignore[misc]
def factorial(n: int) -> None:
    """Compute N!."""
    result = _run("factorial", lambda: number_theory.factorial(n))
    console.print(f"{n}! = {result}")


@app.command()  # type: ignore[misc]
def gcd(a: int, b: int) -> None:
    """Greatest common divisor of A and B."""
    result = _run("gcd", lambda: number_theory.gcd(a, b))
    console.print(f"gcd({a}, {b}) = {result}")


@app.command()  # type: ignore[misc]
def lcm(a: int, b: int) -> None:
    """Least common multiple of A and B."""
    result = _run("lcm", lambda: number_theory.lcm(a, b))
    console.print(f"lcm({a}, {b}) = {result}")


@app.command()  # type: ignore[misc]
def fib(n: int) -> None:
    """Print the first N Fibonacci numbers."""
    sequence = _run("fib", lambda: number_theory.fibonacci_sequence(n))
    console.print(", ".join(str(term) for term in sequence) or "(empty)")


@app.command()  # type: ignore[misc]
def perfect(n: int) -> None:
    """Test whether N is a perfect number."""
    result = _run("perfect", lambda: number_theory.is_perfect(n))
    verdict = "[green]perfect[/]" if result else "[yellow]not perfect[/]"
    console.print(f"{n} is {verdict}")


@app.command()  # type: ignore[misc]
def matmul(
    a: Annotated[str, typer.Argument(help="Left matrix as JSON")],
    b: Annotated[str, typer.Argument(help="Right matrix as JSON")],
) -> None:
    """Multiply two matrices."""
    left = _parse_matrix(a)
    right = _parse_matrix(b)
    result = _run("matmul", lambda: matrices.multiply(left, right))
    _print_matrix(result, f"Product ({matrices.shape(result)})")


@app.command()  # type: ignore[misc]
def transpose(
    m: Annotated[str, typer.Argument(help="Matrix as JSON")],
) -> None:
    """Transpose a matrix."""
    matrix = _parse_matrix(m)
    result = _run("transpose", lambda: matrices.transpose(matrix))
    _print_matrix(result, f"Transpose ({matrices.shape(result)})")


@app.command()  # type: ignore[misc]
def det(
    m: Annotated[str, typer.Argument(help="2×2 matrix as JSON")],
) -> None:
    """Determinant of a 2×2 matrix."""
    matrix = _parse_matrix(m)
    result = _run("det", lambda: matrices.determinant_2x2(matrix))
    console.print(f"det = {result:g}")


@app.command()  # type: ignore[misc]
def convert(
    value: float,
    from_unit: Annotated[str, typer.Argument(help="Source unit (e.g. km, c, deg)")],
    to_unit: Annotated[str, typer.Argument(help="Target unit (e.g. mi, f, rad)")],
) -> None:
    """Convert VALUE between units of the same quantity."""
    result = _run("convert", lambda: convert_units(value, from_unit, to_unit))
    source = get_spec(from_unit)
    target = get_spec(to_unit)
    console.print(f"{value:g} {source.symbol} = {result:g} {target.symbol}")


if __name__ == "__main__":
    app()
