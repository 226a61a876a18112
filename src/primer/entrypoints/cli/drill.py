"""PRIMER drill CLI — run the standalone drills from the command line.

Every command prints its result to stdout. Booleans are printed as words
("valid", "balanced", "inside", ...) so output reads naturally in a shell.

Failure modes
- Arguments outside a drill's domain (negative factorial, radix 11, ragged
  or non-numeric matrix, non-3x3 board) → ``ClickException`` (exit code 1).
- Malformed numbers or JSON → ``BadParameter`` (exit code 2).
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar

import click
import click_extra as clickx

from primer import config
from primer.domain.errors import DrillInputError
from primer.domain.serialization import to_json
from primer.domain.value_objects import Circle, Point, Rectangle
from primer.drills import arithmetic, geometry, grids, text

from .helpers import NUMBER, JsonParamType

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def _drill_errors(func: F) -> F:
    """Turn DrillInputError raised by a command into a ClickException."""

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except DrillInputError as e:
            logger.debug("Drill %s rejected input: %s", func.__name__, e)
            raise click.ClickException(str(e)) from e

    return wrapper  # type: ignore[return-value]


def _echo_json(value: Any) -> None:
    try:
        indent = config.get_json_indent()
    except config.InvalidSettingError as e:
        raise click.ClickException(str(e)) from e
    click.echo(to_json(value, indent=indent))


def _word(flag: bool, yes: str, no: str) -> str:
    return yes if flag else no


@click.group(cls=clickx.ExtraGroup)
def drill() -> None:
    """Run the standalone drills."""


# ============================================================================
#                               Arithmetic
# ============================================================================


@drill.command()
@click.argument("numbers", nargs=-1, type=int, required=True)
def fizzbuzz(numbers: tuple[int, ...]) -> None:
    """Print Fizz, Buzz, FizzBuzz or the number for each of NUMBERS."""
    for num in numbers:
        click.echo(arithmetic.fizzbuzz(num))


@drill.command()
@click.argument("n", type=int)
@_drill_errors
def factorial(n: int) -> None:
    """Print N!."""
    click.echo(arithmetic.factorial(n))


@drill.command(name="sum")
@click.argument("n1", type=int)
@click.argument("n2", type=int)
def sum_between(n1: int, n2: int) -> None:
    """Print the sum of the integers from N1 to N2 inclusive."""
    click.echo(arithmetic.sum_between(n1, n2))


@drill.command()
@click.argument("number")
@_drill_errors
def luhn(number: str) -> None:
    """Check NUMBER with the Luhn checksum (credit card numbers)."""
    click.echo(_word(arithmetic.is_credit_card_number(number), "valid", "invalid"))


@drill.command(name="digital-root")
@click.argument("number", type=int)
@_drill_errors
def digital_root(number: int) -> None:
    """Print the digital root of NUMBER."""
    click.echo(arithmetic.digital_root(number))


@drill.command()
@click.argument("number", type=int)
@click.argument("radix", type=int)
@_drill_errors
def nary(number: int, radix: int) -> None:
    """Print NUMBER written in base RADIX (2..10)."""
    click.echo(arithmetic.to_nary_string(number, radix))


# ============================================================================
#                                   Text
# ============================================================================


@drill.command()
@click.argument("value")
@click.option(
    "--integer",
    "as_integer",
    is_flag=True,
    help="Treat VALUE as an integer and keep its sign.",
)
def reverse(value: str, as_integer: bool) -> None:
    """Print VALUE reversed."""
    if not as_integer:
        click.echo(text.reverse_string(value))
        return
    try:
        number = int(value)
    except ValueError as e:
        raise click.BadParameter(f"{value!r} is not an integer", param_hint="VALUE") from e
    click.echo(arithmetic.reverse_integer(number))


@drill.command(name="first-single")
@click.argument("value")
def first_single(value: str) -> None:
    """Print the first character of VALUE that occurs only once."""
    char = text.first_single_char(value)
    if char is None:
        raise click.ClickException("Every character repeats.")
    click.echo(char)


@drill.command()
@click.argument("a", type=NUMBER)
@click.argument("b", type=NUMBER)
@click.option(
    "--include-start/--exclude-start", default=True, show_default=True
)
@click.option("--include-end/--exclude-end", default=True, show_default=True)
def interval(a: float, b: float, include_start: bool, include_end: bool) -> None:
    """Print the interval between A and B, e.g. [0, 1)."""
    click.echo(text.interval_string(a, b, include_start, include_end))


@drill.command()
@click.argument("value")
def brackets(value: str) -> None:
    """Check whether VALUE is made of balanced brackets ([], (), {}, <>)."""
    click.echo(_word(text.is_brackets_balanced(value), "balanced", "unbalanced"))


@drill.command(name="common-path")
@click.argument("paths", nargs=-1, required=True)
def common_path(paths: tuple[str, ...]) -> None:
    """Print the directory shared by all PATHS (empty line if none)."""
    click.echo(text.common_directory_path(paths))


# ============================================================================
#                                 Geometry
# ============================================================================


@drill.command()
@click.argument("a", type=NUMBER)
@click.argument("b", type=NUMBER)
@click.argument("c", type=NUMBER)
def triangle(a: float, b: float, c: float) -> None:
    """Check whether sides A, B and C form a triangle."""
    click.echo(_word(geometry.is_triangle(a, b, c), "triangle", "not a triangle"))


@drill.command()
@click.argument("width", type=NUMBER)
@click.argument("height", type=NUMBER)
@click.option("--json", "as_json", is_flag=True, help="Print the rectangle as JSON.")
def rectangle(width: float, height: float, as_json: bool) -> None:
    """Print the area of a WIDTH x HEIGHT rectangle."""
    rect = Rectangle(width=width, height=height)
    if as_json:
        _echo_json({"width": rect.width, "height": rect.height, "area": rect.area})
    else:
        click.echo(rect.area)


@drill.command()
@click.option(
    "--first",
    nargs=4,
    type=NUMBER,
    required=True,
    metavar="TOP LEFT WIDTH HEIGHT",
    help="The first rectangle.",
)
@click.option(
    "--second",
    nargs=4,
    type=NUMBER,
    required=True,
    metavar="TOP LEFT WIDTH HEIGHT",
    help="The second rectangle.",
)
def overlap(first: tuple[float, ...], second: tuple[float, ...]) -> None:
    """Check whether two rectangles (canvas coordinates) overlap."""
    rects = [
        Rectangle(top=top, left=left, width=width, height=height)
        for top, left, width, height in (first, second)
    ]
    click.echo(_word(geometry.rectangles_overlap(*rects), "overlap", "apart"))


@drill.command()
@click.option("--center", nargs=2, type=NUMBER, required=True, metavar="X Y")
@click.option("--radius", type=NUMBER, required=True)
@click.argument("x", type=NUMBER)
@click.argument("y", type=NUMBER)
def circle(center: tuple[float, float], radius: float, x: float, y: float) -> None:
    """Check whether point (X, Y) lies inside the circle."""
    shape = Circle(center=Point(*center), radius=radius)
    inside = geometry.is_inside_circle(shape, Point(x, y))
    click.echo(_word(inside, "inside", "outside"))


# ============================================================================
#                                   Grids
# ============================================================================


@drill.command()
@click.argument("m1", type=JsonParamType(list))
@click.argument("m2", type=JsonParamType(list))
@_drill_errors
def matrix(m1: list, m2: list) -> None:
    """Print the product of matrices M1 and M2 given as JSON arrays of rows."""
    _echo_json(grids.matrix_product(m1, m2))


@drill.command()
@click.argument("position", type=JsonParamType(list))
@_drill_errors
def tictactoe(position: list) -> None:
    """Print the winner of POSITION, a JSON 3x3 board of "X", "0" and null."""
    winner = grids.evaluate_tic_tac_toe(position)
    click.echo(winner if winner is not None else "no winner")
