"""PRIMER selector CLI — build CSS selectors from the command line.

Tokens of the form ``kind=value`` append a part to the current compound
selector; any other token is a combinator that closes the current compound
selector and starts the next one. Compound selectors are combined left to
right::

    $ primer selector build element=div id=main + element=table '~' element=tr
    div#main + table ~ tr

Failure modes
- Parts out of order or repeated → ``ClickException`` (exit code 1) carrying
  the builder's message.
- A combinator with no selector on one side → ``UsageError`` (exit code 2).
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import click
import click_extra as clickx

from primer import config
from primer.domain.errors import SelectorError
from primer.domain.selector import (
    EMPTY_SELECTOR,
    Combinator,
    Selector,
    SelectorPart,
    combine,
)
from primer.domain.serialization import to_json

from .helpers import warn

logger = logging.getLogger(__name__)

KIND_ALIASES = {"attr": SelectorPart.ATTRIBUTE}
STANDARD_COMBINATORS = frozenset(c.value for c in Combinator)

DANGLING_COMBINATOR_MSG = "Each combinator must sit between two selectors."


def _lookup_part(kind: str) -> SelectorPart | None:
    if kind in KIND_ALIASES:
        return KIND_ALIASES[kind]
    try:
        return SelectorPart(kind)
    except ValueError:
        return None


def _split_part_token(token: str) -> tuple[SelectorPart, str] | None:
    """Return (part, value) for a KIND=VALUE token, None for a combinator."""
    kind, sep, value = token.partition("=")
    part = _lookup_part(kind) if sep else None
    return None if part is None else (part, value)


def build_selector(tokens: Sequence[str]) -> Selector:
    """Fold command-line tokens into a selector.

    Raises:
        click.UsageError: If a combinator is not surrounded by selectors.
        SelectorError: If the builder rejects a part.
    """
    compounds: list[Selector] = [EMPTY_SELECTOR]
    combinators: list[str] = []
    for token in tokens:
        if (split := _split_part_token(token)) is None:
            logger.debug("Token %r treated as combinator", token)
            combinators.append(token)
            compounds.append(EMPTY_SELECTOR)
        else:
            compounds[-1] = compounds[-1].append(*split)

    if any(compound == EMPTY_SELECTOR for compound in compounds):
        raise click.UsageError(DANGLING_COMBINATOR_MSG)

    result = compounds[0]
    for combinator, right in zip(combinators, compounds[1:]):
        result = combine(result, combinator, right)
    return result


@click.group(cls=clickx.ExtraGroup)
def selector() -> None:
    """Build CSS selectors."""


@selector.command()
@click.argument("tokens", nargs=-1, required=True)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print the selector value object as JSON instead of CSS text.",
)
def build(tokens: tuple[str, ...], as_json: bool) -> None:
    """Build a selector from TOKENS and print it.

    Each token is either KIND=VALUE, with KIND one of element, id, class,
    attr, pseudo-class or pseudo-element, or a combinator such as '>', '+',
    '~' or ' '.
    """
    try:
        result = build_selector(tokens)
    except SelectorError as e:
        raise click.ClickException(str(e)) from e

    for token in tokens:
        if _split_part_token(token) is None and token not in STANDARD_COMBINATORS:
            warn(f"{token!r} is not a standard CSS combinator; passing it through.")

    if as_json:
        try:
            indent = config.get_json_indent()
        except config.InvalidSettingError as e:
            raise click.ClickException(str(e)) from e
        click.echo(to_json(result, indent=indent))
    else:
        click.echo(result.stringify())


@selector.command()
def kinds() -> None:
    """List selector part kinds in the order they must appear."""
    for part in SelectorPart:
        occurrence = "once" if part.unique else "repeatable"
        click.echo(f"{part.rank}  {part.value:<15} {part.format('VALUE'):<10} {occurrence}")
