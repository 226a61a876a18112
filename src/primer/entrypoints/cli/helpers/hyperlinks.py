"""Links in PRIMER's help text.

Terminals that understand OSC-8 show a short label that opens the URL when
clicked. Everywhere else the label is followed by the URL in angle brackets
so it can still be copied.
"""

import os
import sys
from collections.abc import Mapping
from typing import TextIO

import click

LINK_TERMINALS = frozenset(
    {"apple_terminal", "vscode", "iterm.app", "wezterm", "kitty"}
)
LINK_TERM_PREFIXES = ("alacritty", "konsole")
LINK_ENV_MARKERS = ("WT_SESSION", "VTE_VERSION")  # Windows Terminal, VTE terminals


def supports_osc8(stream: TextIO | None = None) -> bool:
    """Guess whether ``stream`` (default ``sys.stdout``) renders OSC-8 links.

    Only TTYs qualify, and only inside a known terminal, recognised through
    ``TERM_PROGRAM``, ``WT_SESSION``, ``VTE_VERSION`` or ``TERM``.
    """
    target = sys.stdout if stream is None else stream
    isatty = getattr(target, "isatty", None)
    if isatty is None or not isatty():
        return False
    if os.environ.get("TERM_PROGRAM", "").lower() in LINK_TERMINALS:
        return True
    if any(os.environ.get(name) for name in LINK_ENV_MARKERS):
        return True
    return os.environ.get("TERM", "").startswith(LINK_TERM_PREFIXES)


def hyperlink(url: str, label: str) -> str:
    """Render ``label`` linked to ``url``.

    Falls back to ``"label <url>"`` when the terminal cannot show links.
    """
    if supports_osc8():
        return f"\x1b]8;;{url}\x07{label}\x1b]8;;\x07"  # OSC 8 ; ; URL BEL
    return f"{label} <{url}>"


def see_also(links: Mapping[str, str]) -> str:
    """Build a help epilog listing ``{label: url}`` links under "See Also:".

    The leading ``\\b`` line keeps Click from rewrapping the block.
    """
    heading = click.style("See Also:", fg="blue", bold=True, underline=True)
    lines = [f"  {hyperlink(url, label)}" for label, url in links.items()]
    return "\n".join(["\b", heading, *lines])
