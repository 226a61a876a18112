"""Terminal message helpers for the PRIMER CLI.

Render user-visible status lines with emoji→ASCII fallbacks. Messages go to
stderr so stdout stays reserved for results (selectors, JSON, numbers).
"""

import click

CAUTION = ("⚠️", "[!]")  # pragma: no mutate


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr.

    The stream is looked up on every call so redirections made after import
    (e.g. by test runners) are honoured.
    """
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def glyph(pair: tuple[str, str]) -> str:
    """Pick the emoji of an ``(emoji, ascii)`` pair when stderr can encode it."""
    emoji, fallback = pair
    return emoji if _supports_character(emoji) else fallback


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to **stderr**.

    Example:
        ``⚠️  '|' is not a standard CSS combinator.``
    """
    click.secho(f"{glyph(CAUTION)}  {msg}", fg="yellow", bold=True, err=True)

