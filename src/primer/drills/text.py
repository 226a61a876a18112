"""String drills."""

from collections import Counter
from collections.abc import Sequence

BRACKET_PAIRS = {")": "(", "]": "[", "}": "{", ">": "<"}
OPENING_BRACKETS = frozenset(BRACKET_PAIRS.values())


def reverse_string(text: str) -> str:
    """Return ``text`` with its characters in reverse order."""
    return text[::-1]


def first_single_char(text: str) -> str | None:
    """Return the first character that occurs exactly once, or None."""
    counts = Counter(text)
    return next((ch for ch in text if counts[ch] == 1), None)


def interval_string(
    a: float, b: float, start_included: bool, end_included: bool
) -> str:
    """Render the interval between ``a`` and ``b`` in mathematical notation.

    The smaller bound is always written first, e.g. ``interval_string(5, 3,
    True, False) == "[3, 5)"``.
    """
    low, high = (a, b) if a < b else (b, a)
    opening = "[" if start_included else "("
    closing = "]" if end_included else ")"
    return f"{opening}{low}, {high}{closing}"


def is_brackets_balanced(text: str) -> bool:
    """Return True if ``text`` is made only of properly nested bracket pairs.

    Recognised pairs are ``[]``, ``()``, ``{}`` and ``<>``. The empty string
    is balanced; any other character makes the text unbalanced.
    """
    stack: list[str] = []
    for ch in text:
        if ch in OPENING_BRACKETS:
            stack.append(ch)
        elif ch in BRACKET_PAIRS:
            if not stack or stack.pop() != BRACKET_PAIRS[ch]:
                return False
        else:
            return False
    return not stack


def common_directory_path(paths: Sequence[str]) -> str:
    """Return the longest directory prefix shared by all ``paths``.

    The result ends with ``/`` unless nothing is shared, in which case it is
    the empty string.

    Examples:
        >>> common_directory_path(["/web/images/a.png", "/web/images/b.png"])
        '/web/images/'
        >>> common_directory_path(["/web/favicon.ico", "/web-scripts/dump"])
        '/'
    """
    if not paths:
        return ""
    # the last segment of each path is a file name, never a directory
    split = [path.split("/")[:-1] for path in paths]
    common: list[str] = []
    for segments in zip(*split):
        if any(segment != segments[0] for segment in segments[1:]):
            break
        common.append(segments[0])
    return "".join(f"{segment}/" for segment in common)
