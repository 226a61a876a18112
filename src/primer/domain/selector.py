"""Immutable CSS selector builder.

A compound selector is written as::

    element#id.class[attr]:pseudo-class::pseudo-element

Parts must be appended in that order. Element and pseudo-element may occur
at most once; id, class, attribute and pseudo-class parts may repeat. Two
selectors can be joined with a combinator (``" "``, ``">"``, ``"+"``, ``"~"``
or any other token, which is passed through untouched).

Every operation returns a new :class:`Selector`; the receiver is never
modified, so intermediate selectors can be shared and reused::

    >>> base = css_selector_builder.element("a")
    >>> base.attr('href$=".png"').pseudo_class("focus").stringify()
    'a[href$=".png"]:focus'
    >>> combine(base, "+", css_selector_builder.element("span")).stringify()
    'a + span'
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from primer.domain.errors import (
    CombinedSelectorError,
    DuplicateSelectorPartError,
    SelectorError,
    SelectorOrderError,
)

NO_RANK = -1
"""Rank of a selector that has no parts yet."""


class SelectorPart(Enum):
    """Kinds of simple selector, declared in the order they must appear."""

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def rank(self) -> int:
        """Position of the part within a compound selector (0..5)."""
        return _RANKS[self]

    @property
    def unique(self) -> bool:
        """Whether the part may occur at most once per compound selector."""
        return self in _UNIQUE_PARTS

    def format(self, value: str) -> str:
        """Render ``value`` with this part's prefix/suffix (e.g. ``#main``)."""
        prefix, suffix = _AFFIXES[self]
        return f"{prefix}{value}{suffix}"

    @classmethod
    def from_rank(cls, rank: int) -> SelectorPart:
        """Return the part with the given rank.

        Raises:
            ValueError: If no part has that rank.
        """
        for part in cls:
            if part.rank == rank:
                return part
        raise ValueError(f"No selector part has rank {rank}")


_RANKS = {part: rank for rank, part in enumerate(SelectorPart)}
MAX_RANK = len(_RANKS) - 1
_UNIQUE_PARTS = frozenset({SelectorPart.ELEMENT, SelectorPart.PSEUDO_ELEMENT})
_AFFIXES = {
    SelectorPart.ELEMENT: ("", ""),
    SelectorPart.ID: ("#", ""),
    SelectorPart.CLASS: (".", ""),
    SelectorPart.ATTRIBUTE: ("[", "]"),
    SelectorPart.PSEUDO_CLASS: (":", ""),
    SelectorPart.PSEUDO_ELEMENT: ("::", ""),
}


class Combinator(Enum):
    """Standard CSS combinators.

    ``combine`` accepts any string as well; these are a convenience.
    """

    DESCENDANT = " "
    CHILD = ">"
    NEXT_SIBLING = "+"
    SUBSEQUENT_SIBLING = "~"


@dataclass(frozen=True, slots=True)
class Selector:
    """Value object holding a (partial) CSS selector.

    Attributes:
        text: The selector rendered so far.
        last_rank: Rank of the last appended part, ``NO_RANK`` when empty.
        combined: True when produced by :func:`combine`. Combined selectors
            accept no further parts but may be combined again.

    Raises:
        SelectorError: If ``last_rank`` is outside ``NO_RANK..MAX_RANK``.
    """

    text: str = ""
    last_rank: int = NO_RANK
    combined: bool = False

    def __post_init__(self) -> None:
        if not NO_RANK <= self.last_rank <= MAX_RANK:
            raise SelectorError(
                f"last_rank must be between {NO_RANK} and {MAX_RANK}, "
                f"got {self.last_rank}"
            )

    # --- Part appenders ---

    def append(self, part: SelectorPart, value: str) -> Selector:
        """Return a new selector with ``part`` appended.

        Args:
            part: The kind of simple selector to append.
            value: Raw value; it is not validated.

        Returns:
            A new Selector; ``self`` is left untouched.

        Raises:
            CombinedSelectorError: If this selector was produced by ``combine``.
            DuplicateSelectorPartError: If ``part`` is unique and already present.
            SelectorOrderError: If a part that must follow ``part`` is already present.
        """
        if self.combined:
            raise CombinedSelectorError(part.value, self.text)
        if part.unique and self.last_rank == part.rank:
            raise DuplicateSelectorPartError(part.value)
        if self.last_rank > part.rank:
            after = SelectorPart.from_rank(self.last_rank)
            raise SelectorOrderError(part.value, after.value)
        return Selector(text=self.text + part.format(value), last_rank=part.rank)

    def element(self, value: str) -> Selector:
        """Append a type selector (``div``)."""
        return self.append(SelectorPart.ELEMENT, value)

    def id(self, value: str) -> Selector:
        """Append an id selector (``#main``)."""
        return self.append(SelectorPart.ID, value)

    def class_(self, value: str) -> Selector:
        """Append a class selector (``.container``)."""
        return self.append(SelectorPart.CLASS, value)

    def attr(self, value: str) -> Selector:
        """Append an attribute selector (``[href$=".png"]``)."""
        return self.append(SelectorPart.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> Selector:
        """Append a pseudo-class (``:focus``)."""
        return self.append(SelectorPart.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> Selector:
        """Append a pseudo-element (``::before``)."""
        return self.append(SelectorPart.PSEUDO_ELEMENT, value)

    # --- Combination / output ---

    @staticmethod
    def combine(
        left: Selector, combinator: str | Combinator, right: Selector
    ) -> Selector:
        """Join two selectors with a combinator token.

        The token is not validated. The result is marked as combined.
        """
        token = combinator.value if isinstance(combinator, Combinator) else combinator
        return Selector(text=f"{left.text} {token} {right.text}", combined=True)

    def stringify(self) -> str:
        """Return the selector as CSS text."""
        return self.text

    def __str__(self) -> str:
        return self.text


EMPTY_SELECTOR = Selector()

css_selector_builder = EMPTY_SELECTOR
"""Entry point for building selectors, e.g. ``css_selector_builder.id("main")``."""

combine = Selector.combine


def element(value: str) -> Selector:
    """Start a selector with a type selector."""
    return EMPTY_SELECTOR.element(value)


def id_(value: str) -> Selector:
    """Start a selector with an id selector."""
    return EMPTY_SELECTOR.id(value)


def class_(value: str) -> Selector:
    """Start a selector with a class selector."""
    return EMPTY_SELECTOR.class_(value)


def attr(value: str) -> Selector:
    """Start a selector with an attribute selector."""
    return EMPTY_SELECTOR.attr(value)


def pseudo_class(value: str) -> Selector:
    """Start a selector with a pseudo-class."""
    return EMPTY_SELECTOR.pseudo_class(value)


def pseudo_element(value: str) -> Selector:
    """Start a selector with a pseudo-element."""
    return EMPTY_SELECTOR.pseudo_element(value)


def stringify(selector: Selector) -> str:
    """Return ``selector`` as CSS text."""
    return selector.stringify()
