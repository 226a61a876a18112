"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


# ============================================================================
#                       Selector builder related errors
# ============================================================================

DUPLICATE_PART_MSG = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector"
)
PART_ORDER_MSG = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)


class SelectorError(DomainError):
    """Base class for errors raised while building a CSS selector."""


class DuplicateSelectorPartError(SelectorError):
    """Raised when a part that may occur only once is appended a second time."""

    def __init__(self, part: str) -> None:
        super().__init__(DUPLICATE_PART_MSG)
        self.part = part


class SelectorOrderError(SelectorError):
    """Raised when a part is appended after a part that must follow it."""

    def __init__(self, part: str, after: str) -> None:
        super().__init__(PART_ORDER_MSG)
        self.part = part
        self.after = after


class CombinedSelectorError(SelectorError):
    """Raised when a part is appended to a selector produced by ``combine``."""

    def __init__(self, part: str, selector: str) -> None:
        super().__init__(
            f"Cannot append {part} to combined selector '{selector}'; "
            "build each side before combining."
        )
        self.part = part
        self.selector = selector


# ============================================================================
#                           Serialization errors
# ============================================================================


class SerializationError(DomainError):
    """Raised when a value cannot be converted to or from JSON."""


# ============================================================================
#                               Drill errors
# ============================================================================


class DrillInputError(DomainError, ValueError):
    """Raised when a drill receives an argument outside its domain."""


class MatrixShapeError(DrillInputError):
    """Raised when the shapes of two matrices do not allow a product."""

    def __init__(self, left: tuple[int, int], right: tuple[int, int]) -> None:
        super().__init__(
            f"Cannot multiply a {left[0]}x{left[1]} matrix "
            f"by a {right[0]}x{right[1]} matrix."
        )
        self.left = left
        self.right = right


class InvalidBoardError(DrillInputError):
    """Raised when a tic-tac-toe position is not a 3x3 board."""
