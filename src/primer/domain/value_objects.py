"""Module including value objects used across the domain layer."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Rectangle:
    """Axis-aligned rectangle in canvas coordinates (y grows downward).

    ``top``/``left`` locate the upper-left corner and default to the origin,
    so ``Rectangle(10, 20).area == 200``.
    """

    width: float
    height: float
    top: float = 0
    left: float = 0

    @property
    def area(self) -> float:
        """Width times height."""
        return self.width * self.height

    @property
    def bottom(self) -> float:
        """Y coordinate of the lower edge."""
        return self.top + self.height

    @property
    def right(self) -> float:
        """X coordinate of the right edge."""
        return self.left + self.width


@dataclass(frozen=True, slots=True)
class Point:
    """Value object representing a point in the plane."""

    x: float
    y: float


@dataclass(frozen=True, slots=True)
class Circle:
    """Value object representing a circle."""

    center: Point
    radius: float
