"""Geometry predicates on triangles, rectangles and circles."""

from primer.domain.value_objects import Circle, Point, Rectangle


def is_triangle(a: float, b: float, c: float) -> bool:
    """Return True if a non-degenerate triangle has sides ``a``, ``b``, ``c``."""
    return a < b + c and b < a + c and c < a + b


def rectangles_overlap(rect1: Rectangle, rect2: Rectangle) -> bool:
    """Return True if two axis-aligned rectangles share interior area.

    Rectangles that only touch along an edge or a corner do not overlap.
    """
    return (
        rect1.left < rect2.right
        and rect2.left < rect1.right
        and rect1.top < rect2.bottom
        and rect2.top < rect1.bottom
    )


def is_inside_circle(circle: Circle, point: Point) -> bool:
    """Return True if ``point`` lies strictly inside ``circle``."""
    dx = point.x - circle.center.x
    dy = point.y - circle.center.y
    return dx * dx + dy * dy < circle.radius * circle.radius
