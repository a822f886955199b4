"""
Dispatch table over {circle, rectangle, triangle}.

The reversed-order tests swap their arguments and call the canonical
ones, so both directions always agree.
"""

import logging

from .constants import CIRCLE, RECTANGLE, TRIANGLE
from .intersection import (
    circle_circle,
    circle_rectangle,
    circle_triangle,
    rectangle_rectangle,
    rectangle_triangle,
    triangle_triangle,
)

logger = logging.getLogger(__name__)


def rectangle_circle(rect, circle) -> bool:
    return circle_rectangle(circle, rect)


def triangle_rectangle(tri, rect) -> bool:
    return rectangle_triangle(rect, tri)


def triangle_circle(tri, circle) -> bool:
    return circle_triangle(circle, tri)


INTERSECTION_TABLE = {
    (CIRCLE, CIRCLE): circle_circle,
    (CIRCLE, RECTANGLE): circle_rectangle,
    (CIRCLE, TRIANGLE): circle_triangle,
    (RECTANGLE, CIRCLE): rectangle_circle,
    (RECTANGLE, RECTANGLE): rectangle_rectangle,
    (RECTANGLE, TRIANGLE): rectangle_triangle,
    (TRIANGLE, CIRCLE): triangle_circle,
    (TRIANGLE, RECTANGLE): triangle_rectangle,
    (TRIANGLE, TRIANGLE): triangle_triangle,
}


def intersects(a, b) -> bool:
    """
    Test any two control-form shapes for intersection.

    Raises:
        TypeError: If either argument is not a Circle, Rectangle or Triangle
    """
    try:
        test = INTERSECTION_TABLE[(a.kind, b.kind)]
    except (AttributeError, KeyError):
        raise TypeError(
            f"Unsupported shape pair: {type(a).__name__}, {type(b).__name__}"
        ) from None

    result = test(a, b)
    logger.debug(f"{test.__name__}({a!r}, {b!r}) -> {result}")
    return result
