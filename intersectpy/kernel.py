"""
Geometry kernel - orientation, segment and point-in-polygon queries.

Every function is a pure query over its arguments. Inputs may be Vectors
or plain (x, y) pairs.
"""

from typing import Sequence

import numpy as np

from .geo_types import Point, VectorLike, as_vector


def orient(a: VectorLike, b: VectorLike, c: VectorLike) -> int:
    """
    Orientation of the triangle (a, b, c).

    Returns:
        1 for counter-clockwise, -1 for clockwise, 0 for exactly collinear
        points. No tolerance is applied.
    """
    a, b, c = as_vector(a), as_vector(b), as_vector(c)
    area = (b - a).cross(c - a)
    if area > 0:
        return 1
    elif area < 0:
        return -1
    return 0


def segments_intersect(
    a: VectorLike, b: VectorLike, c: VectorLike, d: VectorLike
) -> bool:
    """
    Strict crossing test for segments a-b and c-d.

    Segments that only touch at an endpoint, or overlap colinearly, may
    report False.
    """
    return orient(a, b, c) != orient(a, b, d) and orient(c, d, a) != orient(c, d, b)


def line_intersection_point(
    a: VectorLike, b: VectorLike, c: VectorLike, d: VectorLike
) -> Point:
    """
    Intersection of the infinite lines through a-b and c-d.

    Parallel lines give a point with non-finite coordinates; callers must
    check for that themselves.
    """
    x1, y1 = as_vector(a)
    x2, y2 = as_vector(b)
    x3, y3 = as_vector(c)
    x4, y4 = as_vector(d)

    det = np.float64((x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4))
    p = x1 * y2 - y1 * x2
    q = x3 * y4 - y3 * x4

    with np.errstate(divide="ignore", invalid="ignore"):
        x = (p * (x3 - x4) - (x1 - x2) * q) / det
        y = (p * (y3 - y4) - (y1 - y2) * q) / det
    return Point(x, y)


def point_in_convex_poly(p: VectorLike, polygon: Sequence[VectorLike]) -> bool:
    """
    Check whether p lies inside or on the boundary of a convex polygon.

    Works for either winding, as long as it is consistent.
    """
    side = 0
    prev = polygon[-1]
    for current in polygon:
        o = orient(prev, current, p)
        if o != 0:
            if side == 0:
                side = o
            elif o != side:
                return False
        prev = current
    return True


def distance(a: VectorLike, b: VectorLike) -> float:
    return as_vector(a).distance_to(as_vector(b))


def midpoint(a: VectorLike, b: VectorLike) -> Point:
    return (as_vector(a) + as_vector(b)) * 0.5


def distance_point_to_segment(p: VectorLike, a: VectorLike, b: VectorLike) -> float:
    """
    Distance from p to the closest point of the finite segment a-b.

    Args:
        p: Query point
        a: Segment start
        b: Segment end

    Returns:
        Euclidean distance; for a zero-length segment, the distance to a.
    """
    p, a, b = as_vector(p), as_vector(a), as_vector(b)
    seg_len = a.distance_to(b)
    if seg_len == 0:
        return p.distance_to(a)

    direction = (b - a) * (1.0 / seg_len)
    ap = p - a
    t = direction.dot(ap)
    if t < 0:
        return p.distance_to(a)
    if t > seg_len:
        return p.distance_to(b)
    return (ap - direction * t).length()
