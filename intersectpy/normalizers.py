"""
Shape normalizers - control form to canonical vertex lists.

Vertex order is fixed per shape type and the intersection tests rely on
it. Both functions accept either a shape object or its raw control points.
"""

from typing import Sequence, Tuple, Union

from .geo_types import Point, VectorLike, as_vector
from .primitives import Circle, Rectangle, Triangle

Polygon = Tuple[Point, ...]


def circle_radius(circle: Union[Circle, Sequence[VectorLike]]) -> float:
    if isinstance(circle, Circle):
        return circle.radius
    center, edge_point = circle
    return as_vector(center).distance_to(as_vector(edge_point))


def rectangle_vertices(rect: Union[Rectangle, Sequence[VectorLike]]) -> Polygon:
    """
    Rebuild the four corners of a rectangle from its edge-midpoint handles.

    Each corner is the center plus the offsets of two consecutive handles.

    Args:
        rect: Rectangle or its [center, m0, m1, m2, m3] control points

    Returns:
        Four corners; corner i sits between handle i and handle i + 1.
    """
    if not isinstance(rect, Rectangle):
        rect = Rectangle.from_control_points(rect)

    center = rect.center
    handles = rect.handles
    n = len(handles)
    return tuple(
        center + (handles[i] - center) + (handles[(i + 1) % n] - center)
        for i in range(n)
    )


def triangle_vertices(tri: Union[Triangle, Sequence[VectorLike]]) -> Polygon:
    """Isosceles triangle symmetric about the base-apex axis: (apex, left, right)."""
    if isinstance(tri, Triangle):
        base, apex = tri.base, tri.apex
    else:
        base, apex = (as_vector(p) for p in tri)

    u = base - apex
    return (apex, base + u.perp(), base + (-u).perp())


def is_degenerate_to_point(polygon: Sequence[VectorLike]) -> bool:
    first, *rest = (as_vector(p) for p in polygon)
    return all(p == first for p in rest)


def is_degenerate_to_line(polygon: Sequence[VectorLike]) -> bool:
    """True when any later vertex coincides with the first one."""
    first, *rest = (as_vector(p) for p in polygon)
    return any(p == first for p in rest)
