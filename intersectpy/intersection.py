"""
Pairwise intersection tests between circles and convex polygons.

Rectangles and triangles are normalized to vertex lists first; polygon
pairs go through a separating axis test, circle/polygon pairs through
containment plus edge distance.
"""

import logging
from typing import Sequence, Union

import numpy as np

from .geo_types import VectorLike, as_vector
from .kernel import distance_point_to_segment, point_in_convex_poly
from .normalizers import (
    is_degenerate_to_line,
    is_degenerate_to_point,
    rectangle_vertices,
    triangle_vertices,
)
from .primitives import Circle, Rectangle, Triangle

logger = logging.getLogger(__name__)

CircleLike = Union[Circle, Sequence[VectorLike]]


def _as_circle(circle: CircleLike) -> Circle:
    if isinstance(circle, Circle):
        return circle
    return Circle(*circle)


def circle_circle(c1: CircleLike, c2: CircleLike) -> bool:
    """Closed-disk test; tangent circles intersect."""
    c1, c2 = _as_circle(c1), _as_circle(c2)
    return c1.center.distance_to(c2.center) <= c1.radius + c2.radius


def circle_polygon(circle: CircleLike, polygon: Sequence[VectorLike]) -> bool:
    """
    Approximate circle/polygon test: True iff some vertex lies strictly
    inside the circle.

    Misses a circle enclosed by the polygon and an edge passing through
    the circle between two outside vertices.
    """
    circle = _as_circle(circle)
    radius = circle.radius
    return any(circle.center.distance_to(as_vector(p)) < radius for p in polygon)


def _circle_convex_polygon(circle: CircleLike, polygon: Sequence[VectorLike]) -> bool:
    circle = _as_circle(circle)
    polygon = [as_vector(p) for p in polygon]
    center = circle.center
    radius = circle.radius

    if is_degenerate_to_point(polygon):
        logger.debug(f"Polygon collapsed to point {polygon[0]}, testing as a circle")
        return circle_circle(circle, Circle(polygon[0], polygon[0]))

    if is_degenerate_to_line(polygon):
        logger.debug(f"Polygon collapsed to a line {polygon}, testing edges only")
    elif point_in_convex_poly(center, polygon):
        return True

    n = len(polygon)
    for i in range(n):
        a, b = polygon[i], polygon[(i + 1) % n]
        if a == b:
            continue
        if distance_point_to_segment(center, a, b) <= radius:
            return True
    return False


def circle_rectangle(circle: CircleLike, rect: Rectangle) -> bool:
    return _circle_convex_polygon(circle, rectangle_vertices(rect))


def circle_triangle(circle: CircleLike, tri: Triangle) -> bool:
    return _circle_convex_polygon(circle, triangle_vertices(tri))


def _as_array(polygon: Sequence[VectorLike]) -> np.ndarray:
    return np.array([tuple(as_vector(p)) for p in polygon], dtype=np.float64)


def _edges(vertices: np.ndarray) -> np.ndarray:
    """Edge vectors; zero-length edges are dropped."""
    edges = np.roll(vertices, -1, axis=0) - vertices
    return edges[np.any(edges != 0, axis=1)]


def _edge_normals(vertices: np.ndarray) -> np.ndarray:
    """Unnormalized edge normals; zero-length edges are dropped."""
    edges = _edges(vertices)
    return np.column_stack((-edges[:, 1], edges[:, 0]))


def _has_zero_area(vertices: np.ndarray) -> bool:
    shifted = np.roll(vertices, -1, axis=0)
    twice_area = np.sum(vertices[:, 0] * shifted[:, 1] - shifted[:, 0] * vertices[:, 1])
    return twice_area == 0


def polygon_polygon(
    poly_a: Sequence[VectorLike], poly_b: Sequence[VectorLike]
) -> bool:
    """
    Separating axis test for two convex polygons.

    Both polygons are projected onto every edge normal of either polygon.
    A gap on any axis means they are apart; touching counts as overlap.
    When either polygon has collapsed to a line or a point, the edge
    directions are tested as well, and two points are tested along the
    line joining them.

    Args:
        poly_a: Vertices of the first polygon, in order
        poly_b: Vertices of the second polygon, in order

    Returns:
        True if overlapping or touching, False if a separating axis exists
    """
    verts_a = _as_array(poly_a)
    verts_b = _as_array(poly_b)
    candidates = [_edge_normals(verts_a), _edge_normals(verts_b)]

    if _has_zero_area(verts_a) or _has_zero_area(verts_b):
        candidates += [_edges(verts_a), _edges(verts_b)]
        offset = verts_b[0] - verts_a[0]
        if np.any(offset != 0):
            candidates.append(offset.reshape(1, 2))

    axes = np.vstack(candidates)
    if len(axes) == 0:
        return True

    # (n_vertices, n_axes)
    proj_a = verts_a @ axes.T
    proj_b = verts_b @ axes.T

    separated = (proj_a.max(axis=0) < proj_b.min(axis=0)) | (
        proj_b.max(axis=0) < proj_a.min(axis=0)
    )
    return not bool(separated.any())


def rectangle_rectangle(rect: Rectangle, other: Rectangle) -> bool:
    return polygon_polygon(rectangle_vertices(rect), rectangle_vertices(other))


def rectangle_triangle(rect: Rectangle, tri: Triangle) -> bool:
    return polygon_polygon(rectangle_vertices(rect), triangle_vertices(tri))


def triangle_triangle(tri: Triangle, other: Triangle) -> bool:
    return polygon_polygon(triangle_vertices(tri), triangle_vertices(other))
