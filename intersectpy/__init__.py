"""
intersectpy - 2D convex shape intersection for circles, rectangles and triangles.

Shapes are given in control form (center and handles, base and apex,
center and edge point) and normalized to vertex lists on each query.
"""

__version__ = "0.1.0"
__author__ = "Your Name"
__email__ = "your.email@example.com"

from .dispatch import (
    intersects,
    rectangle_circle,
    triangle_circle,
    triangle_rectangle,
)
from .geo_types import Point, Vector, as_vector
from .intersection import (
    circle_circle,
    circle_polygon,
    circle_rectangle,
    circle_triangle,
    polygon_polygon,
    rectangle_rectangle,
    rectangle_triangle,
    triangle_triangle,
)
from .kernel import (
    distance,
    distance_point_to_segment,
    line_intersection_point,
    midpoint,
    orient,
    point_in_convex_poly,
    segments_intersect,
)
from .normalizers import (
    circle_radius,
    is_degenerate_to_line,
    is_degenerate_to_point,
    rectangle_vertices,
    triangle_vertices,
)
from .primitives import Circle, Rectangle, Triangle, shape_from_json
from .scene import Scene, default_scene

__all__ = [
    # Geometry types
    "Vector",
    "Point",
    "as_vector",
    # Shapes
    "Circle",
    "Rectangle",
    "Triangle",
    "shape_from_json",
    # Kernel
    "orient",
    "segments_intersect",
    "line_intersection_point",
    "point_in_convex_poly",
    "distance",
    "midpoint",
    "distance_point_to_segment",
    # Normalizers
    "circle_radius",
    "rectangle_vertices",
    "triangle_vertices",
    "is_degenerate_to_point",
    "is_degenerate_to_line",
    # Intersection tests
    "circle_circle",
    "circle_polygon",
    "circle_rectangle",
    "circle_triangle",
    "polygon_polygon",
    "rectangle_rectangle",
    "rectangle_triangle",
    "triangle_triangle",
    "rectangle_circle",
    "triangle_rectangle",
    "triangle_circle",
    "intersects",
    # Scene
    "Scene",
    "default_scene",
]
