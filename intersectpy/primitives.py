"""
2D shapes in control form.

A control form is the small set of user-manipulable points a shape is
derived from. The shapes hold no derived geometry; vertices are rebuilt
from the current control points on every query.
"""

from typing import List, Sequence, Tuple

from .constants import CIRCLE, RECTANGLE, RECTANGLE_HANDLE_COUNT, TRIANGLE
from .geo_types import Point, Vector, VectorLike, as_vector


class Circle:
    """A circle given by its center and a point on its circumference."""

    kind = CIRCLE

    def __init__(self, center: VectorLike, edge_point: VectorLike):
        self.center = as_vector(center)
        self.edge_point = as_vector(edge_point)

    @property
    def control_points(self) -> Tuple[Point, Point]:
        return (self.center, self.edge_point)

    @property
    def radius(self) -> float:
        return self.center.distance_to(self.edge_point)

    def __repr__(self):
        return f"Circle(center={self.center}, edge_point={self.edge_point})"

    def to_json(self):
        return {
            "kind": self.kind,
            "center": self.center.to_json(),
            "edge_point": self.edge_point.to_json(),
        }

    @staticmethod
    def from_json(json_data):
        return Circle(
            Vector.from_json(json_data["center"]),
            Vector.from_json(json_data["edge_point"]),
        )


class Rectangle:
    """
    A rectangle given by its center and four edge-midpoint handles.

    Handles must be in cyclic order around the center, each reachable from
    the center by an offset perpendicular to its neighbours'. Keeping
    that invariant while dragging is the caller's job.
    """

    kind = RECTANGLE

    def __init__(self, center: VectorLike, handles: Sequence[VectorLike]):
        if len(handles) != RECTANGLE_HANDLE_COUNT:
            raise ValueError(
                f"Rectangle requires {RECTANGLE_HANDLE_COUNT} handles, got {len(handles)}"
            )
        self.center = as_vector(center)
        self.handles: List[Point] = [as_vector(h) for h in handles]

    @classmethod
    def from_control_points(cls, points: Sequence[VectorLike]) -> "Rectangle":
        """Build from the flat [center, m0, m1, m2, m3] form."""
        if len(points) != RECTANGLE_HANDLE_COUNT + 1:
            raise ValueError(
                f"Rectangle control form needs {RECTANGLE_HANDLE_COUNT + 1} points, got {len(points)}"
            )
        return cls(points[0], points[1:])

    @property
    def control_points(self) -> Tuple[Point, ...]:
        return (self.center, *self.handles)

    def vertices(self) -> Tuple[Point, ...]:
        from .normalizers import rectangle_vertices

        return rectangle_vertices(self)

    def __repr__(self):
        return f"Rectangle(center={self.center}, handles={self.handles})"

    def to_json(self):
        return {
            "kind": self.kind,
            "center": self.center.to_json(),
            "handles": [h.to_json() for h in self.handles],
        }

    @staticmethod
    def from_json(json_data):
        return Rectangle(
            Vector.from_json(json_data["center"]),
            [Vector.from_json(h) for h in json_data["handles"]],
        )


class Triangle:
    """An isosceles triangle given by a base point and the opposite vertex."""

    kind = TRIANGLE

    def __init__(self, base: VectorLike, apex: VectorLike):
        self.base = as_vector(base)
        self.apex = as_vector(apex)

    @property
    def control_points(self) -> Tuple[Point, Point]:
        return (self.base, self.apex)

    def vertices(self) -> Tuple[Point, ...]:
        from .normalizers import triangle_vertices

        return triangle_vertices(self)

    def __repr__(self):
        return f"Triangle(base={self.base}, apex={self.apex})"

    def to_json(self):
        return {
            "kind": self.kind,
            "base": self.base.to_json(),
            "apex": self.apex.to_json(),
        }

    @staticmethod
    def from_json(json_data):
        return Triangle(
            Vector.from_json(json_data["base"]),
            Vector.from_json(json_data["apex"]),
        )


SHAPE_TYPES = {
    CIRCLE: Circle,
    RECTANGLE: Rectangle,
    TRIANGLE: Triangle,
}


def shape_from_json(json_data):
    kind = json_data.get("kind")
    if kind not in SHAPE_TYPES:
        raise ValueError(f"Unknown shape kind: {kind}")
    return SHAPE_TYPES[kind].from_json(json_data)
