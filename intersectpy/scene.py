"""
Scene - collision report over a collection of control-form shapes.

Results are recomputed from the current control points on every call;
callers re-query after each interaction update.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .constants import CIRCLE, DEFAULT_SCENE, RECTANGLE, TRIANGLE
from .dispatch import intersects
from .primitives import Circle, Rectangle, Triangle

logger = logging.getLogger(__name__)


@dataclass
class Scene:
    """
    Rectangles, circles and triangles tested against each other.

    Shapes are indexed in the order returned by shapes(): rectangles first,
    then circles, then triangles.
    """

    rectangles: List[Rectangle] = field(default_factory=list)
    circles: List[Circle] = field(default_factory=list)
    triangles: List[Triangle] = field(default_factory=list)

    def shapes(self) -> list:
        return [*self.rectangles, *self.circles, *self.triangles]

    def colliding_pairs(self) -> List[Tuple[int, int]]:
        shapes = self.shapes()
        pairs = []
        for i in range(len(shapes)):
            for j in range(i + 1, len(shapes)):
                if intersects(shapes[i], shapes[j]):
                    pairs.append((i, j))

        logger.debug(f"{len(pairs)} colliding pairs among {len(shapes)} shapes")
        return pairs

    def collision_flags(self) -> List[bool]:
        """One flag per shape: True if it touches any other shape."""
        flags = [False] * len(self.shapes())
        for i, j in self.colliding_pairs():
            flags[i] = True
            flags[j] = True
        return flags

    def to_json(self):
        return {
            RECTANGLE: [r.to_json() for r in self.rectangles],
            CIRCLE: [c.to_json() for c in self.circles],
            TRIANGLE: [t.to_json() for t in self.triangles],
        }

    @staticmethod
    def from_json(json_data):
        return Scene(
            rectangles=[Rectangle.from_json(r) for r in json_data.get(RECTANGLE, [])],
            circles=[Circle.from_json(c) for c in json_data.get(CIRCLE, [])],
            triangles=[Triangle.from_json(t) for t in json_data.get(TRIANGLE, [])],
        )


def default_scene(layout: Optional[Dict[str, list]] = None) -> Scene:
    """Build a scene from raw control points, by default the demo's starting layout."""
    layout = layout if layout is not None else DEFAULT_SCENE
    return Scene(
        rectangles=[Rectangle.from_control_points(p) for p in layout.get(RECTANGLE, [])],
        circles=[Circle(*p) for p in layout.get(CIRCLE, [])],
        triangles=[Triangle(*p) for p in layout.get(TRIANGLE, [])],
    )
