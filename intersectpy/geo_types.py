import math
from dataclasses import dataclass
from typing import Sequence, Union

import numpy as np


@dataclass(frozen=True)
class Vector:
    """
    Immutable 2D vector, also used as a point.

    Equality and hashing are exact on the coordinates.
    """

    x: float
    y: float

    def __post_init__(self):
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def __add__(self, other: "Vector") -> "Vector":
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector") -> "Vector":
        return Vector(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Vector":
        return Vector(-self.x, -self.y)

    def __mul__(self, scale: float) -> "Vector":
        return Vector(self.x * scale, self.y * scale)

    __rmul__ = __mul__

    def __iter__(self):
        yield self.x
        yield self.y

    def __str__(self):
        return f"Vector(x={self.x}, y={self.y})"

    def dot(self, other: "Vector") -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Vector") -> float:
        """Z component of the 3D cross product."""
        return self.x * other.y - self.y * other.x

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def normalize(self) -> "Vector":
        norm = self.length()
        if norm == 0:
            raise ValueError("Cannot normalize a zero-length vector")
        return Vector(self.x / norm, self.y / norm)

    def perp(self) -> "Vector":
        """Rotate by 90 degrees: (x, y) -> (-y, x)."""
        return Vector(-self.y, self.x)

    def distance_to(self, other: "Vector") -> float:
        return (self - other).length()

    def to_numpy(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=np.float64)

    def to_json(self):
        return {"x": self.x, "y": self.y}

    @staticmethod
    def from_json(json_data):
        return Vector(json_data["x"], json_data["y"])


# Points and vectors share one representation.
Point = Vector

VectorLike = Union[Sequence[float], Vector]


def as_vector(value: VectorLike) -> Vector:
    if isinstance(value, Vector):
        return value
    if len(value) != 2:
        raise ValueError(f"Expected a 2D coordinate pair, got {value!r}")
    return Vector(value[0], value[1])
