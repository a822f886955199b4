import pytest

from intersectpy.geo_types import Vector
from intersectpy.primitives import Circle, Rectangle, Triangle, shape_from_json


def test_circle_control_points():
    circle = Circle((0, 0), (0, 10))
    assert circle.control_points == (Vector(0, 0), Vector(0, 10))
    assert circle.radius == 10
    assert circle.kind == "circle"


def test_rectangle_from_control_points(square_rect):
    rect = Rectangle.from_control_points(square_rect.control_points)
    assert rect.center == Vector(100, 100)
    assert rect.handles == square_rect.handles


def test_rectangle_control_form_size():
    with pytest.raises(ValueError):
        Rectangle.from_control_points([(0, 0), (0, 1), (1, 0)])


def test_invalid_coordinates():
    with pytest.raises(ValueError):
        Circle((0, 0, 0), (1, 1))


@pytest.mark.parametrize(
    "shape",
    [
        Circle((1, 2), (3, 4)),
        Rectangle((0, 0), [(0, 1), (2, 0), (0, -1), (-2, 0)]),
        Triangle((5, 5), (5, 0)),
    ],
)
def test_shape_json(shape):
    restored = shape_from_json(shape.to_json())
    assert type(restored) is type(shape)
    assert restored.control_points == shape.control_points


def test_unknown_shape_kind():
    with pytest.raises(ValueError):
        shape_from_json({"kind": "hexagon"})
