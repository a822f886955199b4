import math

import pytest

from intersectpy.geo_types import Vector
from intersectpy.normalizers import (
    circle_radius,
    is_degenerate_to_line,
    is_degenerate_to_point,
    rectangle_vertices,
    triangle_vertices,
)
from intersectpy.primitives import Circle, Rectangle, Triangle


class TestRectangleVertices:
    def test_corners_from_handles(self, square_rect):
        assert rectangle_vertices(square_rect) == (
            Vector(150, 125),
            Vector(150, 75),
            Vector(50, 75),
            Vector(50, 125),
        )

    def test_raw_control_points(self, square_rect):
        raw = [(100, 100), (100, 125), (150, 100), (100, 75), (50, 100)]
        assert rectangle_vertices(raw) == rectangle_vertices(square_rect)

    def test_method_matches_function(self, square_rect):
        assert square_rect.vertices() == rectangle_vertices(square_rect)

    def test_rotated_rectangle(self):
        rect = Rectangle((0, 0), [(1, 1), (1, -1), (-1, -1), (-1, 1)])
        assert rectangle_vertices(rect) == (
            Vector(2, 0),
            Vector(0, -2),
            Vector(-2, 0),
            Vector(0, 2),
        )

    def test_wrong_handle_count(self):
        with pytest.raises(ValueError):
            Rectangle((0, 0), [(0, 1), (1, 0), (0, -1)])
        with pytest.raises(ValueError):
            rectangle_vertices([(0, 0), (0, 1)])


class TestTriangleVertices:
    def test_isosceles_from_base_and_apex(self, upright_triangle):
        assert triangle_vertices(upright_triangle) == (
            Vector(255, 50),
            Vector(155, 150),
            Vector(355, 150),
        )

    def test_raw_control_points(self, upright_triangle):
        assert triangle_vertices([(255, 150), (255, 50)]) == upright_triangle.vertices()

    def test_symmetric_about_axis(self, leaning_triangle):
        apex, left, right = triangle_vertices(leaning_triangle)
        assert math.isclose(apex.distance_to(left), apex.distance_to(right))
        assert leaning_triangle.base == (left + right) * 0.5


def test_circle_radius():
    assert circle_radius(Circle((0, 0), (3, 4))) == 5
    assert circle_radius([(1, 1), (1, 3)]) == 2


class TestDegeneracy:
    def test_regular_polygon(self, square_rect):
        vertices = rectangle_vertices(square_rect)
        assert not is_degenerate_to_point(vertices)
        assert not is_degenerate_to_line(vertices)

    def test_collapsed_rectangle_is_point(self):
        rect = Rectangle((5, 5), [(5, 5)] * 4)
        vertices = rectangle_vertices(rect)
        assert is_degenerate_to_point(vertices)
        assert is_degenerate_to_line(vertices)

    def test_flattened_rectangle_is_line(self):
        rect = Rectangle((0, 0), [(0, 0), (10, 0), (0, 0), (-10, 0)])
        vertices = rectangle_vertices(rect)
        assert is_degenerate_to_line(vertices)
        assert not is_degenerate_to_point(vertices)

    def test_collapsed_triangle_is_point(self):
        assert is_degenerate_to_point(triangle_vertices(Triangle((3, 3), (3, 3))))

    def test_exact_comparison(self):
        assert not is_degenerate_to_point([(0, 0), (0, 1e-12), (0, 0)])
