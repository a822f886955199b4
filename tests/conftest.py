import pytest

from intersectpy.primitives import Circle, Rectangle, Triangle


@pytest.fixture
def square_rect():
    """100x50 axis-aligned rectangle centered at (100, 100)."""
    return Rectangle((100, 100), [(100, 125), (150, 100), (100, 75), (50, 100)])


@pytest.fixture
def far_circle():
    """Radius 50 circle centered at (400, 100)."""
    return Circle((400, 100), (400, 50))


@pytest.fixture
def upright_triangle():
    return Triangle((255, 150), (255, 50))


@pytest.fixture
def leaning_triangle():
    return Triangle((255, 150), (260, 50))


@pytest.fixture
def unit_square():
    return [(0, 0), (4, 0), (4, 4), (0, 4)]
