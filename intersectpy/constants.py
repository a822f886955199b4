CIRCLE = "circle"
RECTANGLE = "rectangle"
TRIANGLE = "triangle"

ALL_SHAPE_KINDS = [CIRCLE, RECTANGLE, TRIANGLE]

RECTANGLE_HANDLE_COUNT = 4

# Starting layout of the interactive demo, in canvas pixels.
# Rectangles: center followed by four edge-midpoint handles.
DEFAULT_RECTANGLES = [
    [(100, 100), (100, 125), (150, 100), (100, 75), (50, 100)],
    [(245, 250), (245, 300), (270, 250), (245, 200), (220, 250)],
    [(400, 400), (400, 450), (450, 400), (400, 350), (350, 400)],
]
# Circles: center, point on the circumference.
DEFAULT_CIRCLES = [
    [(400, 100), (400, 50)],
    [(100, 250), (150, 250)],
    [(245, 400), (245, 450)],
]
# Triangles: base point, opposite vertex.
DEFAULT_TRIANGLES = [
    [(255, 150), (255, 50)],
    [(400, 300), (400, 200)],
    [(100, 450), (100, 350)],
]

DEFAULT_SCENE = {
    RECTANGLE: DEFAULT_RECTANGLES,
    CIRCLE: DEFAULT_CIRCLES,
    TRIANGLE: DEFAULT_TRIANGLES,
}
