"""
Example: Collision report for the demo layout

Builds the default scene of rectangles, circles and triangles, drags one
circle across a rectangle and prints which shapes touch another shape
after each step.
"""

import logging

from intersectpy import Circle, Vector, default_scene, intersects, rectangle_vertices


def example_default_scene():
    """Report collisions for the untouched starting layout."""

    scene = default_scene()
    print(f"Shapes: {len(scene.shapes())}")
    print(f"Colliding pairs: {scene.colliding_pairs()}")


def example_drag_circle():
    """Move a circle step by step towards the first rectangle."""

    scene = default_scene()
    rect = scene.rectangles[0]
    print(f"Rectangle corners: {[tuple(v) for v in rectangle_vertices(rect)]}")

    circle = scene.circles[0]
    for step in range(6):
        delta = Vector(-50 * step, 0)
        moved = Circle(circle.center + delta, circle.edge_point + delta)
        scene.circles[0] = moved
        print(
            f"center={tuple(moved.center)} hits rectangle: {intersects(moved, rect)} "
            f"flags: {scene.collision_flags()}"
        )


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    print("=" * 60)
    print("Example 1: Default scene")
    print("=" * 60)
    example_default_scene()

    print("\n" + "=" * 60)
    print("Example 2: Dragging a circle")
    print("=" * 60)
    example_drag_circle()
