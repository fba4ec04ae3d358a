"""Arcball rotation control mapping window positions onto a sphere."""

from __future__ import annotations

import math
from typing import NamedTuple


class Quaternion(NamedTuple):
    """Rotation quaternion with vector part (x, y, z) and scalar part w."""

    x: float
    y: float
    z: float
    w: float


def _cross(a, b):
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


class ArcBall:
    """Turns mouse drags in a window into rotation quaternions."""

    def __init__(self, width, height):
        self.width = width
        self.height = height
        self.radius = 1.0
        self.start_drag = (0.0, 0.0, 0.0)

    def set_window_size(self, width, height):
        self.width = width
        self.height = height

    def set_radius(self, radius):
        self.radius = radius

    def click(self, x, y):
        """Start a drag at window position (x, y)."""
        self.start_drag = self.map_to_sphere(x, y)

    def drag(self, x, y):
        """Return the rotation from the drag start to window position (x, y).

        A zero quaternion is returned when the two points nearly coincide.
        """
        current = self.map_to_sphere(x, y)
        axis = _cross(self.start_drag, current)
        dot = sum(a * b for a, b in zip(self.start_drag, current))
        if math.hypot(*axis) > 1.0e-5:
            return Quaternion(axis[0], axis[1], axis[2], dot)
        return Quaternion(0.0, 0.0, 0.0, 0.0)

    def map_to_sphere(self, x, y):
        """Map a window position to a point on or inside the arcball sphere."""
        nx = -((2.0 * x / float(self.width - 1)) - 1.0)
        ny = (2.0 * y / float(self.height - 1)) - 1.0
        length = math.hypot(nx, ny)
        if length > self.radius:
            norm = self.radius / length
            return (nx * norm, ny * norm, 0.0)
        return (nx, ny, length - self.radius)