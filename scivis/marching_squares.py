"""Lookup tables and helpers for marching squares isoline extraction.

Cell corners and edges are numbered as follows, with y pointing up::

    0 ____ edge 0 ____ 1
    |                  |
  edge 3             edge 1
    |                  |
    3 ____ edge 2 ____ 2
"""

from __future__ import annotations

import numpy as np

EDGE_TABLE = (
    0b0000, 0b1001, 0b0011, 0b1010, 0b0110, 0b1111, 0b0101, 0b1100,
    0b1100, 0b0101, 0b1111, 0b0110, 0b1010, 0b0011, 0b1001, 0b0000,
)
"""Bit mask of the edges crossed by the isoline, indexed by cell case."""

EDGE_TO_VERTEX = ((0, 1), (1, 2), (3, 2), (0, 3))
"""The two corners joined by each edge."""

VERTEX_POSITIONS = ((0.0, 1.0), (1.0, 1.0), (1.0, 0.0), (0.0, 0.0))
"""Position of each corner inside the unit cell."""

_GRID_COLOR = (1.0, 1.0, 0.0, 0.2)


def case_index(corners, isovalue):
    """Return the cell case (0..15) for four corner values in corner order.

    Bit ``i`` is set when corner ``i`` lies below ``isovalue``.
    """
    corners = list(corners)
    if len(corners) != 4:
        raise ValueError("a marching squares cell has four corners")
    return sum(1 << i for i, value in enumerate(corners) if value < isovalue)


def grid_lines(width, height):
    """Build line-list render data outlining the pixel centres of an image.

    Each vertex holds seven floats: x, y, z and an RGBA colour. Horizontal
    lines come first (one per row), then vertical lines (one per column),
    all in the [-1, 1] square.
    """
    if width <= 0 or height <= 0:
        raise ValueError("image dimensions must be positive")
    x_stagger = 0.5 / width
    y_stagger = 0.5 / height
    vertices = []
    for y in range(height):
        fy = (y / height + y_stagger) * 2 - 1
        vertices.append((-1.0, fy, 0.0) + _GRID_COLOR)
        vertices.append((1.0, fy, 0.0) + _GRID_COLOR)
    for x in range(width):
        fx = (x / width + x_stagger) * 2 - 1
        vertices.append((fx, -1.0, 0.0) + _GRID_COLOR)
        vertices.append((fx, 1.0, 0.0) + _GRID_COLOR)
    return np.asarray(vertices, dtype=np.float32).ravel()