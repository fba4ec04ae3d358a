"""Steady 3D vector fields on regular grids, with demo fields and a text loader."""

from __future__ import annotations

import math
import re
from enum import Enum

import numpy as np

_INT_PREFIX = re.compile(r"[+-]?\d+")
_FLOAT_PREFIX = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


class DemoType(Enum):
    """Analytic fields that :meth:`Flowfield.gen_demo` can generate."""

    DRAIN = 0
    SADDLE = 1
    CRITICAL = 2


def _parse_int(token):
    match = _INT_PREFIX.match(token.lstrip())
    if match is None:
        raise ValueError(f"invalid integer {token!r}")
    return int(match.group())


def _parse_float(token):
    match = _FLOAT_PREFIX.match(token.lstrip())
    if match is None:
        raise ValueError(f"invalid number {token!r}")
    return float(match.group())


def demo_vectors(size, demo_type):
    """Return the demo field as a ``(size**3, 3)`` array, x varying fastest."""
    if size <= 0:
        raise ValueError("field size must be positive")
    local = np.arange(size, dtype=np.float64) / size
    lz, ly, lx = np.meshgrid(local, local, local, indexing="ij")
    if demo_type is DemoType.DRAIN:
        components = (
            (-ly + 0.5) + (0.5 - lx) / 10.0,
            (lx - 0.5) + (0.5 - ly) / 10.0,
            -lz / 10.0,
        )
    elif demo_type is DemoType.SADDLE:
        components = (0.5 - lx, ly - 0.5, 0.5 - lz)
    elif demo_type is DemoType.CRITICAL:
        components = (
            (lx - 0.1) * (ly - 0.3) * (lx - 0.8),
            (ly - 0.7) * (lz - 0.2) * (lx - 0.3),
            (lz - 0.9) * (lz - 0.6) * (lx - 0.5),
        )
    else:
        raise ValueError(f"unknown demo type {demo_type!r}")
    return np.stack(components, axis=-1).reshape(-1, 3).astype(np.float32)


def _lerp(a, b, alpha):
    return a * (1.0 - alpha) + b * alpha


def _cell(coordinate, size):
    if not 0.0 <= coordinate <= 1.0:
        raise ValueError("positions must lie inside the unit cube")
    scaled = coordinate * (size - 1)
    low = math.floor(scaled)
    return low, math.ceil(scaled), scaled - low


class Flowfield:
    """Vector field sampled on a ``size_x`` x ``size_y`` x ``size_z`` grid."""

    def __init__(self, size_x, size_y, size_z):
        if size_x <= 0 or size_y <= 0 or size_z <= 0:
            raise ValueError("field dimensions must be positive")
        self.size_x = size_x
        self.size_y = size_y
        self.size_z = size_z
        self.data = np.zeros((size_x * size_y * size_z, 3), dtype=np.float32)

    @classmethod
    def gen_demo(cls, size, demo_type):
        """Generate one of the analytic demo fields on a cubic grid."""
        field = cls(size, size, size)
        field.data = demo_vectors(size, demo_type)
        return field

    @classmethod
    def from_file(cls, filename):
        """Load a comma separated field file.

        The file holds the dimension count (1 to 3), the sizes, the number
        of time steps and then the vector components, all separated by commas.
        """
        try:
            with open(filename, encoding="latin-1") as file:
                content = file.read()
        except OSError as exc:
            raise OSError(f"Can't open file {filename}") from exc

        tokens = iter(content.split(","))

        def next_int():
            return _parse_int(next(tokens, ""))

        def next_float():
            return _parse_float(next(tokens, ""))

        dims = next_int()
        if dims < 1 or dims > 3:
            raise ValueError(f"Invalid dimension {dims}")

        size_x = size_y = size_z = 1
        size_x = next_int()
        if dims == 2:
            size_y = next_int()
        if dims == 3:
            size_z = next_int()

        timesteps = next_int()
        if timesteps < 1:
            raise ValueError(f"Invalid timesteps {timesteps}")

        field = cls(size_x, size_y, size_z)
        x = y = z = 0.0
        for index in range(size_x * size_y * size_z):
            x = next_float()
            if dims == 2:
                y = next_float()
            if dims == 3:
                z = next_float()
            field.data[index] = (x, y, z)
        return field

    def _at(self, x, y, z):
        return self.data[x + y * self.size_y + z * self.size_x * self.size_y].astype(
            np.float64
        )

    def interpolate(self, pos):
        """Trilinearly interpolate the field at a position in the unit cube."""
        fx, cx, alpha = _cell(pos[0], self.size_x)
        fy, cy, beta = _cell(pos[1], self.size_y)
        fz, cz, gamma = _cell(pos[2], self.size_z)

        near = _lerp(
            _lerp(self._at(fx, fy, fz), self._at(cx, fy, fz), alpha),
            _lerp(self._at(fx, cy, fz), self._at(cx, cy, fz), alpha),
            beta,
        )
        far = _lerp(
            _lerp(self._at(fx, fy, cz), self._at(cx, fy, cz), alpha),
            _lerp(self._at(fx, cy, cz), self._at(cx, cy, cz), alpha),
            beta,
        )
        return _lerp(near, far, gamma)


def _vertex_record(point):
    x, y, z = (float(c) for c in point)
    return (x * 2 - 1, y * 2 - 1, z * 2 - 1, x, y, z, 1.0)


def line_points_to_render_data(line_points, line_count, line_length):
    """Turn integral curve points into a flat line-list vertex array.

    ``line_points`` holds ``line_count`` curves of ``line_length`` points
    each. Every segment contributes two vertices of seven floats (position
    mapped to [-1, 1] and an RGBA colour). A curve ends at its first
    repeated point; unused space at the end of the array stays zero.
    """
    if line_length < 1:
        raise ValueError("line length must be at least one")
    points = np.asarray(line_points, dtype=np.float32).reshape(-1, 3)
    if len(points) < line_count * line_length:
        raise ValueError("not enough line points")
    data = np.zeros(line_count * (line_length - 1) * 2 * 7, dtype=np.float32)
    records = []
    for line in range(line_count):
        curve = points[line * line_length:(line + 1) * line_length]
        for start, end in zip(curve, curve[1:]):
            if np.array_equal(start, end):
                break
            records.extend(_vertex_record(start))
            records.extend(_vertex_record(end))
    data[: len(records)] = records
    return data


def particle_render_data(positions):
    """Turn particle positions into a flat point vertex array of 7 floats each."""
    points = np.asarray(positions, dtype=np.float32).reshape(-1, 3)
    data = np.empty((len(points), 7), dtype=np.float32)
    data[:, 0:3] = points * 2 - 1
    data[:, 3:6] = points
    data[:, 6] = 1.0
    return data.ravel()