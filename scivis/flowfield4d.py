"""Time-dependent 3D vector fields made of several steady time steps."""

from __future__ import annotations

import math

import numpy as np

from scivis.flowfield import demo_vectors


def _lerp(a, b, alpha):
    return a * (1.0 - alpha) + b * alpha


def _cell(coordinate, size):
    if not 0.0 <= coordinate <= 1.0:
        raise ValueError("positions must lie inside the unit cube")
    scaled = coordinate * (size - 1)
    low = math.floor(scaled)
    return low, math.ceil(scaled), scaled - low


class Flowfield4D:
    """Vector field on a regular grid with a sequence of time steps.

    Time steps wrap around: time step ``t`` reads the data of
    ``t % timesteps``.
    """

    def __init__(self, size_x, size_y, size_z, timesteps):
        if size_x <= 0 or size_y <= 0 or size_z <= 0:
            raise ValueError("field dimensions must be positive")
        if timesteps < 1:
            raise ValueError("a field needs at least one time step")
        self.size_x = size_x
        self.size_y = size_y
        self.size_z = size_z
        count = size_x * size_y * size_z
        self.data = [np.zeros((count, 3), dtype=np.float32) for _ in range(timesteps)]

    @classmethod
    def gen_demo(cls, size, demo_types):
        """Build a two-step field from the first two demo types given."""
        demo_types = list(demo_types)
        if len(demo_types) < 2:
            raise ValueError("a demo field needs two demo types")
        field = cls(size, size, size, 2)
        field.data = [demo_vectors(size, demo) for demo in demo_types[:2]]
        return field

    def _at(self, x, y, z, step):
        values = self.data[step % len(self.data)]
        return values[x + y * self.size_y + z * self.size_x * self.size_y].astype(
            np.float64
        )

    def _interpolate_step(self, pos, step):
        fx, cx, alpha = _cell(pos[0], self.size_x)
        fy, cy, beta = _cell(pos[1], self.size_y)
        fz, cz, gamma = _cell(pos[2], self.size_z)

        near = _lerp(
            _lerp(self._at(fx, fy, fz, step), self._at(cx, fy, fz, step), alpha),
            _lerp(self._at(fx, cy, fz, step), self._at(cx, cy, fz, step), alpha),
            beta,
        )
        far = _lerp(
            _lerp(self._at(fx, fy, cz, step), self._at(cx, fy, cz, step), alpha),
            _lerp(self._at(fx, cy, cz, step), self._at(cx, cy, cz, step), alpha),
            beta,
        )
        return _lerp(near, far, gamma)

    def interpolate(self, pos, time):
        """Interpolate the field in space and linearly between time steps."""
        if time < 0:
            raise ValueError("time must not be negative")
        low = math.floor(time)
        high = math.ceil(time)
        low_value = self._interpolate_step(pos, low)
        high_value = self._interpolate_step(pos, high)
        return _lerp(low_value, high_value, time - low)


def advect(field, position, t, delta_t):
    """Move a particle by one explicit Euler step through ``field``.

    Particles outside the unit cube stay where they are.
    """
    point = np.asarray(position, dtype=np.float64)
    if np.any(point < 0.0) or np.any(point > 1.0):
        return point
    return point + field.interpolate(point, t) * delta_t