"""Water surface simulation using a discrete wave equation on a periodic grid."""

from __future__ import annotations

import numpy as np


class WaveSimulation:
    """Height field driven by the wave equation, with periodic borders."""

    def __init__(self, width=512, height=512, c=2.0, dx=1.0, dt=0.05):
        if width <= 0 or height <= 0:
            raise ValueError("grid dimensions must be positive")
        self.width = width
        self.height = height
        self.alpha = (c * c * dt * dt) / (dx * dx)
        self.beta = 2.0 - 4.0 * self.alpha
        self.previous = np.zeros((height, width), dtype=np.float32)
        self.current = np.zeros((height, width), dtype=np.float32)
        self.image = np.zeros((height, width, 3), dtype=np.uint8)
        self._impulse_value = 1.0

    def step(self):
        """Advance one time step and return the visualisation image.

        Positive heights are shown in the red channel, negative heights in
        the green channel.
        """
        cur = self.current
        neighbours = (
            np.roll(cur, -1, axis=1)
            + np.roll(cur, 1, axis=1)
            + np.roll(cur, -1, axis=0)
            + np.roll(cur, 1, axis=0)
        )
        following = (
            self.alpha * neighbours + self.beta * cur - self.previous
        ).astype(np.float32)

        self.image[..., 0] = np.where(
            following > 0, np.clip(following * 500.0, 0, 255), 0
        ).astype(np.uint8)
        self.image[..., 1] = np.where(
            following < 0, np.clip(-following * 500.0, 0, 255), 0
        ).astype(np.uint8)

        self.previous, self.current = cur, following
        return self.image

    def impulse(self, x, y):
        """Disturb the surface at grid cell (x, y).

        Successive impulses alternate between +1 and -1. Returns False and
        changes nothing when the cell lies outside the grid.
        """
        if not (0 <= x < self.width and 0 <= y < self.height):
            return False
        self.current[int(y), int(x)] = self._impulse_value
        self._impulse_value = -self._impulse_value
        return True