"""Regular scalar volumes of 8-bit voxels with optional gradient normals."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from itertools import product

import numpy as np


def _empty_data():
    return np.zeros(0, dtype=np.uint8)


def _empty_normals():
    return np.zeros((0, 3), dtype=np.float32)


def _clamp(index, size):
    return min(max(index, 0), size - 1)


@dataclass(eq=False)
class Volume:
    """A ``width`` x ``height`` x ``depth`` grid of uint8 voxels.

    Voxels are stored x-fastest: the voxel (u, v, w) lives at
    ``u + v * width + w * width * height``.
    """

    width: int = 0
    height: int = 0
    depth: int = 0
    scale: tuple = (0.0, 0.0, 0.0)
    data: np.ndarray = field(default_factory=_empty_data)
    normals: np.ndarray = field(default_factory=_empty_normals)
    max_size: int = 0

    def __post_init__(self):
        self.data = np.asarray(self.data, dtype=np.uint8).ravel()
        self.scale = tuple(float(s) for s in self.scale)

    @property
    def dimensions(self):
        return (self.width, self.height, self.depth)

    @property
    def voxel_count(self):
        return self.width * self.height * self.depth

    def normalize_scale(self):
        """Rescale ``scale`` so that the largest scaled extent becomes one."""
        self.max_size = max(self.dimensions)
        if self.max_size == 0:
            raise ValueError("cannot normalize the scale of an empty volume")
        extent = [s * n / self.max_size for s, n in zip(self.scale, self.dimensions)]
        largest = max(extent)
        if largest == 0:
            raise ValueError("cannot normalize a zero scale")
        self.scale = tuple(s / largest for s in self.scale)

    def resample(self, width, height, depth):
        """Return a trilinearly resampled copy with the given resolution."""
        result = Volume(width=width, height=height, depth=depth, scale=self.scale)
        result.normalize_scale()
        count = width * height * depth
        samples = (
            self.sample(u / width, v / height, w / depth)
            for w, v, u in product(range(depth), range(height), range(width))
        )
        result.data = np.fromiter(samples, dtype=np.uint8, count=count)
        return result

    def compute_normals(self):
        """Compute central-difference normals for all interior voxels.

        Border voxels, and voxels with a zero gradient, get a zero normal.
        """
        count = self.voxel_count
        if self.data.size < count:
            raise ValueError("volume data is smaller than its resolution")
        normals = np.zeros((self.data.size, 3), dtype=np.float32)
        if min(self.dimensions) >= 3:
            grid = self.data[:count].astype(np.float32).reshape(
                self.depth, self.height, self.width
            )
            gx = grid[1:-1, 1:-1, :-2] - grid[1:-1, 1:-1, 2:]
            gy = grid[1:-1, :-2, 1:-1] - grid[1:-1, 2:, 1:-1]
            gz = grid[:-2, 1:-1, 1:-1] - grid[2:, 1:-1, 1:-1]
            gradient = np.stack((gx, gy, gz), axis=-1)
            length = np.linalg.norm(gradient, axis=-1, keepdims=True)
            unit = np.divide(
                gradient, length, out=np.zeros_like(gradient), where=length > 0
            )
            view = normals[:count].reshape(self.depth, self.height, self.width, 3)
            view[1:-1, 1:-1, 1:-1] = unit
        self.normals = normals

    def sample(self, u, v, w):
        """Trilinearly sample the volume at normalised coordinates (u, v, w).

        Neighbour lookups falling outside the grid are clamped to the border.
        """
        coords = (u * self.width - 1, v * self.height - 1, w * self.depth - 1)
        floors = [math.floor(c) for c in coords]
        ax, ay, az = (c - f for c, f in zip(coords, floors))
        fx, fy, fz = floors

        def corner(dx, dy, dz):
            return float(
                self.value(
                    _clamp(fx + dx, self.width),
                    _clamp(fy + dy, self.height),
                    _clamp(fz + dz, self.depth),
                )
            )

        v0, v1 = corner(0, 0, 0), corner(1, 0, 0)
        v2, v3 = corner(0, 1, 0), corner(1, 1, 0)
        v4, v5 = corner(0, 0, 1), corner(1, 0, 1)
        v6, v7 = corner(0, 1, 1), corner(1, 1, 1)
        front = (v0 * (1 - ax) + v1 * ax) * (1 - ay) + (v2 * (1 - ax) + v3 * ax) * ay
        back = (v4 * (1 - ax) + v5 * ax) * (1 - ay) + (v6 * (1 - ax) + v7 * ax) * ay
        result = front * (1 - az) + back * az
        return int(min(max(result, 0.0), 255.0))

    def value(self, u, v, w):
        """Return the voxel at integer position (u, v, w)."""
        if not (
            0 <= u < self.width and 0 <= v < self.height and 0 <= w < self.depth
        ):
            raise IndexError(f"voxel ({u}, {v}, {w}) lies outside the volume")
        return int(self.data[u + v * self.width + w * self.width * self.height])

    def __str__(self):
        scale = "[" + ", ".join(f"{s:g}" for s in self.scale) + "]"
        parts = [
            f"width: {self.width}\n",
            f"height: {self.height}\n",
            f"depth: {self.depth}\n",
            f"datasize: {self.data.size}\n",
            f"scale: {scale}\n",
        ]
        plane = self.width * self.height
        for i, voxel in enumerate(self.data):
            if i > 0 and self.width and i % self.width == 0:
                parts.append("\n")
            if i > 0 and plane and i % plane == 0:
                parts.append("\n")
            parts.append(f"{int(voxel)} ")
        return "".join(parts)