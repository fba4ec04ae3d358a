"""HSV colour picker: conversion of picker positions to RGB colours."""

from __future__ import annotations

import math

import numpy as np


def convert_func(n, h, s, v):
    """Return one RGB channel of the HSV colour (h in degrees, s and v in [0, 1]).

    ``n`` selects the channel: 5 for red, 3 for green and 1 for blue.
    """
    k = math.fmod(n + h / 60.0, 6.0)
    return v - v * s * max(0.0, min(k, 4.0 - k, 1.0))


def hsv_position_to_rgb(x, y):
    """Map a normalised picker position to an RGB triple.

    The horizontal position selects the hue (0..360 degrees), the vertical
    position the saturation; the value is always 1.
    """
    h = 360.0 * x
    return tuple(convert_func(n, h, y, 1.0) for n in (5, 3, 1))


def _channel(n, h, s, v):
    k = np.fmod(n + h / 60.0, 6.0)
    return v - v * s * np.clip(np.minimum(k, 4.0 - k), 0.0, 1.0)


def hsv_picker_image(width, height):
    """Build the RGBA picker image as a ``(height, width, 4)`` uint8 array."""
    if width <= 0 or height <= 0:
        raise ValueError("image dimensions must be positive")
    xs = np.arange(width, dtype=np.float64) / width
    ys = np.arange(height, dtype=np.float64) / height
    h = 360.0 * xs[np.newaxis, :]
    s = ys[:, np.newaxis]
    image = np.empty((height, width, 4), dtype=np.uint8)
    for index, n in enumerate((5, 3, 1)):
        values = _channel(n, h, s, 1.0) * np.ones((height, width))
        image[..., index] = (values * 255.0).astype(np.uint8)
    image[..., 3] = 255
    return image


def _format_triple(values):
    return "[" + ", ".join(f"{value:g}" for value in values) + "]"


def describe_position(x, y, width, height):
    """Describe the colour under a window position, or return None outside it.

    ``y`` counts from the top of the window, as mouse coordinates do.
    """
    if x < 0 or x > width or y < 0 or y > height:
        return None
    fx = x / width
    fy = 1.0 - y / height
    hsv = (360.0 * fx, fy, 1.0)
    rgb = hsv_position_to_rgb(fx, fy)
    return f"HSV: {_format_triple(hsv)}  RGB: {_format_triple(rgb)}"