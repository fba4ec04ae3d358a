"""Basic image processing on ``(height, width, components)`` uint8 arrays."""

from __future__ import annotations

import numpy as np

ASCII_LUT_LARGE = (
    "$@B%8&WM#*oahkbdpqwmZO0QLCJUYXzcvunxrjft/\\|()1{}[]?-_+~<>i!lI;:,\"^`'. "
)
ASCII_LUT_SMALL = "@%#*+=-:. "

SOBEL_X = np.array([[-1, 0, 1], [-2, 0, 2], [-1, 0, 1]], dtype=np.float32)
SOBEL_Y = np.array([[-1, -2, -1], [0, 0, 0], [1, 2, 1]], dtype=np.float32)


def to_grayscale(image, uniform=False):
    """Return a copy with every colour channel replaced by a weighted sum.

    The alpha channel of a four-component image is kept.
    """
    image = np.asarray(image, dtype=np.uint8)
    if image.ndim != 3 or image.shape[2] < 3:
        raise ValueError("grayscale conversion needs at least three components")
    if uniform:
        scale = np.array([0.333, 0.333, 0.333], dtype=np.float32)
    else:
        scale = np.array([0.299, 0.587, 0.114], dtype=np.float32)
    rgb = image[..., :3].astype(np.float32)
    gray = (rgb[..., 0] * scale[0] + rgb[..., 1] * scale[1] + rgb[..., 2] * scale[2])
    gray = np.clip(gray, 0, 255).astype(np.uint8)
    result = image.copy()
    result[..., :3] = gray[..., np.newaxis]
    return result


def gradient_image(width=512, height=512):
    """Build the RGBA test image: red grows along x, green along y."""
    if width <= 0 or height <= 0:
        raise ValueError("image dimensions must be positive")
    image = np.empty((height, width, 4), dtype=np.uint8)
    xs = np.arange(width, dtype=np.float32) / np.float32(width)
    ys = np.arange(height, dtype=np.float32) / np.float32(height)
    image[..., 0] = (xs * 255.0).astype(np.uint8)[np.newaxis, :]
    image[..., 1] = (ys * 255.0).astype(np.uint8)[:, np.newaxis]
    image[..., 2] = np.uint8(0.5 * 255.0)
    image[..., 3] = 255
    return image


def _luminance(image):
    if image.ndim == 2:
        return image.astype(np.int64)
    if image.shape[2] >= 3:
        return image[..., :3].astype(np.int64).sum(axis=2) // 3
    return image[..., 0].astype(np.int64)


def to_ascii(image, small_table=True):
    """Render the image as ASCII art, sampling every second pixel.

    The image is read bottom-up; each sampled pixel becomes two characters.
    Luminance is the mean of the colour channels.
    """
    image = np.asarray(image, dtype=np.uint8)
    lut = ASCII_LUT_SMALL if small_table else ASCII_LUT_LARGE
    steps = len(lut) - 1
    lum = _luminance(image)[::-1][::2, ::2]
    lines = (
        "".join(lut[(int(v) * steps) // 255] * 2 for v in row) + "\n"
        for row in lum
    )
    return "".join(lines)


def mean_kernel(size=3):
    """Return a ``size`` x ``size`` box filter whose weights sum to one."""
    if size <= 0:
        raise ValueError("kernel size must be positive")
    return np.full((size, size), 1.0 / (size * size), dtype=np.float32)


def convolve(image, kernel):
    """Filter every component of the image with ``kernel``.

    ``kernel[dy, dx]`` weighs the pixel offset by (dx - w//2, dy - h//2).
    The result is the absolute value of the filter response; pixels closer
    than half the kernel size to the border are left unchanged.
    """
    image = np.asarray(image, dtype=np.uint8)
    kernel = np.asarray(kernel, dtype=np.float32)
    if kernel.ndim != 2:
        raise ValueError("kernel must be two-dimensional")
    squeeze = image.ndim == 2
    if squeeze:
        image = image[..., np.newaxis]
    height, width = image.shape[:2]
    kh, kw = kernel.shape
    hh, hw = kh // 2, kw // 2
    out_h, out_w = height - 2 * hh, width - 2 * hw
    result = image.copy()
    if out_h > 0 and out_w > 0:
        source = image.astype(np.float32)
        acc = np.zeros((out_h, out_w, image.shape[2]), dtype=np.float32)
        for dy, row in enumerate(kernel):
            for dx, weight in enumerate(row):
                acc += source[dy:dy + out_h, dx:dx + out_w] * weight
        result[hh:hh + out_h, hw:hw + out_w] = np.clip(np.abs(acc), 0, 255).astype(
            np.uint8
        )
    return result[..., 0] if squeeze else result