import numpy as np
import pytest

from scivis.imaging import (
    ASCII_LUT_SMALL,
    SOBEL_X,
    convolve,
    gradient_image,
    mean_kernel,
    to_ascii,
    to_grayscale,
)


def _random_image(h=12, w=10, c=4, seed=1):
    rng = np.random.default_rng(seed)
    return rng.integers(0, 256, size=(h, w, c), dtype=np.uint8)


@pytest.mark.parametrize("uniform", [False, True])
def test_grayscale_channels_equal(uniform):
    image = _random_image()
    gray = to_grayscale(image, uniform)
    assert np.array_equal(gray[..., 0], gray[..., 1])
    assert np.array_equal(gray[..., 1], gray[..., 2])
    assert np.array_equal(gray[..., 3], image[..., 3])


def test_grayscale_of_black_is_black():
    image = np.zeros((4, 4, 3), dtype=np.uint8)
    assert not to_grayscale(image).any()


def test_grayscale_does_not_modify_input():
    image = _random_image()
    copy = image.copy()
    to_grayscale(image)
    assert np.array_equal(image, copy)


def test_grayscale_needs_colour():
    with pytest.raises(ValueError):
        to_grayscale(np.zeros((4, 4, 1), dtype=np.uint8))


def test_gradient_image_layout():
    image = gradient_image(16, 8)
    assert image.shape == (8, 16, 4)
    assert (image[..., 3] == 255).all()
    assert (image[..., 2] == 127).all()
    assert image[0, 0, 0] == 0 and image[0, 0, 1] == 0
    assert (np.diff(image[0, :, 0].astype(int)) >= 0).all()
    assert (np.diff(image[:, 0, 1].astype(int)) >= 0).all()


def test_ascii_dimensions():
    text = to_ascii(gradient_image(9, 7))
    lines = text.split("\n")[:-1]
    assert len(lines) == 4
    assert all(len(line) == 10 for line in lines)


def test_ascii_black_and_white():
    black = np.zeros((4, 4, 3), dtype=np.uint8)
    white = np.full((4, 4, 3), 255, dtype=np.uint8)
    assert set(to_ascii(black).replace("\n", "")) == {ASCII_LUT_SMALL[0]}
    assert set(to_ascii(white).replace("\n", "")) == {ASCII_LUT_SMALL[-1]}
    assert set(to_ascii(white, small_table=False).replace("\n", "")) == {" "}


def test_ascii_reads_bottom_up():
    image = np.zeros((2, 2, 3), dtype=np.uint8)
    image[1] = 255
    assert to_ascii(image) == ASCII_LUT_SMALL[-1] * 2 + "\n"


def test_mean_kernel_sums_to_one():
    kernel = mean_kernel(5)
    assert kernel.shape == (5, 5)
    assert kernel.sum() == pytest.approx(1.0)


def test_mean_kernel_rejects_zero():
    with pytest.raises(ValueError):
        mean_kernel(0)


def test_mean_filter_keeps_constant_image():
    image = np.full((6, 6, 3), 90, dtype=np.uint8)
    result = convolve(image, mean_kernel(3))
    assert (np.abs(result.astype(int) - 90) <= 1).all()


def test_sobel_on_constant_image():
    image = np.full((6, 7, 3), 200, dtype=np.uint8)
    result = convolve(image, SOBEL_X)
    assert not result[1:-1, 1:-1].any()
    assert (result[0] == 200).all()
    assert (result[:, -1] == 200).all()


def test_kernel_offset_orientation():
    image = _random_image(8, 8, 1, seed=3)
    kernel = np.zeros((3, 3), dtype=np.float32)
    kernel[0, 2] = 1.0
    result = convolve(image, kernel)
    assert np.array_equal(result[1:-1, 1:-1], image[0:-2, 2:])


def test_convolve_does_not_modify_input():
    image = _random_image()
    copy = image.copy()
    convolve(image, SOBEL_X)
    assert np.array_equal(image, copy)