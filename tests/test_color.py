import pytest

from scivis.color import (
    convert_func,
    describe_position,
    hsv_picker_image,
    hsv_position_to_rgb,
)


@pytest.mark.parametrize("n", [1, 3, 5])
@pytest.mark.parametrize("h", [0.0, 45.0, 200.0, 359.0])
def test_zero_saturation_gives_value(n, h):
    assert convert_func(n, h, 0.0, 0.7) == pytest.approx(0.7)


def test_full_saturation_hue_zero_is_red():
    assert hsv_position_to_rgb(0.0, 1.0) == pytest.approx((1.0, 0.0, 0.0))


def test_third_of_the_way_is_green():
    assert hsv_position_to_rgb(1.0 / 3.0, 1.0) == pytest.approx(
        (0.0, 1.0, 0.0), abs=1e-6
    )


@pytest.mark.parametrize("x", [0.0, 0.1, 0.25, 0.5, 0.66, 0.9])
@pytest.mark.parametrize("y", [0.0, 0.3, 0.8, 1.0])
def test_value_one_invariants(x, y):
    rgb = hsv_position_to_rgb(x, y)
    assert max(rgb) == pytest.approx(1.0)
    assert min(rgb) == pytest.approx(1.0 - y)
    assert all(0.0 <= c <= 1.0 for c in rgb)


def test_picker_image_shape_and_alpha():
    image = hsv_picker_image(32, 16)
    assert image.shape == (16, 32, 4)
    assert (image[..., 3] == 255).all()


def test_picker_image_first_row_is_unsaturated():
    image = hsv_picker_image(20, 10)
    assert (image[0, :, :3] == 255).all()


def test_picker_image_matches_conversion():
    image = hsv_picker_image(10, 10)
    r, g, b = hsv_position_to_rgb(3 / 10, 7 / 10)
    assert abs(int(image[7, 3, 0]) - r * 255) <= 1
    assert abs(int(image[7, 3, 1]) - g * 255) <= 1
    assert abs(int(image[7, 3, 2]) - b * 255) <= 1


def test_picker_image_rejects_empty():
    with pytest.raises(ValueError):
        hsv_picker_image(0, 10)


@pytest.mark.parametrize("pos", [(-1, 10), (10, -1), (101, 10), (10, 101)])
def test_describe_outside_window(pos):
    assert describe_position(pos[0], pos[1], 100, 100) is None


def test_describe_inside_window():
    text = describe_position(50, 50, 100, 100)
    assert text.startswith("HSV: ")
    assert "  RGB: " in text