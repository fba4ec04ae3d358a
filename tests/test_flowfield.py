import numpy as np
import pytest

from scivis.flowfield import (
    DemoType,
    Flowfield,
    line_points_to_render_data,
    particle_render_data,
)


def _write(tmp_path, text):
    path = tmp_path / "field.txt"
    path.write_text(text)
    return path


def test_saddle_corner_value():
    field = Flowfield.gen_demo(5, DemoType.SADDLE)
    assert tuple(field.interpolate((0.0, 0.0, 0.0))) == pytest.approx((0.5, -0.5, 0.5))


def test_drain_corner_value():
    field = Flowfield.gen_demo(4, DemoType.DRAIN)
    result = field.interpolate((0.0, 0.0, 0.0))
    assert tuple(result) == pytest.approx((0.5 + 0.05, -0.5 + 0.05, 0.0))


def test_demo_data_size():
    for demo in DemoType:
        field = Flowfield.gen_demo(6, demo)
        assert field.data.shape == (216, 3)


def test_interpolation_at_grid_points_matches_data():
    field = Flowfield.gen_demo(5, DemoType.CRITICAL)
    index = 1 + 2 * 5 + 3 * 25
    result = field.interpolate((1 / 4, 2 / 4, 3 / 4))
    assert np.allclose(result, field.data[index], atol=1e-6)


def test_interpolation_midpoint_is_average_of_neighbours():
    field = Flowfield.gen_demo(5, DemoType.CRITICAL)
    a = field.interpolate((0.25, 0.5, 0.5))
    b = field.interpolate((0.5, 0.5, 0.5))
    mid = field.interpolate((0.375, 0.5, 0.5))
    assert np.allclose(mid, (a + b) / 2, atol=1e-6)


def test_interpolate_outside_raises():
    field = Flowfield.gen_demo(4, DemoType.SADDLE)
    with pytest.raises(ValueError):
        field.interpolate((1.5, 0.0, 0.0))
    with pytest.raises(ValueError):
        field.interpolate((0.0, -0.1, 0.0))


def test_invalid_dimensions():
    with pytest.raises(ValueError):
        Flowfield(0, 1, 1)
    with pytest.raises(ValueError):
        Flowfield.gen_demo(0, DemoType.DRAIN)


def test_from_file_two_dimensional(tmp_path):
    path = _write(tmp_path, "2,2,2,1,1,2,3,4,5,6,7,8\n")
    field = Flowfield.from_file(path)
    assert (field.size_x, field.size_y, field.size_z) == (2, 2, 1)
    assert tuple(field.interpolate((0.0, 0.0, 0.0))) == pytest.approx((1, 2, 0))
    assert tuple(field.interpolate((1.0, 0.0, 0.0))) == pytest.approx((3, 4, 0))
    assert tuple(field.interpolate((0.0, 1.0, 0.0))) == pytest.approx((5, 6, 0))
    assert tuple(field.interpolate((1.0, 1.0, 0.0))) == pytest.approx((7, 8, 0))


def test_from_file_one_dimensional(tmp_path):
    path = _write(tmp_path, "1,3,1,0.5,1.5,2.5")
    field = Flowfield.from_file(path)
    assert (field.size_x, field.size_y, field.size_z) == (3, 1, 1)
    assert field.data[:, 0].tolist() == pytest.approx([0.5, 1.5, 2.5])
    assert field.data[:, 1:].tolist() == [[0, 0]] * 3


def test_from_file_invalid_dimension(tmp_path):
    path = _write(tmp_path, "4,2,2,1")
    with pytest.raises(ValueError, match="Invalid dimension 4"):
        Flowfield.from_file(path)


def test_from_file_invalid_timesteps(tmp_path):
    path = _write(tmp_path, "1,2,0,1,2")
    with pytest.raises(ValueError, match="Invalid timesteps 0"):
        Flowfield.from_file(path)


def test_from_file_truncated(tmp_path):
    path = _write(tmp_path, "1,3,1,0.5")
    with pytest.raises(ValueError):
        Flowfield.from_file(path)


def test_from_file_missing(tmp_path):
    with pytest.raises(OSError, match="Can't open file"):
        Flowfield.from_file(tmp_path / "missing.txt")


def test_particle_render_data():
    data = particle_render_data([(0.5, 0.5, 0.5), (1.0, 0.0, 0.25)])
    assert data.shape == (14,)
    assert data[:7].tolist() == pytest.approx([0, 0, 0, 0.5, 0.5, 0.5, 1])
    assert data[7:].tolist() == pytest.approx([1, -1, -0.5, 1, 0, 0.25, 1])


def test_line_render_data_full_lines():
    points = [(0.0, 0.0, 0.0), (0.5, 0.0, 0.0), (1.0, 0.0, 0.0)]
    data = line_points_to_render_data(points, 1, 3)
    assert data.shape == (2 * 2 * 7,)
    segments = data.reshape(-1, 7)
    assert segments[0].tolist() == pytest.approx([-1, -1, -1, 0, 0, 0, 1])
    assert segments[1][:3].tolist() == pytest.approx([0, -1, -1])
    assert np.array_equal(segments[1], segments[2])
    assert segments[3][3:6].tolist() == pytest.approx([1, 0, 0])


def test_line_render_data_stops_at_repeated_point():
    points = [
        (0.0, 0.0, 0.0), (0.0, 0.0, 0.0), (0.5, 0.5, 0.5),
        (0.2, 0.2, 0.2), (0.4, 0.4, 0.4), (0.4, 0.4, 0.4),
    ]
    data = line_points_to_render_data(points, 2, 3)
    segments = data.reshape(-1, 7)
    assert len(segments) == 8
    assert segments[0][3:6].tolist() == pytest.approx([0.2, 0.2, 0.2])
    assert segments[1][3:6].tolist() == pytest.approx([0.4, 0.4, 0.4])
    assert not segments[2:].any()


def test_line_render_data_too_few_points():
    with pytest.raises(ValueError):
        line_points_to_render_data([(0.0, 0.0, 0.0)], 1, 3)