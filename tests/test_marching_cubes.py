import pytest

from scivis.marching_cubes import (
    EDGE_TABLE,
    EDGE_TO_VERTEX,
    TRIANGLE_TABLE,
    VERTEX_POSITIONS,
    case_index,
    triangle_edges,
)


def corners_for_case(case, low=0, high=9):
    return [low if (case >> i) & 1 else high for i in range(8)]


def test_case_index_extremes():
    assert case_index([0] * 8, 1) == 255
    assert case_index([10] * 8, 1) == 0


def test_case_index_single_corner():
    assert case_index([0, 9, 9, 9, 9, 9, 9, 9], 5) == 1
    assert case_index([9, 9, 9, 9, 9, 9, 9, 0], 5) == 128


def test_case_index_wrong_corner_count():
    with pytest.raises(ValueError):
        case_index([0] * 7, 1)


def test_triangle_edges_known_cases():
    assert triangle_edges(0) == []
    assert triangle_edges(255) == []
    assert triangle_edges(1) == [(0, 8, 3)]
    assert triangle_edges(3) == [(1, 8, 3), (9, 8, 1)]


@pytest.mark.parametrize("case", [-1, 256])
def test_triangle_edges_out_of_range(case):
    with pytest.raises(ValueError):
        triangle_edges(case)


@pytest.mark.parametrize("case", range(256))
def test_edge_table_matches_corner_signs(case):
    index = case_index(corners_for_case(case), 5)
    assert index == case
    expected = 0
    for edge, (a, b) in enumerate(EDGE_TO_VERTEX):
        if ((case >> a) & 1) != ((case >> b) & 1):
            expected |= 1 << edge
    assert EDGE_TABLE[index] == expected


@pytest.mark.parametrize("case", range(256))
def test_triangles_use_exactly_crossed_edges(case):
    triangles = triangle_edges(case)
    used = {edge for triangle in triangles for edge in triangle}
    crossed = {e for e in range(12) if EDGE_TABLE[case] >> e & 1}
    assert used == crossed
    assert len(triangles) <= 5
    assert all(len(set(t)) == 3 for t in triangles)


@pytest.mark.parametrize("case", range(256))
def test_edge_table_complement_symmetry(case):
    index = case_index(corners_for_case(case), 5)
    complement = case_index(corners_for_case(case, low=9, high=0), 5)
    assert complement == 255 - case
    assert EDGE_TABLE[index] == EDGE_TABLE[complement]


def test_table_sizes_match_triangle_edges():
    assert len(EDGE_TABLE) == 256
    assert len(TRIANGLE_TABLE) == 256
    for case in range(256):
        triangles = triangle_edges(case)
        assert len(TRIANGLE_TABLE[case]) == 3 * len(triangles)
        flat = [edge for triangle in triangles for edge in triangle]
        assert flat == list(TRIANGLE_TABLE[case])


def test_edges_join_adjacent_corners():
    for edge, (a, b) in enumerate(EDGE_TO_VERTEX):
        pa, pb = VERTEX_POSITIONS[a], VERTEX_POSITIONS[b]
        assert sum(abs(x - y) for x, y in zip(pa, pb)) == 1.0
        corners = [9] * 8
        corners[a] = 0
        index = case_index(corners, 5)
        assert index == 1 << a
        assert EDGE_TABLE[index] >> edge & 1 == 1
        assert any(edge in triangle for triangle in triangle_edges(index))


def test_case_index_drives_triangles():
    corners = [0, 0, 9, 9, 9, 9, 9, 9]
    assert triangle_edges(case_index(corners, 5)) == triangle_edges(3)