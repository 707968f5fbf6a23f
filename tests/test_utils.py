import numpy as np
import pytest

from fortune_voronoi import InvalidInputError, Point, coerce_points, random_sites
from fortune_voronoi.utils import bounding_box, edges_to_array, points_to_array


def test_coerce_accepts_points_pairs_and_arrays():
    expected = [Point(1, 2), Point(3, 4)]

    assert coerce_points([Point(1, 2), Point(3, 4)]) == expected
    assert coerce_points([(1, 2), [3, 4]]) == expected
    assert coerce_points(np.array([[1, 2], [3, 4]])) == expected
    assert coerce_points([]) == []


def test_coerce_keeps_duplicates_when_asked():
    assert len(coerce_points([(1, 1), (1, 1)], dedupe=False)) == 2
    assert coerce_points([(1, 1), (2, 2), (1, 1)]) == [Point(1, 1), Point(2, 2)]


@pytest.mark.parametrize("bad", [[(1, 2, 3)], np.zeros((3, 3)), [("a", "b")], [(1, float("inf"))]])
def test_coerce_rejects_malformed_sites(bad):
    with pytest.raises(InvalidInputError):
        coerce_points(bad)


def test_random_sites_are_seeded_and_inside_the_box():
    first = random_sites(25, 30, 20, seed=1)
    second = random_sites(25, 30, 20, seed=1)

    assert first == second
    array = points_to_array(first)
    assert array.shape == (25, 2)
    assert np.all(array >= 0)
    assert np.all(array[:, 0] <= 30)
    assert np.all(array[:, 1] <= 20)


def test_random_sites_reject_negative_count():
    with pytest.raises(ValueError):
        random_sites(-1, 1, 1)


def test_array_helpers_handle_empty_input():
    assert edges_to_array([]).shape == (0, 4)
    assert points_to_array([]).shape == (0, 2)


def test_bounding_box():
    assert bounding_box([Point(1, 5), Point(-2, 3)]) == (-2.0, 3.0, 1.0, 5.0)
    with pytest.raises(InvalidInputError):
        bounding_box([])
