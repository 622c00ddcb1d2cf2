import pytest

from contestkit.lazy_segment_tree import LazySegmentTree

VALUES = [4, 1, 7, 3, 9, 2]


def test_range_maximum_after_build():
    tree = LazySegmentTree(VALUES)
    n = len(VALUES)
    for l in range(1, n + 1):
        for r in range(l, n + 1):
            assert tree.query_range(l, r) == max(VALUES[l - 1 : r])


def test_points_after_build():
    tree = LazySegmentTree(VALUES)
    assert [tree.query_point(i) for i in range(1, len(VALUES) + 1)] == VALUES


def test_single_range_assignment():
    tree = LazySegmentTree(VALUES)
    tree.update_range(2, 4, 8)
    expected = list(VALUES)
    expected[1:4] = [8, 8, 8]
    assert [tree.query_point(i) for i in range(1, len(VALUES) + 1)] == expected
    assert tree.query_range(1, len(VALUES)) == max(expected)
    assert tree.query_range(1, 1) == VALUES[0]


def test_point_updates():
    tree = LazySegmentTree(VALUES)
    tree.update_point(5, 1)
    tree.update_point(1, 6)
    expected = list(VALUES)
    expected[4] = 1
    expected[0] = 6
    assert tree.query_range(1, len(VALUES)) == max(expected)
    assert tree.query_point(5) == 1


def test_point_update_after_full_assignment():
    tree = LazySegmentTree([1, 2, 3, 4])
    tree.update_range(1, 4, 5)
    tree.update_point(1, 3)
    assert tree.query_point(1) == 3
    assert tree.query_point(2) == 5
    assert tree.query_range(1, 4) == 5


def test_query_beyond_bounds_is_clipped():
    tree = LazySegmentTree(VALUES)
    assert tree.query_range(0, len(VALUES) + 3) == max(VALUES)


def test_empty_rejected():
    with pytest.raises(ValueError):
        LazySegmentTree([])