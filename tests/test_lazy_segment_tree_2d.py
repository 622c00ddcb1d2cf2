import random

import pytest

from contestkit.lazy_segment_tree_2d import LazySegmentTree2D


def _naive_sum(grid, lx, rx, ly, ry):
    n = len(grid)
    return sum(
        grid[x - 1][y - 1]
        for x in range(max(lx, 1), min(rx, n) + 1)
        for y in range(max(ly, 1), min(ry, n) + 1)
    )


def _naive_assign(grid, lx, rx, ly, ry, value):
    n = len(grid)
    for x in range(max(lx, 1), min(rx, n) + 1):
        for y in range(max(ly, 1), min(ry, n) + 1):
            grid[x - 1][y - 1] = value


def _random_rect(rng, n):
    lx, rx = sorted(rng.randint(1, n) for _ in range(2))
    ly, ry = sorted(rng.randint(1, n) for _ in range(2))
    return lx, rx, ly, ry


def test_initial_sums_match_grid():
    rng = random.Random(3)
    n = 5
    grid = [[rng.randint(-9, 9) for _ in range(n)] for _ in range(n)]
    tree = LazySegmentTree2D(grid)
    for _ in range(40):
        rect = _random_rect(rng, n)
        assert tree.query_range(*rect) == _naive_sum(grid, *rect)


@pytest.mark.parametrize("n", [1, 2, 3, 6])
def test_random_assignments_match_naive(n):
    rng = random.Random(n)
    grid = [[rng.randint(-5, 5) for _ in range(n)] for _ in range(n)]
    tree = LazySegmentTree2D(grid)
    for _ in range(80):
        rect = _random_rect(rng, n)
        value = rng.randint(-5, 5)
        tree.update_range(*rect, value)
        _naive_assign(grid, *rect, value)
        query = _random_rect(rng, n)
        assert tree.query_range(*query) == _naive_sum(grid, *query)


def test_assigning_zero_clears_cells():
    grid = [[4, 4, 4], [4, 4, 4], [4, 4, 4]]
    tree = LazySegmentTree2D(grid)
    tree.update_range(1, 3, 1, 3, 0)
    assert tree.query_range(1, 3, 1, 3) == 0
    tree.update_range(2, 2, 2, 3, 5)
    _naive_assign(grid, 1, 3, 1, 3, 0)
    _naive_assign(grid, 2, 2, 2, 3, 5)
    assert tree.query_range(1, 3, 1, 3) == _naive_sum(grid, 1, 3, 1, 3)
    assert tree.query_range(2, 2, 3, 3) == 5


def test_rectangle_partly_outside_is_clipped():
    grid = [[1, 2], [3, 4]]
    tree = LazySegmentTree2D(grid)
    tree.update_range(0, 1, 2, 9, 6)
    _naive_assign(grid, 0, 1, 2, 9, 6)
    assert tree.query_range(-3, 7, -3, 7) == _naive_sum(grid, 1, 2, 1, 2)
    assert tree.query_range(3, 5, 1, 2) == 0


def test_rejects_bad_grids():
    with pytest.raises(ValueError):
        LazySegmentTree2D([])
    with pytest.raises(ValueError):
        LazySegmentTree2D([[1, 2, 3], [4, 5, 6]])