import random

import pytest

from contestkit.prefix_sum import build_prefix_sum, submatrix_sum

MATRIX = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]


def test_worked_example():
    prefix = build_prefix_sum(MATRIX)
    assert submatrix_sum(prefix, 0, 0, 2, 2) == sum(map(sum, MATRIX))
    assert submatrix_sum(prefix, 1, 1, 2, 2) == 28


def test_prefix_corner_is_total():
    prefix = build_prefix_sum(MATRIX)
    assert prefix[-1][-1] == sum(map(sum, MATRIX))
    assert prefix[0][0] == MATRIX[0][0]


def test_random_rectangles():
    rng = random.Random(11)
    rows, cols = 5, 7
    matrix = [[rng.randint(-20, 20) for _ in range(cols)] for _ in range(rows)]
    prefix = build_prefix_sum(matrix)
    for _ in range(100):
        x1, x2 = sorted((rng.randrange(rows), rng.randrange(rows)))
        y1, y2 = sorted((rng.randrange(cols), rng.randrange(cols)))
        expected = sum(sum(row[y1 : y2 + 1]) for row in matrix[x1 : x2 + 1])
        assert submatrix_sum(prefix, x1, y1, x2, y2) == expected


def test_single_cells_round_trip():
    prefix = build_prefix_sum(MATRIX)
    cells = [[submatrix_sum(prefix, i, j, i, j) for j in range(3)] for i in range(3)]
    assert cells == MATRIX


def test_errors():
    with pytest.raises(ValueError):
        build_prefix_sum([])
    with pytest.raises(ValueError):
        build_prefix_sum([[1, 2], [3]])
    prefix = build_prefix_sum(MATRIX)
    with pytest.raises(IndexError):
        submatrix_sum(prefix, 0, 0, 3, 0)