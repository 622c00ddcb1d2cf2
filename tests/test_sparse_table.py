import math

import pytest

from contestkit.sparse_table import MinMaxSparseTable, SparseTable

VALUES = [5, 2, 8, 1, 9, 3, 7, 4, 6, 0, 11]


def all_ranges(n):
    return [(l, r) for l in range(n) for r in range(l, n)]


def test_min_queries():
    table = SparseTable(VALUES)
    for l, r in all_ranges(len(VALUES)):
        assert table.query(l, r) == min(VALUES[l : r + 1])


def test_custom_combine():
    table = SparseTable(VALUES, max)
    for l, r in all_ranges(len(VALUES)):
        assert table.query(l, r) == max(VALUES[l : r + 1])


def test_gcd_combine():
    values = [12, 18, 24, 36, 9]
    table = SparseTable(values, math.gcd)
    for l, r in all_ranges(len(values)):
        assert table.query(l, r) == math.gcd(*values[l : r + 1])


def test_min_max_table():
    table = MinMaxSparseTable(VALUES)
    for l, r in all_ranges(len(VALUES)):
        assert table.query_min(l, r) == min(VALUES[l : r + 1])
        assert table.query_max(l, r) == max(VALUES[l : r + 1])


def test_single_element():
    table = MinMaxSparseTable([42])
    assert table.query_min(0, 0) == 42
    assert table.query_max(0, 0) == 42


def test_errors():
    with pytest.raises(ValueError):
        SparseTable([])
    table = SparseTable(VALUES)
    with pytest.raises(IndexError):
        table.query(3, 2)
    with pytest.raises(IndexError):
        table.query(0, len(VALUES))