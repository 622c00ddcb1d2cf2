"""Two-dimensional prefix sums with 0-based inclusive rectangles."""

from collections.abc import Iterable, Sequence


def build_prefix_sum(matrix: Iterable[Iterable[int]]) -> list[list[int]]:
    """Return ``p`` with ``p[i][j]`` the sum of ``matrix[0..i][0..j]``."""
    rows = [list(row) for row in matrix]
    if not rows or not rows[0]:
        raise ValueError("matrix must be non-empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("matrix rows must have equal length")
    prefix: list[list[int]] = []
    above = [0] * width
    for row in rows:
        running = 0
        current = []
        for value, up in zip(row, above):
            running += value
            current.append(running + up)
        prefix.append(current)
        above = current
    return prefix


def submatrix_sum(
    prefix: Sequence[Sequence[int]], x1: int, y1: int, x2: int, y2: int
) -> int:
    """Sum of the rectangle from ``(x1, y1)`` to ``(x2, y2)`` inclusive."""
    if not (0 <= x1 <= x2 < len(prefix) and 0 <= y1 <= y2 < len(prefix[0])):
        raise IndexError("rectangle outside the matrix")
    total = prefix[x2][y2]
    if x1 > 0:
        total -= prefix[x1 - 1][y2]
    if y1 > 0:
        total -= prefix[x2][y1 - 1]
    if x1 > 0 and y1 > 0:
        total += prefix[x1 - 1][y1 - 1]
    return total