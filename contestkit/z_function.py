"""Z-function of a sequence."""

from collections.abc import Sequence


def z_function(s: Sequence) -> list[int]:
    """Return ``z`` where ``z[i]`` is the longest common prefix of ``s`` and ``s[i:]``.

    ``z[0]`` is the length of ``s``; an empty input gives an empty list.
    """
    n = len(s)
    if n == 0:
        return []
    z = [0] * n
    l = r = 0
    for i in range(1, n):
        if i <= r:
            z[i] = min(r - i + 1, z[i - l])
        while i + z[i] < n and s[z[i]] == s[i + z[i]]:
            z[i] += 1
        if i + z[i] - 1 > r:
            l, r = i, i + z[i] - 1
    z[0] = n
    return z