import pytest

from contestkit.kmp import kmp_search, prefix_function


@pytest.mark.parametrize("s", ["aabaaab", "abcabcd", "aaaa", "abacabab", "x"])
def test_prefix_function_gives_longest_border(s):
    pi = prefix_function(s)
    assert len(pi) == len(s)
    for i, border in enumerate(pi):
        piece = s[: i + 1]
        assert border <= i
        assert piece[:border] == piece[len(piece) - border :]
        assert all(piece[:k] != piece[len(piece) - k :] for k in range(border + 1, i + 1))


def test_prefix_function_example():
    assert prefix_function("aabaaab") == [0, 1, 0, 1, 2, 2, 3]


def test_prefix_function_empty():
    assert prefix_function("") == []


def test_overlapping_matches():
    assert kmp_search("aaaa", "aa") == [0, 1, 2]


@pytest.mark.parametrize(
    "text, pattern",
    [("abababa", "aba"), ("hello world", "o"), ("abcdef", "xyz"), ("aab", "aab"), ("ab", "abc")],
)
def test_matches_are_exactly_the_occurrences(text, pattern):
    expected = [p for p in range(len(text)) if text.startswith(pattern, p)]
    assert kmp_search(text, pattern) == expected


def test_empty_pattern_rejected():
    with pytest.raises(ValueError):
        kmp_search("abc", "")