import os

import pytest

from contestkit.suffix_array import SuffixArray, longest_common_substring

TEXTS = ["banana", "mississippi", "abracadabra", "aaaa", "a", "zyx"]


@pytest.mark.parametrize("text", TEXTS)
def test_order_sorts_suffixes(text):
    sa = SuffixArray(text)
    assert sa.order == sorted(range(len(text)), key=lambda i: text[i:])


@pytest.mark.parametrize("text", TEXTS)
def test_neighbour_lcp(text):
    sa = SuffixArray(text)
    order = sa.order
    assert len(sa.lcp) == len(order) - 1
    for k, value in enumerate(sa.lcp):
        a, b = text[order[k] :], text[order[k + 1] :]
        assert value == len(os.path.commonprefix([a, b]))


@pytest.mark.parametrize("text", TEXTS)
def test_lcp_of_any_pair(text):
    sa = SuffixArray(text)
    for i in range(len(text)):
        for j in range(len(text)):
            assert sa.lcp_of(i, j) == len(os.path.commonprefix([text[i:], text[j:]]))


@pytest.mark.parametrize("text", TEXTS)
def test_contains(text):
    sa = SuffixArray(text)
    for i in range(len(text)):
        for j in range(i, len(text) + 1):
            assert sa.contains(text[i:j]) is True
    assert sa.contains(text + "q") is False
    assert sa.contains("qq") is False


@pytest.mark.parametrize("text", ["banana", "abracadabra"])
def test_compare_substrings(text):
    sa = SuffixArray(text)
    n = len(text)
    ranges = [(l, r) for l in range(n) for r in range(l, min(n, l + 4))]
    for l1, r1 in ranges:
        for l2, r2 in ranges:
            a, b = text[l1 : r1 + 1], text[l2 : r2 + 1]
            assert sa.compare_substrings(l1, r1, l2, r2) == (a > b) - (a < b)


@pytest.mark.parametrize("text", ["banana", "abab", "xyz"])
def test_kth_substring_enumerates_distinct_substrings(text):
    sa = SuffixArray(text)
    distinct = sorted({text[i:j] for i in range(len(text)) for j in range(i + 1, len(text) + 1)})
    assert [sa.kth_substring(k) for k in range(1, len(distinct) + 1)] == distinct
    assert sa.kth_substring(len(distinct) + 1) == ""
    with pytest.raises(ValueError):
        sa.kth_substring(0)


def test_longest_palindrome_example():
    assert SuffixArray("banana").longest_palindromic_substring() == "anana"


@pytest.mark.parametrize("text", ["abacdfgdcaba", "cbbd", "racecar", "abcd", "aaaa"])
def test_longest_palindrome_is_maximal(text):
    result = SuffixArray(text).longest_palindromic_substring()
    assert result == result[::-1]
    assert result in text
    longer = [
        text[i:j]
        for i in range(len(text))
        for j in range(i + len(result) + 1, len(text) + 1)
    ]
    assert all(piece != piece[::-1] for piece in longer)


def test_empty_text():
    sa = SuffixArray("")
    assert sa.order == []
    assert sa.longest_palindromic_substring() == ""
    assert sa.kth_substring(1) == ""


def test_longest_common_substring_example():
    assert longest_common_substring("xabcdy", "zabcdw") == (4, "abcd")


@pytest.mark.parametrize("s1, s2", [("hello", "yellow"), ("abc", "def"), ("aaa", "aa")])
def test_longest_common_substring_is_common(s1, s2):
    length, piece = longest_common_substring(s1, s2)
    assert len(piece) == length
    assert piece in s1 and piece in s2
    assert not any(
        s1[i : i + length + 1] in s2 for i in range(len(s1) - length)
    )


def test_position_out_of_range():
    with pytest.raises(IndexError):
        SuffixArray("abc").lcp_of(0, 3)