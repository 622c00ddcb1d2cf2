import pytest

from contestkit.trie import BinaryTrie, Trie, count_subarrays_xor_less, subarray_xor_extremes


def test_insert_and_search():
    trie = Trie()
    assert trie.insert("apple") is True
    assert trie.insert("app") is True
    assert trie.search("apple") is True
    assert trie.search("app") is True
    assert trie.search("ap") is False
    assert trie.search("apples") is False
    assert "app" in trie


def test_insert_twice():
    trie = Trie()
    trie.insert("cat")
    assert trie.insert("cat") is False
    assert trie.remove("cat") is True
    assert trie.search("cat") is False


def test_remove_keeps_other_words():
    trie = Trie()
    for word in ["car", "card", "care", "dog"]:
        trie.insert(word)
    assert trie.remove("card") is True
    assert trie.search("card") is False
    assert trie.search("car") is True
    assert trie.search("care") is True
    assert trie.remove("car") is True
    assert trie.search("car") is False
    assert trie.search("care") is True


def test_remove_missing_word():
    trie = Trie()
    trie.insert("hello")
    assert trie.remove("help") is False
    assert trie.remove("hell") is False
    assert trie.search("hello") is True


def test_empty_word():
    trie = Trie()
    assert trie.search("") is False
    trie.insert("")
    assert trie.search("") is True


VALUES = [3, 10, 5, 25, 2, 8]


def _filled():
    trie = BinaryTrie()
    for v in VALUES:
        trie.insert(v)
    return trie


def test_max_and_min_xor_agree_with_definition():
    trie = _filled()
    for x in range(32):
        assert trie.max_xor(x) == max(x ^ v for v in VALUES)
        assert trie.min_xor(x) == min(x ^ v for v in VALUES)


def test_count_xor_less_agrees_with_definition():
    trie = _filled()
    for x in range(16):
        for k in range(40):
            assert trie.count_xor_less(x, k) == sum(1 for v in VALUES if v ^ x < k)


def test_size_counts_duplicates():
    trie = BinaryTrie()
    trie.insert(4)
    trie.insert(4)
    assert len(trie) == 2
    assert trie.count_xor_less(4, 1) == 2


def test_empty_binary_trie():
    with pytest.raises(ValueError):
        BinaryTrie().max_xor(1)


def test_value_out_of_range():
    with pytest.raises(ValueError):
        BinaryTrie().insert(-1)


def test_subarray_extremes():
    assert subarray_xor_extremes([1, 2, 3]) == (3, 0)


def test_count_subarrays():
    assert count_subarrays_xor_less([1, 2, 3], 2) == 3


def test_subarray_helpers_reject_empty():
    with pytest.raises(ValueError):
        subarray_xor_extremes([])
    with pytest.raises(ValueError):
        count_subarrays_xor_less([], 5)