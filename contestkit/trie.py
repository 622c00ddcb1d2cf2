"""Word trie and 32-bit binary trie for XOR queries."""

from __future__ import annotations

from collections.abc import Iterable


class _TrieNode:
    __slots__ = ("children", "terminal", "count")

    def __init__(self) -> None:
        self.children: dict[str, _TrieNode] = {}
        self.terminal = False
        self.count = 0


class Trie:
    """Set of words stored by their characters."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    def _find(self, word: str) -> _TrieNode | None:
        node = self._root
        for ch in word:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def search(self, word: str) -> bool:
        """Whether ``word`` is stored."""
        node = self._find(word)
        return node is not None and node.terminal

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word)

    def insert(self, word: str) -> bool:
        """Store ``word``; False if it was already stored."""
        if self.search(word):
            return False
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _TrieNode())
            node.count += 1
        node.terminal = True
        return True

    def remove(self, word: str) -> bool:
        """Remove ``word``, pruning unused nodes; False if it was not stored."""
        if not self.search(word):
            return False
        node = self._root
        for ch in word:
            child = node.children[ch]
            child.count -= 1
            if child.count == 0:
                del node.children[ch]
                return True
            node = child
        node.terminal = False
        return True


class _BitNode:
    __slots__ = ("next", "size")

    def __init__(self) -> None:
        self.next: list[_BitNode | None] = [None, None]
        self.size = 0


class BinaryTrie:
    """Multiset of 32-bit unsigned values answering XOR queries."""

    BITS = 32
    _LIMIT = 1 << BITS

    def __init__(self) -> None:
        self._root = _BitNode()

    def _check(self, value: int) -> None:
        if not 0 <= value < self._LIMIT:
            raise ValueError(f"value {value} is not a {self.BITS}-bit unsigned integer")

    def __len__(self) -> int:
        return self._root.size

    def insert(self, value: int) -> None:
        self._check(value)
        node = self._root
        node.size += 1
        for i in reversed(range(self.BITS)):
            bit = (value >> i) & 1
            if node.next[bit] is None:
                node.next[bit] = _BitNode()
            node = node.next[bit]
            node.size += 1

    def count_xor_less(self, x: int, k: int) -> int:
        """Number of stored values ``v`` with ``v ^ x < k``."""
        self._check(x)
        self._check(k)
        node: _BitNode | None = self._root
        count = 0
        for i in reversed(range(self.BITS)):
            if node is None:
                break
            x_bit = (x >> i) & 1
            if (k >> i) & 1:
                same = node.next[x_bit]
                if same is not None:
                    count += same.size
                node = node.next[1 - x_bit]
            else:
                node = node.next[x_bit]
        return count

    def _require_values(self) -> None:
        if self._root.size == 0:
            raise ValueError("trie is empty")

    def max_xor(self, x: int) -> int:
        """Largest ``v ^ x`` over stored values ``v``."""
        self._check(x)
        self._require_values()
        node = self._root
        result = 0
        for i in reversed(range(self.BITS)):
            x_bit = (x >> i) & 1
            wanted = node.next[1 - x_bit]
            if wanted is not None:
                result |= 1 << i
                node = wanted
            else:
                node = node.next[x_bit]
        return result

    def min_xor(self, x: int) -> int:
        """Smallest ``v ^ x`` over stored values ``v``."""
        self._check(x)
        self._require_values()
        node = self._root
        result = 0
        for i in reversed(range(self.BITS)):
            x_bit = (x >> i) & 1
            same = node.next[x_bit]
            if same is not None:
                node = same
            else:
                result |= 1 << i
                node = node.next[1 - x_bit]
        return result


def _prefix_xors(values: Iterable[int]) -> list[int]:
    values = list(values)
    if not values:
        raise ValueError("need at least one value")
    prefixes = []
    acc = 0
    for value in values:
        acc ^= value
        prefixes.append(acc)
    return prefixes


def subarray_xor_extremes(values: Iterable[int]) -> tuple[int, int]:
    """Largest and smallest XOR of a non-empty contiguous subarray."""
    trie = BinaryTrie()
    trie.insert(0)
    best = smallest = None
    for prefix in _prefix_xors(values):
        high, low = trie.max_xor(prefix), trie.min_xor(prefix)
        best = high if best is None else max(best, high)
        smallest = low if smallest is None else min(smallest, low)
        trie.insert(prefix)
    return best, smallest


def count_subarrays_xor_less(values: Iterable[int], k: int) -> int:
    """Number of non-empty contiguous subarrays whose XOR is below ``k``."""
    trie = BinaryTrie()
    trie.insert(0)
    total = 0
    for prefix in _prefix_xors(values):
        total += trie.count_xor_less(prefix, k)
        trie.insert(prefix)
    return total