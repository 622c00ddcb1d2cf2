"""Aho-Corasick automaton over lowercase Latin letters."""

from __future__ import annotations

from collections import deque

_ALPHABET = 26


def _index(ch: str) -> int:
    i = ord(ch) - ord("a")
    if not 0 <= i < _ALPHABET:
        raise ValueError(f"character {ch!r} is not a lowercase letter a-z")
    return i


class _Node:
    __slots__ = ("children", "go", "fail", "count", "ids")

    def __init__(self) -> None:
        self.children = [-1] * _ALPHABET
        self.go = [-1] * _ALPHABET
        self.fail = -1
        self.count = 0
        self.ids: list[int] = []


class AhoCorasick:
    """Multi-pattern matcher; insert patterns, call ``build``, then search."""

    _ROOT = 0

    def __init__(self) -> None:
        self._nodes = [_Node()]
        self._built = False

    def insert(self, pattern: str, pattern_id: int) -> None:
        """Add ``pattern`` reported under ``pattern_id``."""
        if not pattern:
            raise ValueError("pattern must be non-empty")
        steps = [_index(ch) for ch in pattern]
        cur = self._ROOT
        for i in steps:
            node = self._nodes[cur]
            if node.children[i] == -1:
                node.children[i] = len(self._nodes)
                self._nodes.append(_Node())
            cur = node.children[i]
        self._nodes[cur].count += 1
        self._nodes[cur].ids.append(pattern_id)
        self._built = False

    def build(self) -> None:
        """Compute failure links and transitions."""
        nodes = self._nodes
        root = nodes[self._ROOT]
        for node in nodes:
            node.go = [-1] * _ALPHABET
            node.fail = -1
        # Reset merged data from a previous build.
        own: list[tuple[int, list[int]]] = []
        queue: deque[int] = deque()
        root.fail = self._ROOT
        for i, child in enumerate(root.children):
            if child != -1:
                nodes[child].fail = self._ROOT
                queue.append(child)
                root.go[i] = child
            else:
                root.go[i] = self._ROOT
        while queue:
            cur = queue.popleft()
            node = nodes[cur]
            for i, child in enumerate(node.children):
                if child != -1:
                    fail = nodes[node.fail].go[i]
                    nodes[child].fail = fail
                    nodes[child].count += nodes[fail].count
                    nodes[child].ids.extend(nodes[fail].ids)
                    own.append((child, list(nodes[fail].ids)))
                    queue.append(child)
                    node.go[i] = child
                else:
                    node.go[i] = nodes[node.fail].go[i]
        self._inherited = own
        self._built = True

    def _require_built(self) -> None:
        if not self._built:
            raise RuntimeError("call build() after inserting patterns")

    def _walk(self, text: str):
        self._require_built()
        steps = [_index(ch) for ch in text]
        cur = self._ROOT
        for i in steps:
            cur = self._nodes[cur].go[i]
            yield self._nodes[cur]

    def search_count(self, text: str) -> int:
        """Total number of pattern occurrences in ``text``."""
        return sum(node.count for node in self._walk(text))

    def search_with_index(self, text: str) -> list[tuple[int, int]]:
        """``(pattern_id, end_position)`` for every occurrence in ``text``."""
        return [
            (pattern_id, end)
            for end, node in enumerate(self._walk(text))
            for pattern_id in node.ids
        ]