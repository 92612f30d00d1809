"""Pattern matching: prefix function, KMP, Z-function, Aho-Corasick and tries."""

from __future__ import annotations

from collections import deque
from typing import Hashable, Iterable, Sequence


def prefix_function(s: Sequence) -> list[int]:
    """Length of the longest proper prefix that is also a suffix of each s[:i+1]."""
    lps = [0] * len(s)
    matched = 0
    for pos in range(1, len(s)):
        while matched > 0 and s[pos] != s[matched]:
            matched = lps[matched - 1]
        if s[pos] == s[matched]:
            matched += 1
        lps[pos] = matched
    return lps


def kmp(text: Sequence, pattern: Sequence) -> list[int]:
    """Start positions of every, possibly overlapping, occurrence of pattern in text."""
    m = len(pattern)
    if m == 0:
        raise ValueError("pattern must not be empty")
    lps = prefix_function(pattern)
    occurrences: list[int] = []
    matched = 0
    for idx, item in enumerate(text):
        while matched > 0 and item != pattern[matched]:
            matched = lps[matched - 1]
        if item == pattern[matched]:
            matched += 1
        if matched == m:
            occurrences.append(idx - m + 1)
            matched = lps[matched - 1]
    return occurrences


def z_function(s: Sequence) -> list[int]:
    """Length of the longest substring starting at each position that is a prefix of s.

    The value at position 0 is 0 by convention.
    """
    n = len(s)
    z = [0] * n
    left = right = 0
    for idx in range(1, n):
        z[idx] = max(0, min(z[idx - left], right - idx + 1))
        while idx + z[idx] < n and s[z[idx]] == s[idx + z[idx]]:
            left = idx
            right = idx + z[idx]
            z[idx] += 1
    return z


class AhoCorasick:
    """Automaton counting the occurrences of many patterns in one pass over a text."""

    def __init__(self, patterns: Iterable[Sequence[Hashable]]) -> None:
        self._children: list[dict] = [{}]
        self._outputs: list[list[int]] = [[]]
        self._count = 0
        for pattern_id, pattern in enumerate(patterns):
            node = 0
            for ch in pattern:
                nxt = self._children[node].get(ch)
                if nxt is None:
                    nxt = len(self._children)
                    self._children[node][ch] = nxt
                    self._children.append({})
                    self._outputs.append([])
                node = nxt
            self._outputs[node].append(pattern_id)
            self._count = pattern_id + 1
        self._link = [0] * len(self._children)
        self._exit = [0] * len(self._children)
        self._build()

    def _build(self) -> None:
        queue = deque([0])
        while queue:
            u = queue.popleft()
            for ch, v in self._children[u].items():
                queue.append(v)
                if u == 0:
                    link = 0
                else:
                    f = self._link[u]
                    while f and ch not in self._children[f]:
                        f = self._link[f]
                    link = self._children[f].get(ch, 0)
                self._link[v] = link
                self._exit[v] = link if self._outputs[link] else self._exit[link]

    def count(self, text: Iterable[Hashable]) -> list[int]:
        """Number of occurrences of each pattern in text, in pattern order."""
        counts = [0] * self._count
        u = 0
        for ch in text:
            while u and ch not in self._children[u]:
                u = self._link[u]
            u = self._children[u].get(ch, 0)
            x = u
            while x:
                for pattern_id in self._outputs[x]:
                    counts[pattern_id] += 1
                x = self._exit[x]
        return counts


class _TrieNode:
    __slots__ = ("children", "end")

    def __init__(self) -> None:
        self.children: dict = {}
        self.end = False


class Trie:
    """Prefix tree over words."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    def insert(self, word: Iterable[Hashable]) -> None:
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _TrieNode())
        node.end = True

    def _walk(self, word: Iterable[Hashable]) -> _TrieNode | None:
        node = self._root
        for ch in word:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def search(self, word: Iterable[Hashable]) -> bool:
        """True if word was inserted."""
        node = self._walk(word)
        return node is not None and node.end

    def starts_with(self, prefix: Iterable[Hashable]) -> bool:
        """True if some inserted word begins with prefix."""
        return self._walk(prefix) is not None