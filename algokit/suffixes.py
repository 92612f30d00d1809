"""Suffix structures, palindromes, rotations and polynomial string hashing."""

from __future__ import annotations

from itertools import pairwise
from typing import Sequence

_BASES = (257, 359)
_MODS = (10**9 + 7, 10**9 + 9)


class StringHash:
    """Double polynomial hash of a text; compares substrings in O(1)."""

    def __init__(self, text: Sequence) -> None:
        values = [ord(c) if isinstance(c, str) else c for c in text]
        self._n = len(values)
        self._prefix: list[list[int]] = []
        self._powers: list[list[int]] = []
        for base, mod in zip(_BASES, _MODS):
            prefix = [0]
            powers = [1]
            for value in values:
                prefix.append((prefix[-1] * base + value) % mod)
                powers.append(powers[-1] * base % mod)
            self._prefix.append(prefix)
            self._powers.append(powers)

    def query(self, left: int, right: int) -> int:
        """Hash of the substring covering positions left..right-1."""
        if not 0 <= left <= right <= self._n:
            raise IndexError(f"invalid range [{left}, {right})")
        a, b = (
            (prefix[right] - prefix[left] * powers[right - left]) % mod
            for prefix, powers, mod in zip(self._prefix, self._powers, _MODS)
        )
        return (a << 32) + b


def suffix_array(s: Sequence) -> list[int]:
    """Start positions of the suffixes of s in sorted order."""
    n = len(s)
    if n == 0:
        return []
    suffix = sorted(range(n - 1, -1, -1), key=lambda i: s[i])
    classes = list(s)
    length = 1
    while length < n:
        c = list(classes)
        half = length // 2
        classes[suffix[0]] = 0
        for i, (prev, cur) in enumerate(pairwise(suffix), start=1):
            same = (
                prev + length < n
                and c[cur] == c[prev]
                and c[cur + half] == c[prev + half]
            )
            classes[cur] = classes[prev] if same else i
        cnt = list(range(n))
        for start in list(suffix):
            s1 = start - length
            if s1 >= 0:
                suffix[cnt[classes[s1]]] = s1
                cnt[classes[s1]] += 1
        length *= 2
    return suffix


def lcp_array(suffixes: Sequence[int], s: Sequence) -> list[int]:
    """Longest common prefix of each pair of neighbouring suffixes in suffixes."""
    n = len(s)
    if n == 0:
        return []
    rank = [0] * n
    for position, start in enumerate(suffixes):
        rank[start] = position
    lcp = [0] * (n - 1)
    pre = 0
    for i in range(n):
        if rank[i] < n - 1:
            j = suffixes[rank[i] + 1]
            while max(i, j) + pre < n and s[i + pre] == s[j + pre]:
                pre += 1
            lcp[rank[i]] = pre
            if pre > 0:
                pre -= 1
    return lcp


def manacher(s: Sequence) -> list[int]:
    """Palindrome radii: entry 2*i is the odd radius at i, 2*i+1 the even one after i."""
    n = len(s)
    if n == 0:
        return []
    res = [0] * (2 * n - 1)
    l = r = -1
    for z in range(2 * n - 1):
        i = (z + 1) >> 1
        j = z >> 1
        p = 0 if i >= r else min(r - i, res[2 * (l + r) - z])
        while j + p + 1 < n and i - p - 1 >= 0 and s[j + p + 1] == s[i - p - 1]:
            p += 1
        if j + p > r:
            l = i - p
            r = j + p
        res[z] = p
    return res


def palindromes(s: Sequence) -> list[Sequence]:
    """The maximal palindrome around every centre of s, skipping empty even ones."""
    answer = []
    for z, radius in enumerate(manacher(s)):
        i = (z + 1) // 2
        j = z // 2
        if i > j and radius == 0:
            continue
        answer.append(s[i - radius : j + radius + 1])
    return answer


def minimum_rotation(s: Sequence) -> int:
    """Start index of the lexicographically smallest rotation of s."""
    doubled = list(s) * 2
    length = len(doubled)
    i, j, k = 0, 1, 0
    while i + k < length and j + k < length:
        if doubled[i + k] == doubled[j + k]:
            k += 1
        elif doubled[i + k] > doubled[j + k]:
            i, k = i + k + 1, 0
        else:
            j, k = j + k + 1, 0
        if i == j:
            j += 1
    return min(i, j)