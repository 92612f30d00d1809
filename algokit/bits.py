"""Bit manipulation helpers."""

from __future__ import annotations

from typing import Iterator


def _non_negative(num: int) -> int:
    if num < 0:
        raise ValueError("value must not be negative")
    return num


def zeros_left(num: int, width: int = 32) -> int:
    """Leading zero bits of num in a word of the given width."""
    num &= (1 << width) - 1
    return width - num.bit_length()


def zeros_right(num: int) -> int:
    """Trailing zero bits of num; 0 for 0."""
    if num == 0:
        return 0
    return (num & -num).bit_length() - 1


def count_ones(num: int) -> int:
    return bin(_non_negative(num)).count("1")


def parity(num: int) -> int:
    """1 if num has an odd number of set bits, else 0."""
    return count_ones(num) & 1


def lsb(num: int) -> int:
    """1-based position of the lowest set bit; 0 for 0."""
    return 0 if num == 0 else zeros_right(num) + 1


def hamming(lhs: int, rhs: int) -> int:
    """Number of bit positions where lhs and rhs differ."""
    return count_ones(lhs ^ rhs)


def set_bits(mask: int) -> Iterator[int]:
    """Indices of the set bits of mask, lowest first."""
    mask = _non_negative(mask)
    while mask:
        yield zeros_right(mask)
        mask &= mask - 1


def submasks(mask: int) -> Iterator[int]:
    """Every non-empty submask of mask, in decreasing order."""
    sub = _non_negative(mask)
    while sub:
        yield sub
        sub = (sub - 1) & mask