"""Matrices with entries reduced modulo a prime, and linear recurrences."""

from __future__ import annotations

from typing import Iterable, Sequence

from .modular import MOD


class Matrix:
    """Rectangular integer matrix; products are reduced modulo MOD."""

    def __init__(self, rows: Iterable[Iterable[int]]) -> None:
        self.rows: list[list[int]] = [list(row) for row in rows]
        widths = {len(row) for row in self.rows}
        if len(widths) > 1:
            raise ValueError("matrix rows must all have the same length")
        self._m = widths.pop() if widths else 0

    @classmethod
    def zeros(cls, n: int, m: int) -> "Matrix":
        result = cls([[0] * m for _ in range(n)])
        result._m = m
        return result

    @property
    def shape(self) -> tuple[int, int]:
        return len(self.rows), self._m

    def __getitem__(self, index: int) -> list[int]:
        return self.rows[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self.rows == other.rows

    def __repr__(self) -> str:
        return f"Matrix({self.rows!r})"

    def __mul__(self, other: "Matrix") -> "Matrix":
        n, m = self.shape
        rows, cols = other.shape
        if m != rows:
            raise ValueError(f"cannot multiply {self.shape} by {other.shape}")
        result = Matrix.zeros(n, cols)
        for row, out in zip(self.rows, result.rows):
            for value, other_row in zip(row, other.rows):
                if value:
                    for j, entry in enumerate(other_row):
                        out[j] = (out[j] + value * entry) % MOD
        return result

    def __pow__(self, exponent: int) -> "Matrix":
        n, m = self.shape
        if n != m:
            raise ValueError("only square matrices can be raised to a power")
        if exponent < 0:
            raise ValueError("exponent must not be negative")
        result = identity(n)
        base = self
        while exponent:
            if exponent & 1:
                result = result * base
            base = base * base
            exponent >>= 1
        return result


def identity(n: int) -> Matrix:
    """The n by n identity matrix."""
    return Matrix([[1 if i == j else 0 for j in range(n)] for i in range(n)])


def linear_recurrence(n: int, k: int = 2) -> int:
    """Term n + k - 1 (mod MOD) of the sequence starting 0, ..., 0, 1 (k terms)
    in which every later term is the sum of the k before it.

    With k == 2 this is the Fibonacci number F(n + 1).
    """
    if k < 1:
        raise ValueError("k must be at least 1")
    first: Sequence[list[int]] = [[0] for _ in range(k)]
    first[k - 1][0] = 1
    step = Matrix.zeros(k, k)
    for i in range(k - 1):
        step.rows[i][i + 1] = 1
    step.rows[k - 1] = [1] * k
    return ((step ** (n + k - 1)) * Matrix(first))[0][0]