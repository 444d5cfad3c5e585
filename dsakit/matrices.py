"""Lower triangular matrices stored in row-major packed form."""

from __future__ import annotations

import argparse
import sys
from typing import Iterator


class LowerTriangularMatrix:
    """An n-by-n matrix whose entries above the diagonal are zero.

    Indices are 1-based; only the n*(n+1)/2 entries on or below the diagonal
    are stored.
    """

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"dimension must be non-negative, got {n}")
        self.n = n
        self._data = [0] * (n * (n + 1) // 2)

    def _offset(self, i: int, j: int) -> int:
        if not (1 <= i <= self.n and 1 <= j <= self.n):
            raise IndexError(f"index ({i}, {j}) outside a {self.n}x{self.n} matrix")
        return i * (i - 1) // 2 + j - 1

    def set(self, i: int, j: int, x: int) -> None:
        """Store x at (i, j); entries above the diagonal are ignored."""
        offset = self._offset(i, j)
        if i >= j:
            self._data[offset] = x

    def get(self, i: int, j: int) -> int:
        offset = self._offset(i, j)
        return self._data[offset] if i >= j else 0

    def rows(self) -> Iterator[list[int]]:
        """Yield each full row, zeros included."""
        for i in range(1, self.n + 1):
            yield [self.get(i, j) for j in range(1, self.n + 1)]

    def __str__(self) -> str:
        return "\n".join(" ".join(map(str, row)) for row in self.rows())


def main(argv: list[str] | None = None) -> int:
    """Read a dimension and a full matrix from standard input, print its lower triangle."""
    argparse.ArgumentParser(
        description="Read a square matrix and print its lower triangular part."
    ).parse_args(argv)
    tokens = (token for line in sys.stdin for token in line.split())
    try:
        print("\n Enter Dimension", end="", flush=True)
        matrix = LowerTriangularMatrix(int(next(tokens)))
        print("\n Enter all elements: ", end="", flush=True)
        for i in range(1, matrix.n + 1):
            for j in range(1, matrix.n + 1):
                matrix.set(i, j, int(next(tokens)))
    except StopIteration:
        print("\nerror: unexpected end of input", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"\nerror: {exc}", file=sys.stderr)
        return 1
    print("\n")
    print(matrix)
    return 0