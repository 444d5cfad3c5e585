"""Classic recursive algorithms alongside their iterative counterparts."""

from __future__ import annotations

import math
from functools import lru_cache
from typing import Iterator


def _require_non_negative(value: int, name: str = "n") -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def factorial(n: int) -> int:
    """Return n! computed recursively."""
    _require_non_negative(n)
    if n == 0:
        return 1
    return factorial(n - 1) * n


def factorial_iterative(n: int) -> int:
    """Return n! computed with a loop; 1 for any n below 1."""
    return math.prod(range(1, n + 1))


def fib(n: int) -> int:
    """Return the n-th term of the sequence 1, 1, 2, 3, 5, ... by plain recursion."""
    if n <= 1:
        return 1
    return fib(n - 1) + fib(n - 2)


def fib_iterative(n: int) -> int:
    """Return the same term as fib(n), computed with a loop."""
    previous, current = 1, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def fib_memo(n: int) -> int:
    """Return the n-th Fibonacci number (0, 1, 1, 2, ...) using memoisation."""

    @lru_cache(maxsize=None)
    def term(k: int) -> int:
        if k <= 1:
            return k
        return term(k - 1) + term(k - 2)

    return term(n)


def _indirect_a(n: int) -> Iterator[int]:
    if n > 0:
        yield n
        yield from _indirect_b(n - 1)


def _indirect_b(n: int) -> Iterator[int]:
    if n > 1:
        yield n
        yield from _indirect_a(n // 2)


def indirect_sequence(n: int) -> list[int]:
    """Return the values visited by two mutually recursive functions starting at n."""
    return list(_indirect_a(n))


def sum_natural(n: int) -> int:
    """Return 1 + 2 + ... + n recursively."""
    _require_non_negative(n)
    if n == 0:
        return 0
    return sum_natural(n - 1) + n


def sum_natural_iterative(n: int) -> int:
    """Return 1 + 2 + ... + n with a loop; 0 for any n below 1."""
    return sum(range(1, n + 1))


def nested(n: int) -> int:
    """Nested recursion: n - 10 above 100, otherwise nested(nested(n + 11))."""
    if n > 100:
        return n - 10
    return nested(nested(n + 11))


def power(m: int, n: int) -> int:
    """Return m raised to n by repeated multiplication."""
    _require_non_negative(n)
    if n == 0:
        return 1
    return power(m, n - 1) * m


def power_fast(m: int, n: int) -> int:
    """Return m raised to n by repeated squaring."""
    _require_non_negative(n)
    if n == 0:
        return 1
    if n % 2 == 0:
        return power_fast(m * m, n // 2)
    return m * power_fast(m * m, (n - 1) // 2)


def _countdown(n: int) -> Iterator[int]:
    if n > 0:
        yield n
        yield from _countdown(n - 1)


def countdown(n: int) -> list[int]:
    """Return the values visited by head-first linear recursion from n."""
    return list(_countdown(n))


def _tree(n: int) -> Iterator[int]:
    if n > 0:
        yield n
        yield from _tree(n - 1)
        yield from _tree(n - 1)


def tree_sequence(n: int) -> list[int]:
    """Return the values visited by a recursion that calls itself twice."""
    return list(_tree(n))


def accumulated_sum(n: int) -> int:
    """Sum a counter shared across the recursion, read after it has fully grown."""
    counter = 0

    def descend(k: int) -> int:
        nonlocal counter
        if k > 0:
            counter += 1
            return descend(k - 1) + counter
        return 0

    return descend(n)


def hanoi(
    n: int, source: int = 1, via: int = 2, target: int = 3
) -> list[tuple[int, int]]:
    """Return the (from, to) moves that carry n disks from source to target."""
    _require_non_negative(n)
    moves: list[tuple[int, int]] = []

    def move(count: int, start: int, spare: int, end: int) -> None:
        if count > 0:
            move(count - 1, start, end, spare)
            moves.append((start, end))
            move(count - 1, spare, start, end)

    move(n, source, via, target)
    return moves


def taylor_exp(x: float, n: int) -> float:
    """Return the Taylor series of e**x summed up to the x**n / n! term."""
    _require_non_negative(n)

    def expand(k: int) -> tuple[float, float, float]:
        if k == 0:
            return 1.0, 1.0, 1.0
        total, numerator, denominator = expand(k - 1)
        numerator *= x
        denominator *= k
        return total + numerator / denominator, numerator, denominator

    return expand(n)[0]


def horner_exp(x: float, n: int) -> float:
    """Return the same series as taylor_exp, evaluated by Horner's rule recursively."""
    _require_non_negative(n)

    def step(k: int, acc: float) -> float:
        if k == 0:
            return acc
        return step(k - 1, 1 + x / k * acc)

    return step(n, 1.0)


def horner_exp_iterative(x: float, n: int) -> float:
    """Return the series of horner_exp computed with a loop."""
    acc = 1.0
    for k in range(n, 0, -1):
        acc = 1 + x / k * acc
    return acc


def _check_choose(n: int, r: int) -> None:
    if not 0 <= r <= n:
        raise ValueError(f"need 0 <= r <= n, got n={n}, r={r}")


def combinations(n: int, r: int) -> int:
    """Return n choose r from factorials."""
    _check_choose(n, r)
    return factorial(n) // (factorial(r) * factorial(n - r))


def ncr(n: int, r: int) -> int:
    """Return n choose r by Pascal's triangle recursion."""
    _check_choose(n, r)
    if r == 0 or n == r:
        return 1
    return ncr(n - 1, r - 1) + ncr(n - 1, r)