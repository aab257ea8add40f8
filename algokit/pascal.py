"""Binomial coefficients and Pascal's triangle."""

from __future__ import annotations

from functools import lru_cache


def _check(n: int, r: int) -> None:
    if n < 0 or not 0 <= r <= n:
        raise ValueError(f"binomial coefficient needs 0 <= r <= n, got n={n}, r={r}")


def binomial(n: int, r: int) -> int:
    """Compute C(n, r) by the plain Pascal recurrence."""
    _check(n, r)
    if r == 0 or r == n:
        return 1
    return binomial(n - 1, r - 1) + binomial(n - 1, r)


@lru_cache(maxsize=None)
def _binomial_memo(n: int, r: int) -> int:
    if r == 0 or r == n:
        return 1
    return _binomial_memo(n - 1, r - 1) + _binomial_memo(n - 1, r)


def binomial_memo(n: int, r: int) -> int:
    """Compute C(n, r) by the Pascal recurrence with memoisation."""
    _check(n, r)
    return _binomial_memo(n, r)


def pascal_rows(rows: int) -> list[list[int]]:
    """Return the first ``rows`` rows of Pascal's triangle, built bottom-up."""
    if rows < 0:
        raise ValueError("row count must not be negative")
    triangle: list[list[int]] = []
    for n in range(rows):
        row = [1] * (n + 1)
        for r in range(1, n):
            row[r] = triangle[n - 1][r - 1] + triangle[n - 1][r]
        triangle.append(row)
    return triangle


def render(rows: int) -> str:
    """Lay out the triangle as centred text, one row per line."""
    lines = [
        "  " * (rows - i - 1) + "".join(f"{value}   " for value in row)
        for i, row in enumerate(pascal_rows(rows))
    ]
    return "".join(line + "\n" for line in lines)