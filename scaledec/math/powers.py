"""Integer helpers shared by the decimal engine.

Powers of 5 and 10 are served from tables built on first use. The tables are
tuples and are never modified after construction.
"""

from __future__ import annotations

from functools import cache

from scaledec.config import DEFAULT_CONFIG

__all__ = [
    "pow5_int",
    "pow10_int",
    "digit_count",
    "div_trunc",
]

# log10(2), used to seed digit counting from bit length
_LOG10_2 = 0.30102999566398120


@cache
def _pow5_table() -> tuple[int, ...]:
    return tuple(5**i for i in range(DEFAULT_CONFIG.power_cache_size))


@cache
def _pow10_table() -> tuple[int, ...]:
    return tuple(10**i for i in range(DEFAULT_CONFIG.power_cache_size))


def pow5_int(n: int) -> int:
    """Return 5**n for n >= 0."""
    if n < 0:
        raise ValueError(f"pow5_int requires a non-negative exponent, got {n}")
    table = _pow5_table()
    if n < len(table):
        return table[n]
    return 5**n


def pow10_int(n: int) -> int:
    """Return 10**n for n >= 0."""
    if n < 0:
        raise ValueError(f"pow10_int requires a non-negative exponent, got {n}")
    table = _pow10_table()
    if n < len(table):
        return table[n]
    return 10**n


def digit_count(n: int) -> int:
    """Number of decimal digits in |n| (1 for zero).

    Works from the bit length so it never converts n to a string.
    """
    n = abs(n)
    if n < 10:
        return 1
    estimate = int((n.bit_length() - 1) * _LOG10_2)
    while n >= pow10_int(estimate + 1):
        estimate += 1
    while n < pow10_int(estimate):
        estimate -= 1
    return estimate + 1


def div_trunc(a: int, b: int) -> int:
    """Integer division with truncation toward zero.

    Python's // operator rounds toward negative infinity; the decimal engine
    works with truncated quotients and applies its own rounding on top.

    Raises:
        ZeroDivisionError: If b is zero

    Examples:
        -7 // 3 = -3 (floor)
        div_trunc(-7, 3) = -2 (truncate)
    """
    if b == 0:
        raise ZeroDivisionError("Division by zero in div_trunc")
    if (a >= 0) == (b >= 0):
        return a // b
    return -(abs(a) // abs(b))
