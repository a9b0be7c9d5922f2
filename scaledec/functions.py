"""Module-level helpers around the Decimal type."""

from __future__ import annotations

from typing import Any

from scaledec.core import Decimal, DecimalLike, _ensure_integer, _is_decimal_like

__all__ = [
    "as_decimal",
    "is_decimal",
    "is_decimal_like",
    "pow10",
    "minmax",
    "min",
    "max",
]


def as_decimal(value: DecimalLike | None) -> Decimal | None:
    """Pass-through factory.

    None stays None and an existing Decimal is returned as is (same object);
    anything else is converted into a new Decimal.

    Raises:
        InvalidNumber: If value is neither None nor decimal-like
    """
    if value is None or isinstance(value, Decimal):
        return value
    return Decimal(value)


def is_decimal(value: Any) -> bool:
    return isinstance(value, Decimal)


def is_decimal_like(value: Any) -> bool:
    """True if value is accepted by the Decimal constructor by type.

    Strings are accepted by type; whether their text parses is only
    known on construction.
    """
    return _is_decimal_like(value)


def pow10(n: int) -> Decimal:
    """Exactly 10**n for any integer n (coefficient 1, scale -n)."""
    exponent = _ensure_integer(n, "Exponent must be an integer")
    return Decimal(1, -exponent)


def minmax(*values: DecimalLike | None) -> tuple[Decimal | None, Decimal | None]:
    """Smallest and largest of the values, ignoring None entries.

    Returns:
        (min, max), or (None, None) when no value is given
    """
    low: Decimal | None = None
    high: Decimal | None = None
    for value in values:
        candidate = as_decimal(value)
        if candidate is None:
            continue
        if low is None or candidate.lt(low):
            low = candidate
        if high is None or candidate.gt(high):
            high = candidate
    return low, high


def min(*values: DecimalLike | None) -> Decimal | None:  # noqa: A001
    return minmax(*values)[0]


def max(*values: DecimalLike | None) -> Decimal | None:  # noqa: A001
    return minmax(*values)[1]
