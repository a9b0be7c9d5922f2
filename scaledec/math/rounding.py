"""Rounding modes and the rounded integer division every rescale goes through."""

from __future__ import annotations

from enum import Enum

from scaledec.errors import InvalidRoundingMode
from scaledec.math.powers import div_trunc

__all__ = ["RoundingMode", "coerce_mode", "divide_rounded"]


class RoundingMode(str, Enum):
    """How discarded digits adjust the kept ones."""

    TRUNC = "trunc"  # toward zero
    FLOOR = "floor"  # toward negative infinity
    CEIL = "ceil"  # toward positive infinity
    ROUND = "round"  # half away from zero


def coerce_mode(mode: RoundingMode | str) -> RoundingMode:
    """Accept a RoundingMode or its string value.

    Raises:
        InvalidRoundingMode: If mode is not a known rounding mode
    """
    if isinstance(mode, RoundingMode):
        return mode
    try:
        return RoundingMode(mode)
    except ValueError as err:
        raise InvalidRoundingMode(f"Unknown rounding mode: {mode!r}") from err


def divide_rounded(numerator: int, denominator: int, mode: RoundingMode) -> int:
    """Divide two integers and round the quotient per mode.

    The direction of floor/ceil/round adjustments follows the sign of the
    true quotient, so negative denominators are handled.

    Args:
        numerator: Dividend
        denominator: Divisor (non-zero)
        mode: Rounding mode applied when the remainder is non-zero

    Returns:
        The rounded integer quotient

    Raises:
        ZeroDivisionError: If denominator is zero
    """
    quotient = div_trunc(numerator, denominator)
    remainder = numerator - quotient * denominator
    if remainder == 0 or mode is RoundingMode.TRUNC:
        return quotient

    negative = (numerator < 0) != (denominator < 0)
    if mode is RoundingMode.FLOOR:
        if negative:
            quotient -= 1
    elif mode is RoundingMode.CEIL:
        if not negative:
            quotient += 1
    elif mode is RoundingMode.ROUND:
        # tie goes away from zero
        if abs(remainder) * 2 >= abs(denominator):
            quotient += -1 if negative else 1
    return quotient
