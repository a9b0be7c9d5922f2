"""Arbitrary-base logarithm.

The integer part is found by dividing out a table of repeated squares of the
base (base, base**2, base**4, ...) from the largest down. The fractional part
is produced one binary digit at a time: square the remainder, and if it
reaches the base, divide the base out and emit a 1 bit. n bits b1..bn form
the fraction F / 2**n, which is exactly F * 5**n / 10**n in decimal.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import structlog

from scaledec.config import DEFAULT_CONFIG
from scaledec.core import Decimal
from scaledec.errors import LogDomainError
from scaledec.math.powers import pow5_int

logger = structlog.get_logger()

__all__ = [
    "LOG_BINARY_PER_DECIMAL",
    "LogGuardSettings",
    "estimate_log_guard_settings",
    "extract_log_integer",
    "logarithm",
]

# Binary digits needed per decimal digit
LOG_BINARY_PER_DECIMAL = math.log2(10)


@dataclass(frozen=True)
class LogGuardSettings:
    """Working precision for one logarithm evaluation.

    Attributes:
        guard_prec: Extra decimal digits beyond the requested precision
        frac_prec: Fractional digits kept in the result (target + guard)
        bits: Number of binary fraction digits to generate
        div_prec: Fractional digits used for every intermediate product
            and quotient
    """

    guard_prec: int
    frac_prec: int
    bits: int
    div_prec: int


def estimate_log_guard_settings(
    target: int,
    base_scale: int,
    value_scale: int,
    max_rounds: int | None = None,
) -> LogGuardSettings:
    """Find a guard allowance consistent with the work it implies.

    More fractional digits need more bits, more bits mean more rounded
    operations, and more rounded operations need more guard digits. The
    guard starts above both operand scales and only grows; the search stops
    once the guard covers log10 of the operation count.

    Args:
        target: Requested fractional digits (non-negative)
        base_scale: Scale of the logarithm base
        value_scale: Scale of the argument
        max_rounds: Cap on refinement rounds (default from config)
    """
    rounds = DEFAULT_CONFIG.log_guard_max_rounds if max_rounds is None else max_rounds
    min_guard = max(base_scale, value_scale, 0) + 1
    guard = min_guard

    for _ in range(rounds):
        frac_prec = target + guard
        bits = math.ceil(frac_prec * LOG_BINARY_PER_DECIMAL) + guard
        operations = max(bits * 2, 1)
        required = max(min_guard, math.ceil(math.log10(operations)) + 1)
        if required <= guard:
            return LogGuardSettings(guard, frac_prec, bits, frac_prec + guard)
        guard = required

    frac_prec = target + guard
    bits = math.ceil(frac_prec * LOG_BINARY_PER_DECIMAL) + guard
    logger.warning("log_guard_not_settled", target=target, guard=guard, rounds=rounds)
    return LogGuardSettings(guard, frac_prec, bits, frac_prec + guard)


def _extract_log_integer_above_one(value: Decimal, base: Decimal, div_prec: int) -> tuple[int, Decimal]:
    """Integer part of log_base(value) for value >= 1 and base > 1.

    Returns:
        (exponent, remainder) with value = base**exponent * remainder and
        1 <= remainder < base
    """
    squares: list[tuple[Decimal, int]] = []
    square = base.clone()
    exponent = 1
    while square.le(value):
        squares.append((square, exponent))
        following = square.mul(square, div_prec)
        if following.le(square):
            break
        square = following
        exponent *= 2

    remainder = value.clone()
    result = 0
    for candidate, weight in reversed(squares):
        if remainder.ge(candidate):
            remainder.div_(candidate, div_prec)
            result += weight
    return result, remainder


def extract_log_integer(value: Decimal, base: Decimal, div_prec: int) -> tuple[int, Decimal]:
    """Split log_base(value) into an integer exponent and a remainder.

    Args:
        value: Positive argument
        base: Base greater than 1
        div_prec: Fractional digits for intermediate quotients

    Returns:
        (exponent, remainder) with value = base**exponent * remainder and
        1 <= remainder < base
    """
    one = Decimal(1)
    if value.eq(one):
        return 0, one
    if value.ge(one):
        return _extract_log_integer_above_one(value, base, div_prec)

    exponent, remainder = _extract_log_integer_above_one(one.div(value, div_prec), base, div_prec)
    if remainder.eq(one):
        return -exponent, one
    return -exponent - 1, one.div(remainder, div_prec).mul_(base)


def logarithm(value: Decimal, base: Decimal, digits: int) -> Decimal:
    """log_base(value) with `digits` requested fractional digits.

    The result keeps the guard digits of the computation (trailing zeros
    removed), so it carries at most digits + guard fractional digits.
    digits=0 rounds to an integer.

    Raises:
        LogDomainError: If value <= 0, base <= 0 or base == 1
    """
    if not value.is_positive():
        raise LogDomainError("Logarithm argument must be positive")
    if not base.is_positive():
        raise LogDomainError("Logarithm base must be positive")
    if base.eq(1):
        raise LogDomainError("Logarithm base cannot be one")

    settings = estimate_log_guard_settings(digits, base.scale, value.scale)
    div_prec = settings.div_prec

    base_below_one = base.lt(1)
    base_norm = Decimal(1).div(base, div_prec) if base_below_one else base

    int_exp, remainder = extract_log_integer(value, base_norm, div_prec)
    result = Decimal(int_exp)

    flags = 0
    for _ in range(settings.bits):
        remainder.mul_(remainder, div_prec)
        flags <<= 1
        if remainder.ge(base_norm):
            remainder.div_(base_norm, div_prec)
            flags |= 1
    if flags:
        result.add_(Decimal(flags * pow5_int(settings.bits), settings.bits))

    result.round_(settings.frac_prec if digits > 0 else 0)
    result.rescale_()
    return result.neg_(base_below_one)
