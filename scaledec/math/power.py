"""Exponentiation and root extraction.

Integer exponents use square-and-multiply. A fractional exponent 0.d1d2...dn
is expanded as the product of (base^(1/10^k))^dk, where each base^(1/10^k)
is obtained by taking the 10th root of the previous one. Roots use
Newton-Raphson at a padded precision.

All intermediate values are carried with guard digits beyond the requested
precision and rounded once at the end.
"""

from __future__ import annotations

import math

import structlog

from scaledec.config import DEFAULT_CONFIG
from scaledec.core import Decimal
from scaledec.errors import (
    EvenRootOfNegativeUndefined,
    FractionalExponentRequiresNonNegativeBase,
    UndefinedZeroNegativePower,
)
from scaledec.math.powers import digit_count

logger = structlog.get_logger()

__all__ = [
    "pow_int",
    "pow_frac",
    "power",
    "root",
    "estimate_pow_fractional_settings",
    "estimate_root_iter_settings",
    "log10_estimate",
]


def estimate_pow_fractional_settings(target: int, digits_count: int) -> tuple[int, int]:
    """Working precisions for a fractional exponent with `digits_count` digits.

    Returns:
        (guard_prec, root_prec): precision for the digit products and the
        (larger) precision for the chain of 10th roots
    """
    count = max(1, digits_count)
    guard_extra = max(6, math.ceil(math.log10(count * 4)) + 2)
    guard_prec = target + guard_extra
    root_prec = guard_prec + max(guard_extra, 6)
    return guard_prec, root_prec


def estimate_root_iter_settings(target: int, degree: int, order: int = 0) -> tuple[int, int]:
    """Newton working precision and stop threshold for a root.

    Args:
        target: Fractional digits of the result
        degree: Root degree
        order: Order of magnitude of the radicand. Below 1, x**(degree-1)
            is at least as large as the radicand, so -order extra digits
            keep its significant digits.

    Returns:
        (iter_prec, stop_shift): iterations run at iter_prec fractional
        digits and stop once successive iterates differ by at most
        10**-stop_shift
    """
    extra = max(12, digit_count(degree) + 4)
    return target + extra + max(0, -order), target + 2


def log10_estimate(value: Decimal) -> float:
    """Float estimate of log10(|value|), valid far outside the float range.

    Raises:
        OrderUndefinedForZero: If value is zero
    """
    order = value.order()
    mantissa = value.abs().shift10_(-order).number()
    return order + math.log10(mantissa)


def pow_int(base: Decimal, exponent: int, digits: int | None = None) -> Decimal:
    """base**exponent for exponent >= 0 by square-and-multiply.

    Each product is rounded to `digits` fractional digits when given,
    otherwise the result is exact. Non-positive exponents give 1.
    """
    if exponent <= 0:
        return Decimal(1)
    result = Decimal(1)
    factor = base.clone()
    while True:
        if exponent & 1:
            result.mul_(factor, digits)
        exponent >>= 1
        if exponent == 0:
            break
        factor.mul_(factor, digits)
    return result


def pow_frac(base: Decimal, fractional: Decimal, digits: int, digits_count: int) -> Decimal:
    """base**fractional for 0 <= fractional < 1 and base >= 0.

    Args:
        base: Non-negative base
        fractional: Exponent with exactly `digits_count` fractional digits
        digits: Fractional digits of the result
        digits_count: Number of fractional digits in the exponent

    Returns:
        The power rounded to `digits` fractional digits
    """
    if fractional.is_zero() or digits_count <= 0:
        return Decimal(1)
    if base.is_zero():
        return Decimal(0)
    guard_prec, root_prec = estimate_pow_fractional_settings(digits, digits_count)
    # Bases below 1 keep root_prec significant digits through the root chain
    root_prec += max(0, -base.order())
    exponent_digits = str(abs(fractional.coefficient)).rjust(digits_count, "0")

    progressive_root = base.round(root_prec)
    result = Decimal(1)
    for ch in exponent_digits:
        progressive_root = root(progressive_root, 10, root_prec)
        digit = int(ch)
        if digit == 0:
            continue
        result.mul_(pow_int(progressive_root, digit, guard_prec), guard_prec)
    return result.round_(digits)


def _magnitude_allowance(base: Decimal, exponent: Decimal) -> int:
    """Extra digits needed when the result is far from 1 in magnitude."""
    estimate = abs(exponent.number() * log10_estimate(base))
    if not math.isfinite(estimate):
        return 0
    return 2 * math.ceil(estimate) + 1


def power(base: Decimal, exponent: Decimal, digits: int) -> Decimal:
    """base**exponent rounded to `digits` fractional digits.

    A zero exponent gives exactly 1 (scale 0). A zero base with a
    non-negative exponent is returned unchanged, keeping its scale.

    Raises:
        UndefinedZeroNegativePower: If base is zero and exponent < 0
        FractionalExponentRequiresNonNegativeBase: If base < 0 and the
            exponent has a fractional part
    """
    if exponent.is_zero():
        return Decimal(1)
    if base.is_zero():
        if exponent.is_negative():
            raise UndefinedZeroNegativePower("Zero to negative exponent is undefined")
        return base.clone()

    negative_exponent = exponent.is_negative()
    int_part, frac_part = exponent.abs().split_()
    frac_part.rescale_()
    frac_count = frac_part.scale if not frac_part.is_zero() else 0
    if base.is_negative() and frac_count > 0:
        raise FractionalExponentRequiresNonNegativeBase("Fractional exponent requires non-negative base")

    int_exp = int_part.integer()
    guard = max(6, digit_count(int_exp) + 2)
    work_prec = digits + guard + _magnitude_allowance(base, exponent)
    if frac_count > 0:
        work_prec += max(4, frac_count)

    result = pow_int(base, int_exp, work_prec)
    if frac_count > 0:
        result.mul_(pow_frac(base, frac_part, work_prec, frac_count), work_prec)

    if negative_exponent:
        return Decimal(1).div_(result, digits)
    return result.round_(digits, force=True)


def _initial_root_guess(magnitude: Decimal, degree: int, iter_prec: int) -> Decimal:
    """Starting point for Newton iteration on a positive magnitude."""
    approx = magnitude.number()
    if math.isfinite(approx) and approx > 0:
        guess = math.pow(approx, 1 / degree)
        if math.isfinite(guess) and guess > 0:
            return Decimal(guess).round_(iter_prec, force=True)

    # magnitude = m * 10**order with 1 <= m < 10, so the root is
    # (m * 10**rem) ** (1/degree) * 10**quot
    order = magnitude.order()
    quot, rem = divmod(order, degree)
    mantissa = magnitude.abs().shift10_(-order).number()
    scaled = 10 ** ((math.log10(mantissa) + rem) / degree)
    logger.debug("root_guess_from_order", order=order, degree=degree)
    return Decimal(scaled).shift10_(quot).round_(iter_prec, force=True)


def root(value: Decimal, degree: int, digits: int) -> Decimal:
    """`degree`-th root of value rounded (forced) to `digits` fractional digits.

    Args:
        value: Radicand
        degree: Positive integer degree
        digits: Non-negative fractional digits of the result

    Raises:
        EvenRootOfNegativeUndefined: If value < 0 and degree is even
    """
    if degree == 1:
        if digits < value.scale:
            return value.clone()
        return value.trunc(digits, force=True)
    if value.is_zero():
        return value.clone()

    was_negative = value.is_negative()
    if was_negative and degree % 2 == 0:
        raise EvenRootOfNegativeUndefined("Even root of negative value is not defined")

    magnitude = value.abs()
    deg_minus_one = degree - 1
    iter_prec, stop_shift = estimate_root_iter_settings(digits, degree, magnitude.order())
    tolerance = Decimal(1, stop_shift)

    current = _initial_root_guess(magnitude, degree, iter_prec)
    if current.is_zero():
        # Root is below the working precision; start from the smallest step
        current = Decimal(1, iter_prec)

    for _ in range(DEFAULT_CONFIG.root_max_iterations):
        denominator = pow_int(current, deg_minus_one, iter_prec)
        if denominator.is_zero():
            break
        term = magnitude.div(denominator, iter_prec)
        following = current.mul(deg_minus_one, iter_prec).add_(term).div_(degree, iter_prec)
        converged = following.is_close_to(current, tolerance)
        current = following
        if converged:
            break
    else:
        logger.warning(
            "root_not_converged",
            degree=degree,
            digits=digits,
            iterations=DEFAULT_CONFIG.root_max_iterations,
        )

    current.round_(iter_prec, force=True)
    current.round_(digits, force=True)
    return current.neg_(was_negative)
