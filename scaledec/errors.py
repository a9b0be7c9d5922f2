"""Decimal error classes.

Every failure raised by the engine derives from DecimalError. Errors caused
by malformed arguments also derive from ValueError so callers that only
care about "bad input" can catch that.
"""


class DecimalError(ArithmeticError):
    """Base error for decimal operations."""

    pass


class InvalidNumber(DecimalError, ValueError):
    """Input cannot be parsed or converted to a decimal value."""

    pass


class InvalidDigits(DecimalError, ValueError):
    """Digit count or shift amount is not an integer."""

    pass


class InvalidRoundingMode(DecimalError, ValueError):
    """Rounding mode is not one of trunc, floor, ceil, round."""

    pass


class DivisionByZero(DecimalError, ZeroDivisionError):
    """Division, modulo or inversion by a zero-valued operand."""

    pass


class InvalidStep(DecimalError, ValueError):
    """Stepped alignment requested with a zero step."""

    pass


class InvalidRange(DecimalError, ValueError):
    """Lower bound is greater than upper bound."""

    pass


class InvalidRootDegree(DecimalError, ValueError):
    """Root degree is not a positive integer."""

    pass


class EvenRootOfNegativeUndefined(DecimalError):
    """Even-degree root of a negative value."""

    pass


class UndefinedZeroNegativePower(DecimalError):
    """Zero raised to a negative exponent."""

    pass


class FractionalExponentRequiresNonNegativeBase(DecimalError):
    """Negative base raised to an exponent with a fractional part."""

    pass


class LogDomainError(DecimalError):
    """Logarithm of a non-positive value, or to a non-positive base or base 1."""

    pass


class OrderUndefinedForZero(DecimalError):
    """Order of magnitude requested for zero."""

    pass


class NegativeTolerance(DecimalError, ValueError):
    """Closeness check given a negative tolerance."""

    pass


class NonPositiveModulus(DecimalError, ValueError):
    """Positive modulo requested with a negative divisor."""

    pass
