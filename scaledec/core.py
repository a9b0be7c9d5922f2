"""Arbitrary-precision decimal value type.

A Decimal is the exact value coefficient * 10**-scale, where both parts are
Python ints. The pair is not kept in lowest terms: 1.50 is (150, 2) and
renders with two fractional digits. Use rescale() to strip trailing zeros.

Every operation exists in two forms:
- name_(...) mutates the receiver and returns it (for chaining)
- name(...) clones first and returns a new instance

Both forms give identical numeric results. In-place operations validate
their arguments and compute before writing, so a failed call leaves the
receiver unchanged.
"""

from __future__ import annotations

import decimal
from collections.abc import Mapping
from typing import Union

from scaledec.config import DEFAULT_CONFIG
from scaledec.errors import (
    DivisionByZero,
    InvalidDigits,
    InvalidNumber,
    InvalidRange,
    InvalidRootDegree,
    InvalidStep,
    NegativeTolerance,
    NonPositiveModulus,
    OrderUndefinedForZero,
)
from scaledec.math.powers import digit_count, div_trunc, pow10_int
from scaledec.math.rounding import RoundingMode, coerce_mode, divide_rounded
from scaledec.models.payload import DecimalPayload
from scaledec.parsing import format_plain, parse_decimal_string, parse_float, parse_py_decimal

__all__ = ["Decimal", "DecimalLike"]

DecimalLike = Union[int, float, str, "Decimal", DecimalPayload, Mapping, decimal.Decimal]


def _ensure_integer(
    value: int | float,
    message: str = "Digits must be an integer",
    error: type[Exception] = InvalidDigits,
) -> int:
    """Accept an int or an integral float, reject everything else."""
    if isinstance(value, bool):
        raise error(message)
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise error(message)


def _ensure_digits(value: int | float | None) -> int:
    """Digit count for division-like operations; negatives clamp to zero."""
    if value is None:
        return DEFAULT_CONFIG.division_digits
    return max(0, _ensure_integer(value))


def _is_payload_mapping(value: Mapping) -> bool:
    coefficient = value.get("coefficient")
    scale = value.get("scale")
    return (
        isinstance(coefficient, int)
        and not isinstance(coefficient, bool)
        and isinstance(scale, int)
        and not isinstance(scale, bool)
    )


def _is_decimal_like(value: object) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, (Decimal, int, float, str, DecimalPayload, decimal.Decimal)):
        return True
    if isinstance(value, Mapping):
        return _is_payload_mapping(value)
    return False


def _coerce(value: DecimalLike) -> Decimal:
    """Return value as a Decimal, reusing existing instances."""
    if isinstance(value, Decimal):
        return value
    if value is None:
        raise InvalidNumber("Decimal value required, got None")
    return Decimal(value)


def _coerce_optional(value: DecimalLike | None) -> Decimal | None:
    if value is None:
        return None
    return _coerce(value)


def _align(a: Decimal, b: Decimal) -> tuple[int, int, int]:
    """Bring two values to the larger scale.

    Returns:
        (a_coefficient, b_coefficient, scale)
    """
    scale = max(a.scale, b.scale)
    return (
        a.coefficient * pow10_int(scale - a.scale),
        b.coefficient * pow10_int(scale - b.scale),
        scale,
    )


class Decimal:
    """Exact base-10 number stored as (coefficient, scale).

    Value is coefficient * 10**-scale. Example: 12.345 is stored as
    coefficient=12345, scale=3; 1200 may be stored as (12, -2).

    Instances are mutable (see the name_ methods) and therefore unhashable.

    Attributes:
        coefficient: Integer significand
        scale: Number of implied fractional digits (may be negative)
    """

    __slots__ = ("coefficient", "scale")
    __hash__ = None  # type: ignore[assignment]  # Mutable, so unhashable

    coefficient: int
    scale: int

    def __init__(self, value: DecimalLike = 0, scale: int | None = None) -> None:
        """Create a Decimal from any decimal-like input.

        Args:
            value: int, float, str, Decimal, DecimalPayload, mapping with
                integer "coefficient" and "scale", or decimal.Decimal
            scale: Explicit scale, only allowed with an int coefficient

        None is not a value here; use as_decimal() to pass None through.

        Raises:
            InvalidNumber: If the input is malformed, non-finite or of an
                unsupported type
        """
        if isinstance(value, bool):
            raise InvalidNumber("Invalid input type for Decimal: bool")
        if scale is not None and not isinstance(value, int):
            raise InvalidNumber("Scale can only be given with an integer coefficient")

        if isinstance(value, Decimal):
            coefficient, parsed_scale = value.coefficient, value.scale
        elif isinstance(value, int):
            coefficient = value
            parsed_scale = 0 if scale is None else _ensure_integer(scale, "Scale must be an integer", InvalidNumber)
        elif isinstance(value, float):
            coefficient, parsed_scale = parse_float(value)
        elif isinstance(value, str):
            coefficient, parsed_scale = parse_decimal_string(value)
        elif isinstance(value, DecimalPayload):
            coefficient, parsed_scale = value.coefficient, value.scale
        elif isinstance(value, decimal.Decimal):
            coefficient, parsed_scale = parse_py_decimal(value)
        elif isinstance(value, Mapping) and _is_payload_mapping(value):
            coefficient, parsed_scale = value["coefficient"], value["scale"]
        else:
            raise InvalidNumber(f"Invalid input type for Decimal: {type(value).__name__}")

        self.coefficient = coefficient
        self.scale = parsed_scale

    # --- Copying and internal state ---

    def clone(self) -> Decimal:
        """Independent copy with the same coefficient and scale."""
        return Decimal(self.coefficient, self.scale)

    def _set(self, coefficient: int, scale: int = 0) -> Decimal:
        self.coefficient = coefficient
        self.scale = scale
        return self

    def _divide_(self, divisor: Decimal, target: int, mode: RoundingMode) -> Decimal:
        """Set self to self / divisor with exactly `target` fractional digits."""
        numerator = self.coefficient
        denominator = divisor.coefficient

        shift = divisor.scale + target - self.scale
        if shift >= 0:
            numerator *= pow10_int(shift)
        else:
            denominator *= pow10_int(-shift)

        return self._set(divide_rounded(numerator, denominator, mode), target)

    def _rescale_(self, target: int, mode: RoundingMode) -> Decimal:
        if self.coefficient == 0:
            self.scale = target
            return self
        if target == self.scale:
            return self
        if target > self.scale:
            return self._set(self.coefficient * pow10_int(target - self.scale), target)
        quotient = divide_rounded(self.coefficient, pow10_int(self.scale - target), mode)
        return self._set(quotient, target)

    def _strip_trailing_zeros_(self) -> Decimal:
        if self.coefficient == 0:
            self.scale = 0
            return self
        while self.scale > 0 and self.coefficient % 10 == 0:
            self.coefficient //= 10
            self.scale -= 1
        return self

    # --- Rounding and scaling ---

    def round_(self, digits: int = 0, force: bool = False) -> Decimal:
        """Round half away from zero to `digits` fractional digits.

        Values that already have no more than `digits` fractional digits are
        left alone unless force is set, in which case the scale is widened
        to exactly `digits`. Negative digits round to tens, hundreds, ...
        """
        target = _ensure_integer(digits)
        if not force and self.scale <= target:
            return self
        return self._rescale_(target, RoundingMode.ROUND)

    def round(self, digits: int = 0, force: bool = False) -> Decimal:
        return self.clone().round_(digits, force)

    def floor_(self, digits: int = 0, force: bool = False) -> Decimal:
        """Round toward negative infinity; see round_ for digits and force."""
        target = _ensure_integer(digits)
        if not force and self.scale <= target:
            return self
        return self._rescale_(target, RoundingMode.FLOOR)

    def floor(self, digits: int = 0, force: bool = False) -> Decimal:
        return self.clone().floor_(digits, force)

    def ceil_(self, digits: int = 0, force: bool = False) -> Decimal:
        """Round toward positive infinity; see round_ for digits and force."""
        target = _ensure_integer(digits)
        if not force and self.scale <= target:
            return self
        return self._rescale_(target, RoundingMode.CEIL)

    def ceil(self, digits: int = 0, force: bool = False) -> Decimal:
        return self.clone().ceil_(digits, force)

    def trunc_(self, digits: int = 0, force: bool = False) -> Decimal:
        """Round toward zero; see round_ for digits and force."""
        target = _ensure_integer(digits)
        if not force and self.scale <= target:
            return self
        return self._rescale_(target, RoundingMode.TRUNC)

    def trunc(self, digits: int = 0, force: bool = False) -> Decimal:
        return self.clone().trunc_(digits, force)

    def rescale_(self, digits: int | None = None, mode: RoundingMode | str = RoundingMode.TRUNC) -> Decimal:
        """Change the scale to `digits`, or strip trailing zeros when omitted.

        Widening the scale is exact. Narrowing rounds per mode. Stripping
        never goes below scale 0, and zero always becomes scale 0.
        """
        if digits is None:
            return self._strip_trailing_zeros_()
        target = _ensure_integer(digits)
        return self._rescale_(target, coerce_mode(mode))

    def rescale(self, digits: int | None = None, mode: RoundingMode | str = RoundingMode.TRUNC) -> Decimal:
        return self.clone().rescale_(digits, mode)

    # --- Stepped alignment ---

    def round_by_(self, step: DecimalLike, mode: RoundingMode | str = RoundingMode.ROUND) -> Decimal:
        """Align to a multiple of |step| using the given rounding mode.

        Example: Decimal("5.62").round_by_("0.25") gives 5.50.

        Raises:
            InvalidStep: If step is zero
        """
        multiple = _coerce(step).abs()
        rounding = coerce_mode(mode)
        if multiple.is_zero():
            raise InvalidStep("Cannot align to zero step")
        return self.div_(multiple, 0, rounding).mul_(multiple)

    def round_by(self, step: DecimalLike, mode: RoundingMode | str = RoundingMode.ROUND) -> Decimal:
        return self.clone().round_by_(step, mode)

    def floor_by_(self, step: DecimalLike) -> Decimal:
        return self.round_by_(step, RoundingMode.FLOOR)

    def floor_by(self, step: DecimalLike) -> Decimal:
        return self.clone().floor_by_(step)

    def ceil_by_(self, step: DecimalLike) -> Decimal:
        return self.round_by_(step, RoundingMode.CEIL)

    def ceil_by(self, step: DecimalLike) -> Decimal:
        return self.clone().ceil_by_(step)

    def trunc_by_(self, step: DecimalLike) -> Decimal:
        return self.round_by_(step, RoundingMode.TRUNC)

    def trunc_by(self, step: DecimalLike) -> Decimal:
        return self.clone().trunc_by_(step)

    def split_(
        self, digits: int | None = None, mode: RoundingMode | str = RoundingMode.FLOOR
    ) -> tuple[Decimal, Decimal]:
        """Split into (aligned, remainder) at `digits` fractional digits.

        self becomes the aligned part. aligned + remainder always equals the
        original value exactly.
        """
        target = 0 if digits is None else _ensure_integer(digits)
        rounding = coerce_mode(mode)
        original = self.clone()
        self._rescale_(target, rounding)
        return self, original.sub_(self)

    def split(
        self, digits: int | None = None, mode: RoundingMode | str = RoundingMode.FLOOR
    ) -> tuple[Decimal, Decimal]:
        return self.clone().split_(digits, mode)

    def split_by_(
        self, step: DecimalLike, mode: RoundingMode | str = RoundingMode.FLOOR
    ) -> tuple[Decimal, Decimal]:
        """Split into (multiple of step, remainder); self becomes the multiple."""
        original = self.clone()
        self.round_by_(step, mode)
        return self, original.sub_(self)

    def split_by(
        self, step: DecimalLike, mode: RoundingMode | str = RoundingMode.FLOOR
    ) -> tuple[Decimal, Decimal]:
        return self.clone().split_by_(step, mode)

    # --- Sign and absolute value ---

    def neg_(self, condition: bool = True) -> Decimal:
        """Negate in place when condition is true."""
        if condition:
            self.coefficient = -self.coefficient
        return self

    def neg(self, condition: bool = True) -> Decimal:
        return self.clone().neg_(condition)

    def abs_(self) -> Decimal:
        if self.coefficient < 0:
            self.coefficient = -self.coefficient
        return self

    def abs(self) -> Decimal:
        return self.clone().abs_()

    def is_zero(self) -> bool:
        return self.coefficient == 0

    def is_positive(self) -> bool:
        return self.coefficient > 0

    def is_negative(self) -> bool:
        return self.coefficient < 0

    def sign(self) -> Decimal:
        """-1, 0 or 1 as a Decimal with scale 0."""
        return Decimal((self.coefficient > 0) - (self.coefficient < 0))

    # --- Arithmetic ---

    def add_(self, v: DecimalLike) -> Decimal:
        """Exact addition; the result takes the larger scale."""
        a, b, scale = _align(self, _coerce(v))
        return self._set(a + b, scale)

    def add(self, v: DecimalLike) -> Decimal:
        return self.clone().add_(v)

    def sub_(self, v: DecimalLike) -> Decimal:
        """Exact subtraction; the result takes the larger scale."""
        a, b, scale = _align(self, _coerce(v))
        return self._set(a - b, scale)

    def sub(self, v: DecimalLike) -> Decimal:
        return self.clone().sub_(v)

    def mul_(self, v: DecimalLike, digits: int | None = None) -> Decimal:
        """Exact multiplication (scales add), optionally rounded to `digits`."""
        value = _coerce(v)
        target = None if digits is None else _ensure_integer(digits)
        self._set(self.coefficient * value.coefficient, self.scale + value.scale)
        if target is not None:
            self.round_(target)
        return self

    def mul(self, v: DecimalLike, digits: int | None = None) -> Decimal:
        return self.clone().mul_(v, digits)

    def shift10_(self, exponent: int) -> Decimal:
        """Multiply by 10**exponent by moving the decimal point."""
        shift = _ensure_integer(exponent, "Shift amount must be an integer")
        self.scale -= shift
        return self

    def shift10(self, exponent: int) -> Decimal:
        return self.clone().shift10_(exponent)

    def inverse_(self, digits: int | None = None) -> Decimal:
        """Replace self with 1 / self rounded to `digits` fractional digits.

        Raises:
            DivisionByZero: If self is zero
        """
        target = _ensure_digits(digits)
        if self.is_zero():
            raise DivisionByZero("Division by zero")
        divisor = self.clone()
        return self._set(1)._divide_(divisor, target, RoundingMode.ROUND)

    def inverse(self, digits: int | None = None) -> Decimal:
        return self.clone().inverse_(digits)

    def div_(
        self,
        v: DecimalLike,
        digits: int | None = None,
        mode: RoundingMode | str = RoundingMode.ROUND,
    ) -> Decimal:
        """Divide to exactly `digits` fractional digits.

        Args:
            v: Divisor
            digits: Fractional digits of the quotient. When omitted the
                default (18) is used and trailing zeros are stripped.
                Negative values are treated as zero.
            mode: Rounding applied to the discarded digits

        Raises:
            DivisionByZero: If the divisor is zero
        """
        strip_trailing_zeros = digits is None
        target = _ensure_digits(digits)
        rounding = coerce_mode(mode)
        divisor = _coerce(v)
        if divisor.is_zero():
            raise DivisionByZero("Division by zero")
        if self.is_zero():
            return self

        self._divide_(divisor, target, rounding)
        if strip_trailing_zeros:
            self._strip_trailing_zeros_()
        return self

    def div(
        self,
        v: DecimalLike,
        digits: int | None = None,
        mode: RoundingMode | str = RoundingMode.ROUND,
    ) -> Decimal:
        return self.clone().div_(v, digits, mode)

    # --- Modulo and bounding ---

    def mod_(self, v: DecimalLike) -> Decimal:
        """Remainder of truncating division; the sign follows the dividend.

        Raises:
            DivisionByZero: If v is zero
        """
        value = _coerce(v)
        if value.is_zero():
            raise DivisionByZero("Division by zero")
        a, b, scale = _align(self, value)
        return self._set(a - div_trunc(a, b) * b, scale)

    def mod(self, v: DecimalLike) -> Decimal:
        return self.clone().mod_(v)

    def mod_positive_(self, v: DecimalLike) -> Decimal:
        """Remainder in [0, v).

        Raises:
            DivisionByZero: If v is zero
            NonPositiveModulus: If v is negative
        """
        divisor = _coerce(v)
        if divisor.is_zero():
            raise DivisionByZero("Division by zero")
        if divisor.is_negative():
            raise NonPositiveModulus("Modulo divisor must be positive")
        self.mod_(divisor)
        if self.is_negative():
            self.add_(divisor)
        return self

    def mod_positive(self, v: DecimalLike) -> Decimal:
        return self.clone().mod_positive_(v)

    def clamp_(self, min_value: DecimalLike | None, max_value: DecimalLike | None) -> Decimal:
        """Bound self to [min_value, max_value]; None means unbounded.

        Raises:
            InvalidRange: If min_value > max_value
        """
        lower = _coerce_optional(min_value)
        upper = _coerce_optional(max_value)
        if lower is not None and upper is not None and lower.gt(upper):
            raise InvalidRange("Invalid clamp range")
        if lower is not None and self.lt(lower):
            return self._set(lower.coefficient, lower.scale)
        if upper is not None and self.gt(upper):
            return self._set(upper.coefficient, upper.scale)
        return self

    def clamp(self, min_value: DecimalLike | None, max_value: DecimalLike | None) -> Decimal:
        return self.clone().clamp_(min_value, max_value)

    # --- Comparison ---

    def cmp(self, v: DecimalLike) -> int:
        """Return -1, 0 or 1 as self is less than, equal to or greater than v."""
        a, b, _ = _align(self, _coerce(v))
        return (a > b) - (a < b)

    def eq(self, v: DecimalLike) -> bool:
        return self.cmp(v) == 0

    def neq(self, v: DecimalLike) -> bool:
        return self.cmp(v) != 0

    def lt(self, v: DecimalLike) -> bool:
        return self.cmp(v) < 0

    def gt(self, v: DecimalLike) -> bool:
        return self.cmp(v) > 0

    def le(self, v: DecimalLike) -> bool:
        return self.cmp(v) <= 0

    def ge(self, v: DecimalLike) -> bool:
        return self.cmp(v) >= 0

    def between(self, min_value: DecimalLike | None, max_value: DecimalLike | None) -> bool:
        """Inclusive range check; None bounds are open.

        Raises:
            InvalidRange: If min_value > max_value
        """
        lower = _coerce_optional(min_value)
        upper = _coerce_optional(max_value)
        if lower is not None and upper is not None and lower.gt(upper):
            raise InvalidRange("Invalid between range")
        if lower is not None and self.lt(lower):
            return False
        if upper is not None and self.gt(upper):
            return False
        return True

    def is_close_to(self, v: DecimalLike, tolerance: DecimalLike) -> bool:
        """True if |self - v| <= tolerance.

        Raises:
            NegativeTolerance: If tolerance is negative
        """
        limit = _coerce(tolerance)
        if limit.is_negative():
            raise NegativeTolerance("Tolerance must be non-negative")
        return self.sub(v).abs_().le(limit)

    # --- Powers, roots and logarithms ---

    def pow_(self, exponent: DecimalLike, digits: int | None = None) -> Decimal:
        """Raise to a decimal exponent, rounded to `digits` fractional digits.

        Integer exponents use square-and-multiply; a fractional part is
        expanded digit by digit through repeated 10th roots. A zero exponent
        gives exactly 1 (scale 0), even for a zero base.

        Raises:
            UndefinedZeroNegativePower: If self is zero and exponent < 0
            FractionalExponentRequiresNonNegativeBase: If self < 0 and the
                exponent has a fractional part
        """
        from scaledec.math.power import power

        precision = _ensure_digits(digits)
        result = power(self, _coerce(exponent), precision)
        return self._set(result.coefficient, result.scale)

    def pow(self, exponent: DecimalLike, digits: int | None = None) -> Decimal:
        return self.clone().pow_(exponent, digits)

    def root_(self, degree: int, digits: int | None = None) -> Decimal:
        """Replace self with its `degree`-th root (Newton-Raphson).

        Raises:
            InvalidRootDegree: If degree is not a positive integer
            EvenRootOfNegativeUndefined: If self < 0 and degree is even
        """
        from scaledec.math.power import root

        n = _ensure_integer(degree, "Root degree must be an integer", InvalidRootDegree)
        if n <= 0:
            raise InvalidRootDegree("Invalid root degree")
        precision = _ensure_digits(digits)
        result = root(self, n, precision)
        return self._set(result.coefficient, result.scale)

    def root(self, degree: int, digits: int | None = None) -> Decimal:
        return self.clone().root_(degree, digits)

    def sqrt_(self, digits: int | None = None) -> Decimal:
        return self.root_(2, digits)

    def sqrt(self, digits: int | None = None) -> Decimal:
        return self.clone().sqrt_(digits)

    def log_(self, base: DecimalLike, digits: int | None = None) -> Decimal:
        """Replace self with its logarithm to `base`.

        The result carries the guard digits used internally (at most
        digits + guard fractional digits); digits=0 rounds to an integer.

        Raises:
            LogDomainError: If self <= 0, base <= 0 or base == 1
        """
        from scaledec.math.logarithm import logarithm

        precision = _ensure_digits(digits)
        result = logarithm(self, _coerce(base), precision)
        return self._set(result.coefficient, result.scale)

    def log(self, base: DecimalLike, digits: int | None = None) -> Decimal:
        return self.clone().log_(base, digits)

    def order(self) -> int:
        """floor(log10(|self|)): position of the leading significant digit.

        Raises:
            OrderUndefinedForZero: If self is zero
        """
        if self.is_zero():
            raise OrderUndefinedForZero("order undefined for 0")
        return digit_count(self.coefficient) - 1 - self.scale

    # --- Conversion ---

    def to_fixed(self, fraction_digits: int) -> str:
        """Round half away from zero and render exactly `fraction_digits` digits."""
        message = "Fraction digits must be a non-negative integer"
        target = _ensure_integer(fraction_digits, message)
        if target < 0:
            raise InvalidDigits(message)
        return str(self.round(target, True))

    def to_string(self) -> str:
        return format_plain(self.coefficient, self.scale)

    def number(self) -> float:
        """Nearest float (may lose precision, may overflow to inf)."""
        if self.coefficient == 0:
            return 0.0
        return float(f"{self.coefficient}e{-self.scale}")

    def integer(self) -> int:
        """Integer part, truncated toward zero."""
        if self.scale <= 0:
            return self.coefficient * pow10_int(-self.scale)
        return div_trunc(self.coefficient, pow10_int(self.scale))

    def to_payload(self) -> DecimalPayload:
        return DecimalPayload(coefficient=self.coefficient, scale=self.scale)

    def to_py_decimal(self) -> decimal.Decimal:
        """Exact standard library Decimal with the same digits and exponent."""
        digits = tuple(int(ch) for ch in str(abs(self.coefficient)))
        return decimal.Decimal((int(self.coefficient < 0), digits, -self.scale))

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Decimal('{self.to_string()}')"

    def __float__(self) -> float:
        return self.number()

    def __int__(self) -> int:
        return self.integer()

    def __bool__(self) -> bool:
        return self.coefficient != 0

    # --- Operators ---

    def __add__(self, other: object) -> Decimal:
        if not _is_decimal_like(other):
            return NotImplemented
        return self.add(other)  # type: ignore[arg-type]

    def __radd__(self, other: object) -> Decimal:
        if not _is_decimal_like(other):
            return NotImplemented
        return Decimal(other).add_(self)  # type: ignore[arg-type]

    def __sub__(self, other: object) -> Decimal:
        if not _is_decimal_like(other):
            return NotImplemented
        return self.sub(other)  # type: ignore[arg-type]

    def __rsub__(self, other: object) -> Decimal:
        if not _is_decimal_like(other):
            return NotImplemented
        return Decimal(other).sub_(self)  # type: ignore[arg-type]

    def __mul__(self, other: object) -> Decimal:
        if not _is_decimal_like(other):
            return NotImplemented
        return self.mul(other)  # type: ignore[arg-type]

    def __rmul__(self, other: object) -> Decimal:
        if not _is_decimal_like(other):
            return NotImplemented
        return Decimal(other).mul_(self)  # type: ignore[arg-type]

    def __truediv__(self, other: object) -> Decimal:
        if not _is_decimal_like(other):
            return NotImplemented
        return self.div(other)  # type: ignore[arg-type]

    def __rtruediv__(self, other: object) -> Decimal:
        if not _is_decimal_like(other):
            return NotImplemented
        return Decimal(other).div_(self)  # type: ignore[arg-type]

    def __mod__(self, other: object) -> Decimal:
        if not _is_decimal_like(other):
            return NotImplemented
        return self.mod(other)  # type: ignore[arg-type]

    def __rmod__(self, other: object) -> Decimal:
        if not _is_decimal_like(other):
            return NotImplemented
        return Decimal(other).mod_(self)  # type: ignore[arg-type]

    def __pow__(self, other: object, modulo: object = None) -> Decimal:
        if modulo is not None or not _is_decimal_like(other):
            return NotImplemented
        return self.pow(other)  # type: ignore[arg-type]

    def __rpow__(self, other: object) -> Decimal:
        if not _is_decimal_like(other):
            return NotImplemented
        return Decimal(other).pow_(self)  # type: ignore[arg-type]

    def __neg__(self) -> Decimal:
        return self.neg()

    def __pos__(self) -> Decimal:
        return self.clone()

    def __abs__(self) -> Decimal:
        return self.abs()

    def _compare(self, other: object) -> int | None:
        if not _is_decimal_like(other):
            return None
        try:
            return self.cmp(other)  # type: ignore[arg-type]
        except InvalidNumber:
            return None

    def __eq__(self, other: object) -> bool:
        result = self._compare(other)
        if result is None:
            return NotImplemented
        return result == 0

    def __ne__(self, other: object) -> bool:
        result = self._compare(other)
        if result is None:
            return NotImplemented
        return result != 0

    def __lt__(self, other: object) -> bool:
        result = self._compare(other)
        if result is None:
            return NotImplemented
        return result < 0

    def __le__(self, other: object) -> bool:
        result = self._compare(other)
        if result is None:
            return NotImplemented
        return result <= 0

    def __gt__(self, other: object) -> bool:
        result = self._compare(other)
        if result is None:
            return NotImplemented
        return result > 0

    def __ge__(self, other: object) -> bool:
        result = self._compare(other)
        if result is None:
            return NotImplemented
        return result >= 0
