"""Text conversion for decimal values.

Parsing produces a (coefficient, scale) pair meaning coefficient * 10**-scale.
Formatting is the inverse and never uses exponent notation.
"""

from __future__ import annotations

import decimal
import math
import re

from scaledec.errors import InvalidNumber

__all__ = ["parse_decimal_string", "parse_float", "parse_py_decimal", "format_plain"]

_NUMBER_RE = re.compile(r"([+-]?)([0-9]*)(?:\.([0-9]*))?(?:[eE]([+-]?[0-9]+))?")


def parse_decimal_string(text: str) -> tuple[int, int]:
    """Parse plain or scientific notation into (coefficient, scale).

    Surrounding whitespace is ignored and leading zeros are dropped. The
    number of fractional digits written becomes the scale, so "1.50" keeps
    scale 2. An exponent shifts the scale: "1.5e2" is (15, -1).

    Raises:
        InvalidNumber: If text is empty, sign-only, lacks a mantissa or is
            otherwise malformed
    """
    trimmed = text.strip()
    match = _NUMBER_RE.fullmatch(trimmed)
    if match is None:
        raise InvalidNumber(f"Invalid number: '{text}'")
    sign, int_part, frac_part, exponent = match.groups()
    frac_part = frac_part or ""
    if int_part == "" and frac_part == "":
        raise InvalidNumber(f"Invalid number: '{text}'")

    combined = (int_part + frac_part).lstrip("0") or "0"
    try:
        coefficient = int(combined)
    except ValueError as err:
        # int() refuses digit strings beyond sys.get_int_max_str_digits()
        raise InvalidNumber(f"Invalid number: too many digits ({len(combined)})") from err
    if sign == "-":
        coefficient = -coefficient

    scale = len(frac_part)
    if exponent is not None:
        scale -= int(exponent)
    return coefficient, scale


def parse_float(value: float) -> tuple[int, int]:
    """Convert a float through its shortest round-trip text.

    repr() gives the shortest string that reads back as the same float, so
    0.1 becomes (1, 1) rather than the exact binary expansion.

    Raises:
        InvalidNumber: If value is NaN or infinite
    """
    if not math.isfinite(value):
        raise InvalidNumber(f"Invalid number: {value!r}")
    return parse_decimal_string(repr(value))


def parse_py_decimal(value: decimal.Decimal) -> tuple[int, int]:
    """Convert a standard library Decimal exactly from its digit tuple.

    Raises:
        InvalidNumber: If value is NaN or infinite
    """
    if not value.is_finite():
        raise InvalidNumber(f"Invalid number: {value!r}")
    sign, digits, exponent = value.as_tuple()
    coefficient = int("".join(str(d) for d in digits)) if digits else 0
    if sign:
        coefficient = -coefficient
    return coefficient, -int(exponent)


def format_plain(coefficient: int, scale: int) -> str:
    """Render (coefficient, scale) without an exponent.

    Exactly `scale` fractional digits are written when scale > 0; otherwise
    -scale zeros are appended to the integer.
    """
    if coefficient == 0:
        if scale <= 0:
            return "0"
        return "0." + "0" * scale

    sign = "-" if coefficient < 0 else ""
    digits = str(abs(coefficient))
    if scale <= 0:
        return f"{sign}{digits}{'0' * -scale}"

    padded = digits.rjust(scale + 1, "0")
    split = len(padded) - scale
    return f"{sign}{padded[:split]}.{padded[split:]}"
