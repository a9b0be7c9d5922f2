"""Numerical building blocks for the decimal engine.

- powers: cached powers of 5 and 10, digit counting, truncating division
- rounding: rounding modes and rounded integer division
- power: integer/fractional exponentiation and Newton roots
- logarithm: arbitrary-base logarithm

power and logarithm depend on the Decimal class and are imported on use.
"""

from scaledec.math.powers import digit_count, div_trunc, pow5_int, pow10_int
from scaledec.math.rounding import RoundingMode, coerce_mode, divide_rounded

__all__ = [
    "RoundingMode",
    "coerce_mode",
    "digit_count",
    "div_trunc",
    "divide_rounded",
    "pow5_int",
    "pow10_int",
]
