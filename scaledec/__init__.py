"""scaledec - arbitrary-precision decimal arithmetic."""

from scaledec.config import DEFAULT_CONFIG, DecimalConfig
from scaledec.core import Decimal, DecimalLike
from scaledec.errors import (
    DecimalError,
    DivisionByZero,
    EvenRootOfNegativeUndefined,
    FractionalExponentRequiresNonNegativeBase,
    InvalidDigits,
    InvalidNumber,
    InvalidRange,
    InvalidRootDegree,
    InvalidRoundingMode,
    InvalidStep,
    LogDomainError,
    NegativeTolerance,
    NonPositiveModulus,
    OrderUndefinedForZero,
    UndefinedZeroNegativePower,
)
from scaledec.functions import as_decimal, is_decimal, is_decimal_like, max, min, minmax, pow10
from scaledec.math.rounding import RoundingMode
from scaledec.models.payload import DecimalPayload
from scaledec.models.types import DecimalValue

__version__ = "0.1.0"
__all__ = [
    # Value type
    "Decimal",
    "DecimalLike",
    "RoundingMode",
    # Helpers
    "as_decimal",
    "is_decimal",
    "is_decimal_like",
    "pow10",
    "minmax",
    "min",
    "max",
    # Pydantic
    "DecimalPayload",
    "DecimalValue",
    # Configuration
    "DecimalConfig",
    "DEFAULT_CONFIG",
    # Errors
    "DecimalError",
    "InvalidNumber",
    "InvalidDigits",
    "InvalidRoundingMode",
    "DivisionByZero",
    "InvalidStep",
    "InvalidRange",
    "InvalidRootDegree",
    "EvenRootOfNegativeUndefined",
    "UndefinedZeroNegativePower",
    "FractionalExponentRequiresNonNegativeBase",
    "LogDomainError",
    "OrderUndefinedForZero",
    "NegativeTolerance",
    "NonPositiveModulus",
    "__version__",
]
