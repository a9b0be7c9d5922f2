"""Pydantic models for decimal values.

The DecimalValue field type lives in scaledec.models.types; it is not
imported here because it depends on the Decimal class itself.
"""

from scaledec.models.payload import DecimalPayload

__all__ = ["DecimalPayload"]
