"""Pydantic field type for decimal values.

DecimalValue can be used directly as a model field annotation:

    class Quote(BaseModel):
        price: DecimalValue

Any decimal-like input validates to a Decimal; JSON output is the plain
string form so no precision is lost on the wire.
"""

from typing import Annotated, Any

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from scaledec.core import Decimal


def validate_decimal(value: Any) -> Decimal:
    """Convert a decimal-like value into a new Decimal.

    Existing Decimal instances are cloned so the model never aliases a
    mutable value owned by the caller.

    Raises:
        InvalidNumber: If value is not decimal-like (a ValueError, so
            pydantic reports it as a ValidationError)
    """
    if isinstance(value, Decimal):
        return value.clone()
    return Decimal(value)


class _DecimalSchema:
    """Core and JSON schema hooks for Decimal fields."""

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            validate_decimal,
            serialization=core_schema.plain_serializer_function_ser_schema(str, when_used="json"),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, _core_schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {"type": "string", "description": "Exact decimal number as a plain string"}


# Decimal validated from any decimal-like input, serialized as a string
DecimalValue = Annotated[Decimal, _DecimalSchema]
