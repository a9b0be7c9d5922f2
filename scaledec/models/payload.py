"""Structured (coefficient, scale) payload."""

from pydantic import BaseModel, ConfigDict, StrictInt


class DecimalPayload(BaseModel):
    """Exact decimal value as coefficient * 10**-scale.

    Produced by Decimal.to_payload() and accepted by the Decimal constructor,
    so a value can be taken apart and rebuilt without going through text.
    """

    model_config = ConfigDict(frozen=True)

    coefficient: StrictInt
    scale: StrictInt
