"""Test helpers module for shared test utilities.

- constants: sample values shared by property-style tests
- factories: random value builders
"""

from tests.helpers.constants import SAMPLE_FLOATS, SAMPLE_STEPS, SAMPLE_VALUES
from tests.helpers.factories import random_decimal

__all__ = [
    "SAMPLE_FLOATS",
    "SAMPLE_STEPS",
    "SAMPLE_VALUES",
    "random_decimal",
]
