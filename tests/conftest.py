"""Pytest configuration and fixtures."""

import random

import pytest


@pytest.fixture
def rng() -> random.Random:
    """Deterministic random source for property checks."""
    return random.Random(20240917)
