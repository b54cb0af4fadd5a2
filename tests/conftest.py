"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import math

import pytest

from tagpack import Encoder

# Named constants as (JSON name, float64 value) pairs
CONSTANTS = [
    ('{ "name": "pi" }', math.pi),
    ('{ "name": "phi" }', 1.618033988749895),
    ('{ "name": "e" }', math.e),
    ('{ "name": "ln(2)" }', 0.6931471805599453),
]


@pytest.fixture
def encoder() -> Encoder:
    """Fresh encoder with the default configuration."""
    return Encoder()


@pytest.fixture
def sample_string() -> str:
    """Sample string payload for testing."""
    return "Hello, World!"


@pytest.fixture
def constants() -> list[tuple[str, float]]:
    """All named constants: pi, phi, e and ln(2)."""
    return list(CONSTANTS)


@pytest.fixture
def constants_encoder() -> Encoder:
    """Encoder holding the pi/phi scenario: string, float64, string, float64."""
    encoder = Encoder()
    for name, value in CONSTANTS[:2]:
        encoder.encode_string(name)
        encoder.encode_float64(value)
    return encoder
