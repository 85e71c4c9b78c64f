"""Pytest configuration and shared fixtures."""

import os

import pytest

from bitepath.config import get_settings
from bitepath.conversion import ConversionCapability, IncompatibleUnitsError, UnknownUnitError
from bitepath.logging_config import clear_context

# =============================================================================
# Fake Conversion Capability
# =============================================================================


class FakeCapability(ConversionCapability):
    """Small in-memory capability with round-number factors."""

    FAMILIES = {
        "mass": {"g": 1.0, "kg": 1000.0, "lb": 500.0, "oz": 30.0},
        "volume": {"ml": 1.0, "l": 1000.0, "fl-oz": 30.0, "cup": 250.0},
        "length": {"cm": 1.0, "in": 2.5},
    }

    def __init__(self):
        self.calls: list[tuple] = []

    @property
    def name(self) -> str:
        return "fake"

    def _family(self, unit: str) -> str:
        for family, factors in self.FAMILIES.items():
            if unit in factors:
                return family
        raise UnknownUnitError(f"Unsupported unit {unit!r}", unit=unit)

    def possibilities(self, unit: str) -> list[str]:
        self.calls.append(("possibilities", unit))
        return list(self.FAMILIES[self._family(unit)])

    def convert(self, value: float, from_unit: str, to_unit: str) -> float:
        self.calls.append(("convert", value, from_unit, to_unit))
        family = self._family(from_unit)
        if family != self._family(to_unit):
            raise IncompatibleUnitsError("mismatch", from_unit=from_unit, to_unit=to_unit)
        factors = self.FAMILIES[family]
        return value * factors[from_unit] / factors[to_unit]


class BrokenCapability(FakeCapability):
    """Capability whose conversions always fail after family lookup."""

    def convert(self, value: float, from_unit: str, to_unit: str) -> float:
        raise UnknownUnitError("conversion table unavailable", unit=from_unit)


class KeyErrorCapability(FakeCapability):
    """Capability with a lookup bug that leaks a plain KeyError."""

    def convert(self, value: float, from_unit: str, to_unit: str) -> float:
        raise KeyError(from_unit)


@pytest.fixture
def fake_capability():
    """Fake conversion capability that records calls."""
    return FakeCapability()


@pytest.fixture
def broken_capability():
    """Capability that raises on every conversion."""
    return BrokenCapability()


@pytest.fixture
def key_error_capability():
    """Capability that raises a non-conversion error."""
    return KeyErrorCapability()


# =============================================================================
# Settings and Logging Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Drop cached settings and BITEPATH_* variables around each test."""
    for key in list(os.environ):
        if key.startswith("BITEPATH_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def reset_logging_context():
    """Clear user/meal logging context between tests."""
    clear_context()
    yield
    clear_context()
