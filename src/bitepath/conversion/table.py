"""Hand-built SI/imperial conversion table."""

from functools import lru_cache
from types import MappingProxyType

from bitepath.conversion.base import (
    ConversionCapability,
    IncompatibleUnitsError,
    UnknownUnitError,
)

# =============================================================================
# Unit Conversion Tables
# =============================================================================

# Mass conversions (base unit: g)
MASS_UNITS: dict[str, float] = {
    "mcg": 0.000001,
    "mg": 0.001,
    "g": 1.0,
    "kg": 1000.0,
    "oz": 28.349523125,
    "lb": 453.59237,
}

# Volume conversions (base unit: ml), US customary
VOLUME_UNITS: dict[str, float] = {
    "ml": 1.0,
    "l": 1000.0,
    "tsp": 4.92892159375,
    "tbsp": 14.78676478125,
    "fl-oz": 29.5735295625,
    "cup": 236.5882365,
    "pnt": 473.176473,
    "qt": 946.352946,
    "gal": 3785.411784,
}

# Count conversions (base unit: ea)
EACH_UNITS: dict[str, float] = {
    "ea": 1.0,
    "dz": 12.0,
}

DEFAULT_FAMILIES: dict[str, dict[str, float]] = {
    "mass": MASS_UNITS,
    "volume": VOLUME_UNITS,
    "each": EACH_UNITS,
}


class UnitTable(ConversionCapability):
    """Conversion capability backed by per-family factor tables."""

    def __init__(self, families: dict[str, dict[str, float]] | None = None):
        families = families if families is not None else DEFAULT_FAMILIES
        self._families = MappingProxyType(
            {family: MappingProxyType(dict(factors)) for family, factors in families.items()}
        )
        index: dict[str, str] = {}
        for family, factors in self._families.items():
            for unit in factors:
                if unit in index:
                    raise ValueError(f"Unit {unit!r} listed in both {index[unit]} and {family}")
                index[unit] = family
        self._index = MappingProxyType(index)

    @property
    def name(self) -> str:
        return "unit-table"

    def family_of(self, unit: str) -> str:
        """Get the family name a unit belongs to."""
        try:
            return self._index[unit]
        except KeyError:
            raise UnknownUnitError(f"Unsupported unit {unit!r}", unit=unit) from None

    def possibilities(self, unit: str) -> list[str]:
        return list(self._families[self.family_of(unit)])

    def convert(self, value: float, from_unit: str, to_unit: str) -> float:
        from_family = self.family_of(from_unit)
        to_family = self.family_of(to_unit)
        if from_family != to_family:
            raise IncompatibleUnitsError(
                f"Cannot convert {from_family} unit {from_unit!r} to {to_family} unit {to_unit!r}",
                from_unit=from_unit,
                to_unit=to_unit,
            )

        factors = self._families[from_family]
        return value * factors[from_unit] / factors[to_unit]


@lru_cache
def get_unit_table() -> UnitTable:
    """Get the shared default unit table."""
    return UnitTable()
