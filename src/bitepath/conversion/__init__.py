"""Unit conversion capabilities used by the normalization engine."""

from bitepath.conversion.base import (
    ConversionCapability,
    IncompatibleUnitsError,
    UnitConversionError,
    UnknownUnitError,
)
from bitepath.conversion.table import UnitTable, get_unit_table

__all__ = [
    "ConversionCapability",
    "IncompatibleUnitsError",
    "UnitConversionError",
    "UnitTable",
    "UnknownUnitError",
    "get_unit_table",
]
