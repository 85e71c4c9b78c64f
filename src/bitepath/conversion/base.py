"""Conversion capability interface consumed by the unit converter."""

from abc import ABC, abstractmethod


class UnitConversionError(Exception):
    """Base exception for conversion capability errors."""

    def __init__(self, message: str, unit: str | None = None):
        super().__init__(message)
        self.unit = unit


class UnknownUnitError(UnitConversionError):
    """Raised when a unit is not known to the capability."""


class IncompatibleUnitsError(UnitConversionError):
    """Raised when two units belong to different quantity families."""

    def __init__(self, message: str, from_unit: str, to_unit: str):
        super().__init__(message, unit=from_unit)
        self.from_unit = from_unit
        self.to_unit = to_unit


class ConversionCapability(ABC):
    """Abstract lookup that lists and converts between units of a family."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Return capability name for logging and identification."""
        pass

    @abstractmethod
    def possibilities(self, unit: str) -> list[str]:
        """
        List every unit reachable from the given unit.

        Raises:
            UnknownUnitError: If the unit is not known.
        """
        pass

    @abstractmethod
    def convert(self, value: float, from_unit: str, to_unit: str) -> float:
        """
        Convert a value between two units of the same family.

        Raises:
            UnknownUnitError: If either unit is not known.
            IncompatibleUnitsError: If the units are in different families.
        """
        pass
