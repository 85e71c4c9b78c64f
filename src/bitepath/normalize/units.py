"""Imperial to metric unit conversion."""

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext
from enum import Enum

from bitepath.config import UnitSystem
from bitepath.conversion import ConversionCapability, get_unit_table
from bitepath.logging_config import get_logger

logger = get_logger(__name__)


# =============================================================================
# Unit Vocabulary
# =============================================================================

# Kitchen measures users expect to keep seeing, even in metric mode
RETAIN_UNITS: frozenset[str] = frozenset(
    {
        "cup",
        "cups",
        "tsp",
        "teaspoon",
        "teaspoons",
        "tbsp",
        "tablespoon",
        "tablespoons",
    }
)

# Spellings mapped onto the capability's canonical abbreviations
UNIT_SYNONYMS: dict[str, str] = {
    # Fluid ounce
    "fl oz": "fl-oz",
    "fl. oz": "fl-oz",
    "fl. oz.": "fl-oz",
    "floz": "fl-oz",
    "fluid oz": "fl-oz",
    "fluid ounce": "fl-oz",
    "fluid ounces": "fl-oz",
    # Mass ounce
    "oz.": "oz",
    "ounce": "oz",
    "ounces": "oz",
    # Pound
    "lbs": "lb",
    "lb.": "lb",
    "pound": "lb",
    "pounds": "lb",
    # Metric mass
    "gram": "g",
    "grams": "g",
    "gr": "g",
    "kilogram": "kg",
    "kilograms": "kg",
    "kgs": "kg",
    "milligram": "mg",
    "milligrams": "mg",
    # Metric volume
    "milliliter": "ml",
    "milliliters": "ml",
    "millilitre": "ml",
    "millilitres": "ml",
    "liter": "l",
    "liters": "l",
    "litre": "l",
    "litres": "l",
    # US customary volume
    "pint": "pnt",
    "pints": "pnt",
    "pt": "pnt",
    "quart": "qt",
    "quarts": "qt",
    "gallon": "gal",
    "gallons": "gal",
    # Count
    "dozen": "dz",
    "doz": "dz",
    "each": "ea",
}

FLUID_MARKERS = ("fl", "fluid")


class UnitFamily(str, Enum):
    """Quantity family a unit converts within."""

    MASS = "mass"
    VOLUME = "volume"
    UNCLASSIFIED = "unclassified"


# Family -> (units that identify it, base unit, scaled unit)
FAMILY_TARGETS: dict[UnitFamily, tuple[tuple[str, ...], str, str]] = {
    UnitFamily.MASS: (("g", "kg"), "g", "kg"),
    UnitFamily.VOLUME: (("ml", "l"), "ml", "L"),
}


# =============================================================================
# Data Types
# =============================================================================


@dataclass(frozen=True)
class Quantity:
    """A numeric amount in a given unit."""

    value: float
    unit: str


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of a unit conversion, remembering what the caller passed in."""

    quantity: float
    unit: str
    original_unit: str

    @property
    def is_converted(self) -> bool:
        """Check if the unit changed during conversion."""
        return self.unit != self.original_unit

    def as_quantity(self) -> Quantity:
        return Quantity(value=self.quantity, unit=self.unit)


# =============================================================================
# Conversion
# =============================================================================


def normalize_unit(unit: str) -> str:
    """
    Map a unit spelling onto a canonical abbreviation.

    A bare "oz" or "ounce" is treated as mass. Only spellings carrying a
    fluid marker become "fl-oz"; this is a best-effort guess since recipe
    text rarely says which ounce it means.
    """
    unit_lower = " ".join(unit.strip().lower().split())

    if unit_lower in UNIT_SYNONYMS:
        return UNIT_SYNONYMS[unit_lower]

    if "ounce" in unit_lower or unit_lower.endswith("oz"):
        if unit_lower.startswith(FLUID_MARKERS):
            return "fl-oz"
        return "oz"

    return unit_lower


def identify_unit_family(possibilities: list[str]) -> UnitFamily:
    """Pick the family from the units reachable from a source unit."""
    reachable = set(possibilities)
    for family, (markers, _, _) in FAMILY_TARGETS.items():
        if reachable.intersection(markers):
            return family
    return UnitFamily.UNCLASSIFIED


def round_quantity(value: float) -> float | int:
    """Round half-up to one decimal, returning an int when whole."""
    if not math.isfinite(value):
        return value
    # Enough digits for any finite float plus one decimal place
    with localcontext() as ctx:
        ctx.prec = 400
        rounded = Decimal(repr(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    if rounded == rounded.to_integral_value():
        return int(rounded)
    return float(rounded)


def best_fit_metric(value: float, family: UnitFamily) -> tuple[float, str]:
    """Scale a base-unit value up to kg or L once it reaches 1000."""
    _, base_unit, scaled_unit = FAMILY_TARGETS[family]
    if value >= 1000:
        return value / 1000, scaled_unit
    return value, base_unit


def convert_unit(
    quantity: float,
    unit: str,
    target_system: UnitSystem,
    capability: ConversionCapability | None = None,
) -> ConversionResult:
    """
    Convert a quantity toward the target measurement system.

    Only imperial -> metric is performed. Retained kitchen measures, units
    outside the mass and volume families, and anything the capability
    rejects are passed through unchanged.

    Args:
        quantity: Amount in the given unit.
        unit: Unit as written by the user or recipe source.
        target_system: "imperial" or "metric".
        capability: Conversion lookup. Defaults to the shared unit table.

    Returns:
        ConversionResult whose original_unit is always the unit passed in.
    """
    passthrough = ConversionResult(quantity=quantity, unit=unit, original_unit=unit)

    if target_system == "imperial":
        return passthrough
    if target_system != "metric":
        raise ValueError(f"Unknown target system: {target_system!r}")

    if unit.strip().lower() in RETAIN_UNITS:
        return passthrough

    capability = capability or get_unit_table()
    normalized = normalize_unit(unit)

    try:
        family = identify_unit_family(capability.possibilities(normalized))
        if family is UnitFamily.UNCLASSIFIED:
            logger.debug(f"Unit {unit!r} is not mass or volume, leaving as-is")
            return passthrough

        _, base_unit, _ = FAMILY_TARGETS[family]
        base_value = capability.convert(quantity, normalized, base_unit)
    except Exception as e:
        logger.debug(f"Conversion of {quantity} {unit!r} via {capability.name} failed: {e}")
        return passthrough

    if not math.isfinite(base_value):
        logger.debug(f"Conversion of {quantity} {unit!r} overflowed, leaving as-is")
        return passthrough

    value, metric_unit = best_fit_metric(base_value, family)
    return ConversionResult(
        quantity=round_quantity(value),
        unit=metric_unit,
        original_unit=unit,
    )
