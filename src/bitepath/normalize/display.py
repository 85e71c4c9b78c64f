"""Grocery-list formatting of ingredient quantities."""

import math
import re
from dataclasses import dataclass

from bitepath.config import UnitSystem, get_settings
from bitepath.logging_config import get_logger
from bitepath.normalize.units import convert_unit, round_quantity

logger = get_logger(__name__)

# Units where the number alone reads better ("2" rather than "2 pieces")
PIECE_UNITS: frozenset[str] = frozenset({"piece", "pieces", "item", "items", "unit", "units"})

# Small measures rendered muted in lists
SPICE_UNITS: frozenset[str] = frozenset(
    {
        "tsp",
        "teaspoon",
        "teaspoons",
        "tbsp",
        "tablespoon",
        "tablespoons",
        "pinch",
        "pinches",
        "dash",
        "dashes",
    }
)

METRIC_DISPLAY_UNITS: frozenset[str] = frozenset({"L", "ml", "g", "kg"})
Y_PLURAL_EXCEPTIONS: frozenset[str] = frozenset({"day", "key", "way", "toy", "boy", "guy"})

TO_TASTE = "to taste"

# Leading signed number, rest ignored: "2 cups" -> 2, "1 1/2" -> 1
LEADING_NUMBER_PATTERN = re.compile(r"^\s*([-+]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?)")


@dataclass(frozen=True)
class DisplayQuantity:
    """A quantity ready to show in a grocery list."""

    quantity: float | int | None
    unit: str
    muted: bool = False

    @property
    def text(self) -> str:
        """Render as "2 cups", "3" for piece units, or the unit alone."""
        if self.quantity is None:
            return self.unit
        if self.unit.lower() in PIECE_UNITS and self.quantity > 0:
            return f"{self.quantity}"
        if self.quantity > 0 and self.unit:
            return f"{self.quantity} {self.unit}"
        return self.unit


def pluralize_unit(unit: str, quantity: float) -> str:
    """
    Pluralize a unit for quantities above one.

    Metric symbols and units already ending in "s" are left alone.
    """
    if quantity <= 1 or not unit or unit in METRIC_DISPLAY_UNITS or unit.endswith("s"):
        return unit
    if unit.endswith("y") and unit.lower() not in Y_PLURAL_EXCEPTIONS:
        return unit[:-1] + "ies"
    return unit + "s"


def format_quantity_for_display(
    quantity: float,
    unit: str,
    system: UnitSystem | None = None,
) -> DisplayQuantity:
    """Convert (for metric) and round a quantity for display."""
    if system is None:
        system = get_settings().preferred_unit_system

    if system == "metric":
        converted = convert_unit(quantity, unit, "metric")
        quantity, unit = converted.quantity, converted.unit

    muted = unit.lower() in SPICE_UNITS
    display_quantity = round_quantity(quantity)

    return DisplayQuantity(
        quantity=display_quantity,
        unit=pluralize_unit(unit, display_quantity),
        muted=muted,
    )


def format_ingredient_details(
    quantity: float | str | None,
    unit: str | None,
    description: str | None = None,
    system: UnitSystem | None = None,
) -> DisplayQuantity | None:
    """
    Build the details part of a grocery line for one ingredient.

    Returns:
        DisplayQuantity, or None when the quantity text is not a number and
        the ingredient should be skipped.
    """
    if description and description.strip().lower() == TO_TASTE:
        return DisplayQuantity(quantity=None, unit=TO_TASTE, muted=True)

    if quantity is None or not unit:
        return DisplayQuantity(quantity=None, unit="")

    if isinstance(quantity, str):
        match = LEADING_NUMBER_PATTERN.match(quantity)
        if not match:
            logger.debug(f"Skipping ingredient with non-numeric quantity {quantity!r}")
            return None
        quantity = float(match.group(1))

    if not math.isfinite(quantity):
        return None

    return format_quantity_for_display(quantity, unit, system)
