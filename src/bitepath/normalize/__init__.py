"""Normalize free-text quantities, serving counts and units."""

from bitepath.normalize.calories import calories_per_serving
from bitepath.normalize.display import (
    DisplayQuantity,
    format_ingredient_details,
    format_quantity_for_display,
    pluralize_unit,
)
from bitepath.normalize.numbers import extract_first_number, extract_servings_count
from bitepath.normalize.servings import DEFAULT_SERVINGS, normalize_servings
from bitepath.normalize.units import (
    RETAIN_UNITS,
    ConversionResult,
    Quantity,
    UnitFamily,
    convert_unit,
    normalize_unit,
)

__all__ = [
    "DEFAULT_SERVINGS",
    "RETAIN_UNITS",
    "ConversionResult",
    "DisplayQuantity",
    "Quantity",
    "UnitFamily",
    "calories_per_serving",
    "convert_unit",
    "extract_first_number",
    "extract_servings_count",
    "format_ingredient_details",
    "format_quantity_for_display",
    "normalize_servings",
    "normalize_unit",
    "pluralize_unit",
]
