"""Serving count normalization."""

import math
import re
from typing import Any

from bitepath.config import get_settings
from bitepath.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_SERVINGS = 2

# "4-6 servings", "4 - 6"
RANGE_PATTERN = re.compile(r"^(\d+)\s*-\s*(\d+)")
LEADING_NUMBER_PATTERN = re.compile(r"^(\d+)")
SINGLE_KEYWORD = "single"


def normalize_servings(value: Any, default: int | None = None) -> int:
    """
    Normalize a serving specification to a positive integer.

    Accepts a positive whole number, a range like "4-6 servings" (the higher
    bound wins), text starting with a number like "6 servings", or text
    containing "single". Anything else falls back to the default.

    Args:
        value: Number, text or None.
        default: Fallback count. Defaults to the configured default_servings.

    Returns:
        Serving count, always >= 1.
    """
    if default is None:
        default = get_settings().default_servings

    # bool is an int subclass but never a serving count
    if isinstance(value, bool):
        return default

    if isinstance(value, int):
        return value if value > 0 else default

    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer() and value > 0:
            return int(value)
        return default

    if not isinstance(value, str):
        if value is not None:
            logger.debug(f"Unsupported servings type {type(value).__name__}, using {default}")
        return default

    text = value.strip().lower()

    range_match = RANGE_PATTERN.match(text)
    if range_match:
        higher = int(range_match.group(2))
        return higher if higher > 0 else default

    number_match = LEADING_NUMBER_PATTERN.match(text)
    if number_match:
        number = int(number_match.group(1))
        return number if number > 0 else default

    if SINGLE_KEYWORD in text:
        return 1

    if text:
        logger.debug(f"Could not parse servings {value!r}, using {default}")
    return default
