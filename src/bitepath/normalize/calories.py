"""Calories-per-serving estimation."""

import math

from bitepath.normalize.numbers import extract_first_number, extract_servings_count


def calories_per_serving(
    total_calories_text: str | None,
    servings_text: str | None,
) -> int | None:
    """
    Estimate calories per serving from free-text totals.

    When servings_text is blank, an explicit count inside the calorie text
    ("600 kcal, serves 4") is used instead.

    Returns:
        Calories per serving rounded half-up, or None if either number is
        missing or servings is not positive.
    """
    total_calories = extract_first_number(total_calories_text)

    if servings_text and servings_text.strip():
        servings = extract_first_number(servings_text)
    else:
        servings = extract_servings_count(total_calories_text, allow_bare_number=False)

    if total_calories is None or servings is None or servings <= 0:
        return None

    per_serving = total_calories / servings
    # Digit runs past float range parse as inf
    if not math.isfinite(per_serving):
        return None

    return math.floor(per_serving + 0.5)
