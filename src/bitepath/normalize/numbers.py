"""Numeric extraction from loosely structured text."""

import re

FIRST_NUMBER_PATTERN = re.compile(r"(\d+(?:\.\d+)?)")

# "4 servings", "6 people"
NUMBER_THEN_KEYWORD_PATTERN = re.compile(
    r"^(\d+(?:\.\d+)?)\s*(?:servings?|people)", re.IGNORECASE
)

# "serves 4", "servings for 4", "for 4 people", "(4 servings)", "(4)"
KEYWORD_THEN_NUMBER_PATTERN = re.compile(
    r"(?:serves|servings for|for)\s*(\d+(?:\.\d+)?)(?:\s*people)?"
    r"|\((\d+(?:\.\d+)?)\s*(?:servings?|people)?\)",
    re.IGNORECASE,
)

BARE_NUMBER_PATTERN = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*$")


def extract_first_number(text: str | None) -> float | None:
    """
    Extract the first integer or decimal in a string.

    Signs are not matched, so "-5" yields 5.0.

    Examples:
        "about 2.5 cups" -> 2.5
        "600 kcal" -> 600.0
        "no numbers here" -> None
    """
    if not text:
        return None

    match = FIRST_NUMBER_PATTERN.search(text)
    return float(match.group(1)) if match else None


def _positive(number: str | None) -> float | None:
    if number is None:
        return None
    value = float(number)
    return value if value > 0 else None


def extract_servings_count(text: str | None, allow_bare_number: bool = True) -> float | None:
    """
    Extract a serving count from text that names one explicitly.

    Patterns are tried in order and the first positive match wins:
    - "4 servings" / "4 people" at the start of the text
    - "serves 4", "servings for 4", "for 4 people", "(4 servings)", "(4)"
    - a string that is nothing but a number, when allow_bare_number is set
    """
    if not text:
        return None

    match = NUMBER_THEN_KEYWORD_PATTERN.match(text)
    if match and (count := _positive(match.group(1))) is not None:
        return count

    match = KEYWORD_THEN_NUMBER_PATTERN.search(text)
    if match and (count := _positive(match.group(1) or match.group(2))) is not None:
        return count

    if allow_bare_number:
        match = BARE_NUMBER_PATTERN.match(text)
        if match:
            return _positive(match.group(1))

    return None
