import re
from typing import Any, Optional

from .schema import Difficulty

# ISO-8601 style durations: "PT15M", "PT1H30M", "PT2H"
DURATION_REGEX = re.compile(r'PT(?:(\d+)H)?(?:(\d+)M)?')

EASY_MAX_MINUTES = 20
MEDIUM_MAX_MINUTES = 45


def parse_duration(value: Any) -> int:
    """Convert a duration like "PT1H30M" to whole minutes. Anything else is 0."""
    if value is None:
        return 0

    match = DURATION_REGEX.search(str(value))
    if not match:
        return 0

    hours, minutes = match.groups()
    total = 0
    if hours:
        total += int(hours) * 60
    if minutes:
        total += int(minutes)
    return total


def classify_difficulty(total_minutes: int) -> Difficulty:
    if total_minutes <= EASY_MAX_MINUTES:
        return Difficulty.EASY
    if total_minutes <= MEDIUM_MAX_MINUTES:
        return Difficulty.MEDIUM
    return Difficulty.ADVANCED


def parse_servings(value: Any) -> Optional[int]:
    """Coerce a recipe yield to a positive int.

    Accepts an int, a digit-only string, or a list whose first element is one
    of those. Returns None for everything else.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, list):
        return parse_servings(value[0]) if value else None

    servings = None
    if isinstance(value, int):
        servings = value
    elif isinstance(value, str) and value.strip().isdigit():
        servings = int(value.strip())

    if servings is None or servings < 1:
        return None
    return servings
