"""Decode the generation endpoint's JSON into a NormalizedRecipe.

The model is asked for an exact shape but nothing guarantees it, so every
field is read with an explicit type check and falls back to its default.
Only a payload that is not JSON, or lacks the wrapper object, is an error.
"""
import json
import logging
from typing import Any, List, Optional, Union

from ..errors import InvalidResponse
from ..settings import settings
from .schema import (
    NormalizedRecipe, ParsedIngredient, ParsedInstruction, NutritionInfo, Difficulty,
)

logger = logging.getLogger("recipevault.parsing")

DEFAULT_TITLE = "Untitled Recipe"
DEFAULT_SERVINGS = 4
DEFAULT_PREP_MINUTES = 15
DEFAULT_COOK_MINUTES = 30
DEFAULT_QUANTITY = 1.0
DEFAULT_UNIT = "piece"

# response key -> NutritionInfo field
NUTRITION_FIELDS = {
    "protein": "protein",
    "carbs": "carbohydrates",
    "fat": "fat",
    "fiber": "fiber",
    "sodium": "sodium",
    "saturatedFat": "saturated_fat",
    "cholesterol": "cholesterol",
    "sugar": "sugar",
}


def parse_generation_text(raw: Union[str, bytes]) -> NormalizedRecipe:
    try:
        payload = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InvalidResponse(f"Generation response is not JSON: {e}") from e
    return parse_generation_payload(payload)


def parse_generation_payload(payload: Any) -> NormalizedRecipe:
    wrapper = settings.generation_wrapper_field
    if not isinstance(payload, dict) or not isinstance(payload.get(wrapper), dict):
        raise InvalidResponse(f"Generation response has no '{wrapper}' object")
    return parse_recipe_json(payload[wrapper])


def parse_recipe_json(data: dict) -> NormalizedRecipe:
    nutrition_data = data.get("nutritionPerServing")
    if not isinstance(nutrition_data, dict):
        nutrition_data = None

    return NormalizedRecipe(
        title=_str(data.get("title"), DEFAULT_TITLE),
        description=_str(data.get("description"), ""),
        ingredients=_ingredients(data.get("ingredients")),
        instructions=_instructions(data.get("instructions")),
        prep_time_minutes=_non_negative(data.get("prepTimeMinutes"), DEFAULT_PREP_MINUTES),
        cook_time_minutes=_non_negative(data.get("cookTimeMinutes"), DEFAULT_COOK_MINUTES),
        servings=_positive(data.get("servings"), DEFAULT_SERVINGS),
        difficulty=_difficulty(data.get("difficulty")),
        categories=_str_list(data.get("categories")),
        cuisine_types=_str_list(data.get("cuisineTypes")),
        dietary_info=_str_list(data.get("dietaryInfo")),
        nutrition_info=_nutrition(nutrition_data) if nutrition_data is not None else None,
        calories=_int(nutrition_data.get("calories")) if nutrition_data is not None else None,
    )


def _ingredients(value: Any) -> List[ParsedIngredient]:
    if not isinstance(value, list):
        return []

    ingredients = []
    for item in value:
        if not isinstance(item, dict):
            continue
        quantity = _float(item.get("quantity"))
        ingredients.append(ParsedIngredient(
            name=_str(item.get("name"), ""),
            quantity=quantity if quantity is not None and quantity >= 0 else DEFAULT_QUANTITY,
            unit=_str(item.get("unit"), DEFAULT_UNIT),
        ))
    return ingredients


def _instructions(value: Any) -> List[ParsedInstruction]:
    # Array order is authoritative; any "stepNumber" in the payload is ignored
    if not isinstance(value, list):
        return []

    steps = [item for item in value if isinstance(item, dict)]
    return [
        ParsedInstruction(
            step_number=i + 1,
            text=_str(step.get("text"), ""),
            timer_minutes=_int(step.get("timerMinutes")),
        )
        for i, step in enumerate(steps)
    ]


def _nutrition(data: dict) -> NutritionInfo:
    return NutritionInfo(**{
        field: _float(data.get(key))
        for key, field in NUTRITION_FIELDS.items()
    })


def _difficulty(value: Any) -> Difficulty:
    if isinstance(value, str):
        try:
            return Difficulty(value)
        except ValueError:
            logger.debug("Unknown difficulty %r, using Medium", value)
    return Difficulty.MEDIUM


def _str(value: Any, default: str) -> str:
    return value if isinstance(value, str) else default


def _str_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str)]


def _int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def _float(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def _non_negative(value: Any, default: int) -> int:
    number = _int(value)
    return number if number is not None and number >= 0 else default


def _positive(value: Any, default: int) -> int:
    number = _int(value)
    return number if number is not None and number >= 1 else default
