"""JSON-LD (schema.org/Recipe) extraction.

Most recipe sites embed a `<script type="application/ld+json">` block that
describes the recipe. When one is present it is the most reliable source, so
this runs before the markup heuristics.
"""
import json
import logging
from typing import Any, List, Optional

from bs4 import BeautifulSoup

from .durations import parse_duration, classify_difficulty, parse_servings
from .schema import NormalizedRecipe, ParsedIngredient, number_instructions

logger = logging.getLogger("recipevault.parsing")

RECIPE_TYPE = "Recipe"
DEFAULT_TITLE = "Extracted Recipe"
DEFAULT_SERVINGS = 4


def extract_structured_recipe(html: str) -> Optional[NormalizedRecipe]:
    """Return the first Recipe-typed JSON-LD block as a NormalizedRecipe, or None."""
    soup = BeautifulSoup(html or "", "html.parser")
    for script in soup.find_all("script", type="application/ld+json"):
        block = script.string or script.get_text()
        if not block:
            continue
        try:
            payload = json.loads(block)
        except json.JSONDecodeError as e:
            logger.debug("Skipping undecodable JSON-LD block: %s", e)
            continue

        for candidate in _candidates(payload):
            if _is_recipe(candidate):
                return _map_recipe(candidate)

    return None


def _candidates(payload: Any) -> List[dict]:
    if isinstance(payload, dict):
        return [payload]
    if isinstance(payload, list):
        return [item for item in payload if isinstance(item, dict)]
    return []


def _is_recipe(data: dict) -> bool:
    declared = data.get("@type")
    if isinstance(declared, str):
        return declared == RECIPE_TYPE
    if isinstance(declared, list):
        return RECIPE_TYPE in declared
    return False


def _map_recipe(data: dict) -> NormalizedRecipe:
    prep = parse_duration(data.get("prepTime"))
    cook = parse_duration(data.get("cookTime"))

    ingredients = [
        ParsedIngredient(name=line, quantity=1.0, unit="item")
        for line in _string_list(data.get("recipeIngredient"))
    ]

    return NormalizedRecipe(
        title=_first_string(data.get("name")) or DEFAULT_TITLE,
        description=_first_string(data.get("description")) or "",
        ingredients=ingredients,
        instructions=number_instructions(_instruction_texts(data.get("recipeInstructions"))),
        prep_time_minutes=prep,
        cook_time_minutes=cook,
        servings=parse_servings(data.get("recipeYield")) or DEFAULT_SERVINGS,
        difficulty=classify_difficulty(prep + cook),
        categories=_string_list(data.get("recipeCategory")),
        cuisine_types=_string_list(data.get("recipeCuisine")),
        dietary_info=_string_list(data.get("suitableForDiet")),
    )


def _first_string(value: Any) -> Optional[str]:
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, list) and value:
        return str(value[0]).strip()
    return None


def _string_list(value: Any) -> List[str]:
    """Scalar-or-list -> list of trimmed strings."""
    if isinstance(value, str):
        return [value.strip()]
    if isinstance(value, list):
        return [str(item).strip() for item in value if item is not None]
    return []


def _instruction_texts(value: Any) -> List[str]:
    # HowToStep objects carry the text; plain string lists are used as-is
    if not isinstance(value, list):
        return []

    texts = []
    for step in value:
        if isinstance(step, dict):
            text = step.get("text")
            if isinstance(text, str):
                texts.append(text.strip())
        elif isinstance(step, str):
            texts.append(step.strip())
    return texts
