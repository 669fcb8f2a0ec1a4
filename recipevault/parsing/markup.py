"""Fallback extraction for pages without usable JSON-LD.

Scans raw markup for the class names recipe themes conventionally use
("ingredient", "instruction", "step"). Timing and servings are not
recoverable this way, so fixed defaults are filled in.
"""
import re
import logging
from typing import List, Optional

from ..core.text import clean_html_text
from .schema import NormalizedRecipe, ParsedIngredient, Difficulty, number_instructions

logger = logging.getLogger("recipevault.parsing")

_FLAGS = re.IGNORECASE | re.DOTALL

INGREDIENT_PATTERNS = [
    re.compile(r'<li[^>]*class="[^"]*ingredient[^"]*"[^>]*>(.*?)</li>', _FLAGS),
    re.compile(r'<div[^>]*class="[^"]*ingredient[^"]*"[^>]*>(.*?)</div>', _FLAGS),
]

INSTRUCTION_PATTERNS = [
    re.compile(r'<li[^>]*class="[^"]*instruction[^"]*"[^>]*>(.*?)</li>', _FLAGS),
    re.compile(r'<li[^>]*class="[^"]*step[^"]*"[^>]*>(.*?)</li>', _FLAGS),
    re.compile(r'<div[^>]*class="[^"]*instruction[^"]*"[^>]*>(.*?)</div>', _FLAGS),
]

META_DESCRIPTION_REGEX = re.compile(
    r'<meta[^>]*name="description"[^>]*content="([^"]*)"[^>]*>', _FLAGS
)

DEFAULT_TITLE = "Extracted Recipe"
EXTRACTED_CATEGORY = "Extracted"

# Placeholders, not estimates
DEFAULT_PREP_MINUTES = 15
DEFAULT_COOK_MINUTES = 30
DEFAULT_SERVINGS = 4


def extract_markup_recipe(html: str, url: str) -> Optional[NormalizedRecipe]:
    html = html or ""

    ingredients = [
        ParsedIngredient(name=text, quantity=1.0, unit="item")
        for text in _first_matching(INGREDIENT_PATTERNS, html)
    ]
    instructions = number_instructions(_first_matching(INSTRUCTION_PATTERNS, html))

    if not ingredients or not instructions:
        logger.info(
            "Markup fallback found %d ingredients, %d instructions for %s",
            len(ingredients), len(instructions), url,
        )
        return None

    return NormalizedRecipe(
        title=extract_title(html),
        description=extract_description(html),
        ingredients=ingredients,
        instructions=instructions,
        prep_time_minutes=DEFAULT_PREP_MINUTES,
        cook_time_minutes=DEFAULT_COOK_MINUTES,
        servings=DEFAULT_SERVINGS,
        difficulty=Difficulty.MEDIUM,
        categories=[EXTRACTED_CATEGORY],
    )


def extract_title(html: str) -> str:
    """First <h1>, else <title>, with site branding after a "|" removed."""
    title = _first_tag_text(html, "h1") or _first_tag_text(html, "title") or DEFAULT_TITLE
    return title.split("|")[0].strip() or title


def extract_description(html: str) -> str:
    match = META_DESCRIPTION_REGEX.search(html)
    if not match:
        return ""
    return clean_html_text(match.group(1))


def _first_tag_text(html: str, tag: str) -> str:
    match = re.search(rf"<{tag}[^>]*>(.*?)</{tag}>", html, _FLAGS)
    if not match:
        return ""
    return clean_html_text(match.group(1))


def _first_matching(patterns: List[re.Pattern], html: str) -> List[str]:
    """Cleaned matches of the first pattern that matches at all."""
    for pattern in patterns:
        matches = pattern.findall(html)
        if matches:
            return [clean_html_text(m) for m in matches]
    return []
