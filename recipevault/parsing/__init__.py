from .schema import NormalizedRecipe, ParsedIngredient, ParsedInstruction, NutritionInfo, Difficulty
from .durations import parse_duration, classify_difficulty, parse_servings
from .structured_data import extract_structured_recipe
from .markup import extract_markup_recipe
from .ai_response import parse_generation_payload, parse_generation_text, parse_recipe_json

__all__ = [
    "NormalizedRecipe", "ParsedIngredient", "ParsedInstruction", "NutritionInfo", "Difficulty",
    "parse_duration", "classify_difficulty", "parse_servings",
    "extract_structured_recipe", "extract_markup_recipe",
    "parse_generation_payload", "parse_generation_text", "parse_recipe_json",
]
