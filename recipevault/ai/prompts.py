import logging
from typing import Optional
from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger("recipevault.ai")

ANY = "Any"

CUISINE_OPTIONS = [ANY, "Italian", "Mexican", "Asian", "American", "Indian", "Mediterranean", "French", "Turkish"]
DIFFICULTY_OPTIONS = [ANY, "Easy", "Medium", "Hard"]
MEAL_TYPE_OPTIONS = [ANY, "Breakfast", "Lunch", "Dinner", "Snack", "Dessert"]

TEXT_PROMPT_TEMPLATE = """Parse the following text into a structured recipe format. IMPORTANT: Keep everything in the ORIGINAL LANGUAGE of the handwritten text!

LANGUAGE PRESERVATION RULES:
1. Detect the primary language used in the recipe
2. Keep ALL text in that original language - DO NOT TRANSLATE
3. Only clean up OCR errors and standardize formatting
4. For mixed text (e.g., "1 tbsp şeker"), keep it as is
5. Standardize common unit abbreviations within the same language:
   - If Turkish: "yemek kaşığı" or "yk" → "yemek kaşığı"
   - If English: "tablespoon" → "tbsp"
   - Keep metric units as written (g, kg, ml, l)
6. Fix obvious OCR mistakes but preserve the original language

Text to parse:
{text}

Return a JSON object with this exact structure (keep all text in original language):
{{
  "title": "Recipe Title",
  "description": "Brief description of the recipe",
  "servings": 4,
  "prepTimeMinutes": 15,
  "cookTimeMinutes": 30,
  "difficulty": "Easy|Medium|Hard",
  "categories": ["Breakfast", "Lunch", "Dinner", "Snack", "Dessert"],
  "cuisineTypes": ["Italian", "Mexican", "Asian", etc.],
  "dietaryInfo": ["Vegetarian", "Vegan", "Gluten-Free", etc.],
  "ingredients": [
    {{
      "name": "ingredient name",
      "quantity": 1.5,
      "unit": "cup|tsp|tbsp|oz|lb|g|kg|ml|l|piece|clove|adet|su bardağı|yemek kaşığı|tatlı kaşığı|etc"
    }}
  ],
  "instructions": [
    {{
      "text": "Step description",
      "timerMinutes": null or number
    }}
  ],
  "nutritionPerServing": {{
    "calories": 250,
    "protein": 10,
    "carbs": 30,
    "fat": 12,
    "fiber": 5,
    "sugar": 8,
    "sodium": 300
  }}
}}

Important Instructions:
- Extract quantities and units accurately from ingredient lines
- Keep ALL text in the original language - NO TRANSLATION
- Preserve units as written (yemek kaşığı, tbsp, cup, ml, g, etc.)
- Number the instructions in order if not already numbered
- Identify timer information in instructions
- Always provide nutritional estimates based on ingredients"""

GENERATION_REQUEST_TEMPLATE = """Generate a complete recipe based on the following requirements:

{requirements}

Please create a detailed recipe with:
- A creative and appealing title
- A brief description
- Complete list of ingredients with quantities
- Step-by-step cooking instructions
- Estimated prep and cook times
- Nutritional information

Make sure the recipe is practical and uses the available ingredients if specified."""


class GenerationPreferences(BaseModel):
    idea: str = ""
    available_ingredients: str = ""
    cuisine: str = ANY
    difficulty: str = ANY
    meal_type: str = ANY
    servings: int = Field(4, ge=1, le=50)
    max_cooking_minutes: int = Field(60, ge=1)

    @field_validator("cuisine")
    @classmethod
    def _known_cuisine(cls, v: str) -> str:
        return _check_option(v, CUISINE_OPTIONS, "cuisine")

    @field_validator("difficulty")
    @classmethod
    def _known_difficulty(cls, v: str) -> str:
        return _check_option(v, DIFFICULTY_OPTIONS, "difficulty")

    @field_validator("meal_type")
    @classmethod
    def _known_meal_type(cls, v: str) -> str:
        return _check_option(v, MEAL_TYPE_OPTIONS, "meal type")

    def has_request(self) -> bool:
        return bool(self.idea.strip() or self.available_ingredients.strip())


def _check_option(value: str, options: list[str], label: str) -> str:
    if value not in options:
        raise ValueError(f"Unknown {label} '{value}', expected one of {options}")
    return value


def build_text_prompt(extracted_text: str) -> str:
    """Wrap recognized text in the parse instructions and JSON shape."""
    return TEXT_PROMPT_TEMPLATE.format(text=extracted_text)


def _requirement(label: str, value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    if not value or value == ANY:
        return None
    return f"{label}: {value}"


def build_preferences_prompt(prefs: GenerationPreferences) -> str:
    """
    Compose a generation request from discrete preferences.
    Preferences left blank or at "Any" are omitted; servings and max time
    are always stated. The request is then wrapped in the same parse
    template as scanned text so one response shape comes back.
    """
    lines = [
        _requirement("Recipe idea", prefs.idea),
        _requirement("Available ingredients", prefs.available_ingredients),
        _requirement("Cuisine", prefs.cuisine),
        _requirement("Difficulty", prefs.difficulty),
        _requirement("Meal type", prefs.meal_type),
        f"Servings: {prefs.servings}",
        f"Maximum cooking time: {prefs.max_cooking_minutes} minutes",
    ]
    request = GENERATION_REQUEST_TEMPLATE.format(
        requirements="\n".join(line for line in lines if line)
    )
    logger.debug("Built generation request (%d chars)", len(request))
    return build_text_prompt(request)
