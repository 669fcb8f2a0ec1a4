from enum import Enum
from typing import Optional, List
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Difficulty(str, Enum):
    EASY = "Easy"
    MEDIUM = "Medium"
    ADVANCED = "Advanced"


class _Frozen(BaseModel):
    # camelCase on the wire, snake_case in Python
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class ParsedIngredient(_Frozen):
    name: str
    quantity: float = Field(1.0, ge=0)
    unit: str = "piece"


class ParsedInstruction(_Frozen):
    step_number: int = Field(..., ge=1)
    text: str
    timer_minutes: Optional[int] = None


class NutritionInfo(_Frozen):
    protein: Optional[float] = None
    carbohydrates: Optional[float] = None
    fat: Optional[float] = None
    fiber: Optional[float] = None
    sodium: Optional[float] = None
    saturated_fat: Optional[float] = None
    cholesterol: Optional[float] = None
    sugar: Optional[float] = None

    def is_empty(self) -> bool:
        return all(value is None for value in self.model_dump().values())


class NormalizedRecipe(_Frozen):
    """Single output shape for URL imports, scans and generated recipes."""
    title: str = "Untitled Recipe"
    description: str = ""
    ingredients: List[ParsedIngredient] = []
    instructions: List[ParsedInstruction] = []
    prep_time_minutes: int = Field(15, ge=0)
    cook_time_minutes: int = Field(30, ge=0)
    servings: int = Field(4, ge=1)
    difficulty: Difficulty = Difficulty.MEDIUM
    categories: List[str] = []
    cuisine_types: List[str] = []
    dietary_info: List[str] = []
    nutrition_info: Optional[NutritionInfo] = None
    calories: Optional[int] = None

    @property
    def total_time_minutes(self) -> int:
        return self.prep_time_minutes + self.cook_time_minutes


def number_instructions(texts: List[str]) -> List[ParsedInstruction]:
    """Number steps 1..n by position, ignoring any numbering in the text."""
    return [
        ParsedInstruction(step_number=i + 1, text=text)
        for i, text in enumerate(texts)
    ]
