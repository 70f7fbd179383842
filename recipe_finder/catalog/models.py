from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

DIETARY_OPTIONS = ["Vegetarian", "Vegan", "Gluten-Free", "Dairy-Free", "Keto"]


class Difficulty(str, Enum):
    easy = "Easy"
    medium = "Medium"
    hard = "Hard"


class Ingredient(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    amount: str | None = None
    category: str | None = None


class Recipe(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str
    description: str = ""
    cook_time: int = Field(..., ge=0, description="Minutes")
    servings: int = Field(default=1, ge=1)
    calories: int = Field(default=0, ge=0)
    protein: float = Field(default=0.0, ge=0.0, description="Grams")
    carbs: float | None = Field(default=None, ge=0.0)
    fat: float | None = Field(default=None, ge=0.0)
    difficulty: Difficulty
    dietary: tuple[str, ...] = ()
    ingredients: tuple[Ingredient, ...] = ()
    steps: tuple[str, ...] = ()
    substitutions: dict[str, tuple[str, ...]] = Field(default_factory=dict)
