from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..catalog.models import Difficulty, Recipe

MIN_COOK_TIME = 0
MAX_COOK_TIME = 180


class RankingMode(str, Enum):
    inclusive = "inclusive"
    exclusive = "exclusive"


class CookTimeRange(BaseModel):
    min: int = Field(default=MIN_COOK_TIME, ge=0)
    max: int = Field(default=MAX_COOK_TIME, ge=0)

    @model_validator(mode="after")
    def _check_order(self) -> "CookTimeRange":
        if self.min > self.max:
            raise ValueError("cook_time.min must not exceed cook_time.max")
        return self


class RecommendationRequest(BaseModel):
    ingredients: list[str] = Field(
        default_factory=list,
        description="Selected (inclusive) or detected (exclusive) ingredient names",
    )
    mode: RankingMode = RankingMode.inclusive
    dietary: list[str] = Field(default_factory=list)
    difficulty: list[Difficulty] = Field(default_factory=list)
    cook_time: CookTimeRange = Field(default_factory=CookTimeRange)
    limit: int | None = Field(default=None, ge=1, le=100)

    @field_validator("ingredients")
    @classmethod
    def _dedupe_ingredients(cls, value: list[str]) -> list[str]:
        cleaned = [v.strip() for v in value if v.strip()]
        return list(dict.fromkeys(cleaned))


class RecipeMatch(BaseModel):
    model_config = ConfigDict(frozen=True)

    recipe: Recipe
    match_score: float
    matched_count: int


class RecommendationResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    matches: tuple[RecipeMatch, ...]
    total_candidates: int
    mode: RankingMode
