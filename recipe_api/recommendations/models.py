from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RecommendationRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    available_ingredients: list[str] = Field(default_factory=list)
    dietary: list[str] = Field(default_factory=list)
    max_cooking_time: int | float | None = Field(default=None, description="Minutes")
    difficulty: str | None = None
    cuisine_preference: str | None = None
    exclude_ingredients: list[str] = Field(default_factory=list)
    servings: int | float | None = None
    meal_type: str | None = None


class ScoreFactors(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    ingredient_score: int
    missing_penalty: int
    rating_score: int
    time_score: int
    difficulty_score: int
    cuisine_score: int
    meal_type_score: int
