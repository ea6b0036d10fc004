from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SearchRequest(_CamelModel):
    ingredients: list[str] | None = Field(
        default=None, description="Ingredients on hand, e.g. [\"chicken\", \"garlic\"]"
    )
    must_have: list[str] = Field(default_factory=list)
    dietary: list[str] = Field(default_factory=list)
    max_time: int | float | None = Field(default=None, description="Upper bound on cooking time in minutes")


class RateRequest(_CamelModel):
    rating: int | float | None = None
    review: str | None = None


class RatingOut(_CamelModel):
    recipe_id: str
    rating: int | float
    review: str | None = None
    timestamp: str
