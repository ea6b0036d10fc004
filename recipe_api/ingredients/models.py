from __future__ import annotations

from pydantic import BaseModel, Field


class ValidateRequest(BaseModel):
    ingredients: list[str] | None = Field(
        default=None,
        description="Free-text ingredient names to check against the catalog",
    )


class ValidationItem(BaseModel):
    input: str
    found: bool
    ingredient: dict | None = None
    suggestions: list[dict] = Field(default_factory=list)


class ValidationResult(BaseModel):
    total_ingredients: int
    valid_ingredients: int
    invalid_ingredients: int
    items: list[ValidationItem]
