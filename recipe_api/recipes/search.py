from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from ..errors import InvalidInput, NotFound
from ..utils import (
    has_all_tags,
    ingredient_names,
    matches_any,
    normalize_terms,
    round_half_up,
    within_time,
)
from .models import RatingOut

MAX_SEARCH_RESULTS = 20


def list_recipes(
    recipes: list[dict[str, Any]],
    dietary: list[str] | None = None,
    max_time: int | float | None = None,
    difficulty: str | None = None,
) -> list[dict[str, Any]]:
    results = recipes

    if dietary:
        results = [r for r in results if has_all_tags(r, dietary)]

    if max_time:
        results = [r for r in results if within_time(r, max_time)]

    if difficulty:
        wanted = difficulty.lower()
        results = [
            r for r in results
            if isinstance(r.get("difficulty"), str) and r["difficulty"].lower() == wanted
        ]

    return results


def get_recipe(recipes: list[dict[str, Any]], recipe_id: str) -> dict[str, Any]:
    recipe = next((r for r in recipes if r.get("id") == recipe_id), None)
    if recipe is None:
        raise NotFound(
            f"Recipe with ID {recipe_id} does not exist", error="Recipe not found"
        )
    return recipe


def _score_recipe(
    recipe: dict[str, Any], terms: list[str], must_have: list[str]
) -> dict[str, Any]:
    """Annotate a recipe with how well it covers the searched ingredients."""
    names = ingredient_names(recipe)
    matched = sum(1 for term in terms if matches_any(term, names))
    total = len(names)
    percentage = round_half_up(matched / total * 100) if total else 0

    return {
        **recipe,
        "matchedIngredients": matched,
        "totalIngredients": total,
        "matchPercentage": percentage,
        "hasMustHave": all(matches_any(m, names) for m in must_have),
        # Counted per recipe ingredient, independently of ``matched``
        "missingIngredients": sum(1 for n in names if not matches_any(n, terms)),
    }


def search_recipes(
    recipes: list[dict[str, Any]],
    ingredients: list[str] | None,
    must_have: list[str] | None = None,
    dietary: list[str] | None = None,
    max_time: int | float | None = None,
) -> dict[str, Any]:
    if not isinstance(ingredients, list) or not ingredients:
        raise InvalidInput("Please provide an array of ingredients")

    terms = normalize_terms(ingredients)
    must_have_terms = normalize_terms(must_have or [])
    dietary = dietary or []

    scored = [_score_recipe(r, terms, must_have_terms) for r in recipes]

    results = [r for r in scored if r["matchedIngredients"] > 0]
    if must_have_terms:
        results = [r for r in results if r["hasMustHave"]]
    if dietary:
        results = [r for r in results if has_all_tags(r, dietary)]
    if max_time:
        results = [r for r in results if within_time(r, max_time)]

    results.sort(key=lambda r: (-r["matchPercentage"], -(r.get("rating") or 0)))

    return {
        "count": len(results),
        "searchCriteria": {
            "ingredients": terms,
            "mustHave": must_have_terms,
            "dietary": dietary,
            "maxTime": max_time,
        },
        "data": results[:MAX_SEARCH_RESULTS],
    }


def rate_recipe(
    recipe_id: str, rating: int | float | None, review: str | None = None
) -> RatingOut:
    """Accept a rating for ``recipe_id``. Ratings are echoed back, not stored."""
    if not rating or rating < 1 or rating > 5:
        raise InvalidInput("Rating must be between 1 and 5", error="Invalid rating")

    return RatingOut(
        recipe_id=recipe_id,
        rating=rating,
        review=review or None,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
