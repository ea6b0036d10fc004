from __future__ import annotations

from typing import Any

from ..utils import (
    has_all_tags,
    ingredient_names,
    matches_any,
    normalize_terms,
    round_half_up,
    within_time,
)
from .models import RecommendationRequest, ScoreFactors

INGREDIENT_WEIGHT = 40
MISSING_BASE = 20
MISSING_STEP = 5
RATING_WEIGHT = 15
DEFAULT_RATING = 3
TIME_WEIGHT = 10
TIME_SLACK = 1.5
PREFERENCE_WEIGHT = 5
PREFERENCE_MISMATCH = 2

SERVINGS_TOLERANCE = 2
TOP_LIMIT = 10

# (name, minimum score, shown recipes); upper bound is the previous tier
TIERS = [("excellent", 80, 5), ("good", 60, 5), ("fair", 40, 3)]


def _preference_score(actual: Any, wanted: str | None) -> int:
    if not wanted:
        return PREFERENCE_WEIGHT
    if isinstance(actual, str) and actual.lower() == wanted.lower():
        return PREFERENCE_WEIGHT
    return PREFERENCE_MISMATCH


def _time_score(cooking_time: Any, max_cooking_time: float | None) -> int:
    if not max_cooking_time:
        return TIME_WEIGHT
    if not isinstance(cooking_time, (int, float)):
        return 0
    if cooking_time <= max_cooking_time:
        return TIME_WEIGHT
    if cooking_time <= max_cooking_time * TIME_SLACK:
        return TIME_WEIGHT // 2
    return 0


def score_recipe(
    recipe: dict[str, Any],
    available: list[str],
    request: RecommendationRequest,
) -> dict[str, Any]:
    """
    Compute the recommendation score for a single recipe.

    ``available`` must already be normalised. The seven factors add up to at
    most 100 for well-formed recipes; the total is rounded but not clamped.
    """
    names = ingredient_names(recipe)
    matched = [n for n in names if matches_any(n, available)]
    missing = [n for n in names if not matches_any(n, available)]
    coverage = len(matched) / len(names) if names else 0.0

    ingredient_score = coverage * INGREDIENT_WEIGHT
    missing_penalty = max(0, MISSING_BASE - len(missing) * MISSING_STEP)
    rating_score = (recipe.get("rating") or DEFAULT_RATING) / 5 * RATING_WEIGHT
    time_score = _time_score(recipe.get("cookingTime"), request.max_cooking_time)
    difficulty_score = _preference_score(recipe.get("difficulty"), request.difficulty)
    cuisine_score = _preference_score(recipe.get("cuisine"), request.cuisine_preference)
    meal_type_score = _preference_score(recipe.get("mealType"), request.meal_type)

    total = (
        ingredient_score + missing_penalty + rating_score
        + time_score + difficulty_score + cuisine_score + meal_type_score
    )

    factors = ScoreFactors(
        ingredient_score=round_half_up(ingredient_score),
        missing_penalty=round_half_up(missing_penalty),
        rating_score=round_half_up(rating_score),
        time_score=time_score,
        difficulty_score=difficulty_score,
        cuisine_score=cuisine_score,
        meal_type_score=meal_type_score,
    )

    return {
        **recipe,
        "recommendationScore": round_half_up(total),
        "availableIngredients": matched,
        "missingIngredients": missing,
        "ingredientMatch": round_half_up(coverage * 100),
        "factors": factors.model_dump(by_alias=True),
    }


def _is_feasible(
    recipe: dict[str, Any],
    scored: dict[str, Any],
    exclude: list[str],
    request: RecommendationRequest,
) -> bool:
    if not scored["availableIngredients"]:
        return False

    names = ingredient_names(recipe)
    if any(matches_any(term, names) for term in exclude):
        return False

    if request.dietary and not has_all_tags(recipe, request.dietary):
        return False

    if request.max_cooking_time and not within_time(recipe, request.max_cooking_time):
        return False

    if request.servings:
        recipe_servings = recipe.get("servings")
        if recipe_servings and abs(recipe_servings - request.servings) > SERVINGS_TOLERANCE:
            return False

    return True


def _bucket(ranked: list[dict[str, Any]]) -> dict[str, dict[str, Any]]:
    buckets: dict[str, dict[str, Any]] = {}
    upper: float = float("inf")
    for name, lower, shown in TIERS:
        members = [r for r in ranked if lower <= r["recommendationScore"] < upper]
        buckets[name] = {"count": len(members), "recipes": members[:shown]}
        upper = lower
    return buckets


def recommend(
    recipes: list[dict[str, Any]], request: RecommendationRequest
) -> dict[str, Any]:
    available = normalize_terms(request.available_ingredients)
    exclude = normalize_terms(request.exclude_ingredients)

    ranked: list[dict[str, Any]] = []
    for recipe in recipes:
        scored = score_recipe(recipe, available, request)
        if _is_feasible(recipe, scored, exclude, request):
            ranked.append(scored)

    ranked.sort(key=lambda r: -r["recommendationScore"])

    return {
        "totalRecipes": len(ranked),
        "criteria": {
            "availableIngredients": available,
            "dietary": request.dietary,
            "maxCookingTime": request.max_cooking_time,
            "difficulty": request.difficulty,
            "cuisinePreference": request.cuisine_preference,
            "excludeIngredients": exclude,
            "servings": request.servings,
            "mealType": request.meal_type,
        },
        "recommendations": _bucket(ranked),
        "topRecommendations": ranked[:TOP_LIMIT],
    }
