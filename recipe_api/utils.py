from __future__ import annotations

import math
from typing import Any, Iterable


def normalize_term(value: str) -> str:
    return value.lower().strip()


def normalize_terms(values: Iterable[str]) -> list[str]:
    return [normalize_term(v) for v in values]


def ingredient_names(recipe: dict[str, Any]) -> list[str]:
    """Lower-cased ingredient names of a recipe.

    Ingredients may be objects carrying a ``name`` or bare strings; entries
    with neither are skipped.
    """
    names: list[str] = []
    for ing in recipe.get("ingredients") or []:
        if isinstance(ing, dict):
            name = ing.get("name")
        else:
            name = ing
        if isinstance(name, str) and name:
            names.append(name.lower())
    return names


def is_bidirectional_match(a: str, b: str) -> bool:
    """True when either string contains the other."""
    return a in b or b in a


def matches_any(term: str, candidates: Iterable[str]) -> bool:
    return any(is_bidirectional_match(term, c) for c in candidates)


def has_all_tags(recipe: dict[str, Any], tags: Iterable[str]) -> bool:
    recipe_tags = recipe.get("dietary") or []
    return all(tag in recipe_tags for tag in tags)


def within_time(recipe: dict[str, Any], max_time: float) -> bool:
    # Recipes without a cooking time never satisfy a time limit
    cooking_time = recipe.get("cookingTime")
    if not isinstance(cooking_time, (int, float)):
        return False
    return cooking_time <= max_time


def round_half_up(value: float) -> int:
    # round() would send 2.5 to 2; scores and percentages round halves up
    return math.floor(value + 0.5)
