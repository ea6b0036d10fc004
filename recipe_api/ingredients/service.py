from __future__ import annotations

from typing import Any

from ..errors import InvalidInput, NotFound
from ..utils import is_bidirectional_match, normalize_term
from .models import ValidationItem, ValidationResult

MAX_SUGGESTIONS = 3


def _lower(value: Any) -> str | None:
    return value.lower() if isinstance(value, str) else None


def _aliases(ingredient: dict[str, Any]) -> list[str]:
    return [a.lower() for a in ingredient.get("aliases") or [] if isinstance(a, str)]


def _is_exact(ingredient: dict[str, Any], term: str) -> bool:
    return _lower(ingredient.get("name")) == term or term in _aliases(ingredient)


def _is_similar(ingredient: dict[str, Any], term: str) -> bool:
    name = _lower(ingredient.get("name"))
    if name is not None and is_bidirectional_match(name, term):
        return True
    return any(is_bidirectional_match(alias, term) for alias in _aliases(ingredient))


def list_ingredients(
    ingredients: list[dict[str, Any]],
    category: str | None = None,
    search: str | None = None,
) -> list[dict[str, Any]]:
    results = ingredients

    if category:
        category_lower = category.lower()
        results = [i for i in results if _lower(i.get("category")) == category_lower]

    if search:
        term = search.lower()
        results = [
            i for i in results
            if term in (_lower(i.get("name")) or "")
            or any(term in alias for alias in _aliases(i))
        ]

    return results


def list_categories(ingredients: list[dict[str, Any]]) -> list[str]:
    categories = {i.get("category") for i in ingredients}
    return sorted(c for c in categories if isinstance(c, str) and c)


def find_substitutes(
    ingredients: list[dict[str, Any]], name: str
) -> tuple[dict[str, Any], list[dict[str, Any]]]:
    """
    Locate ``name`` in the catalog and return it with its substitutes.

    A substitute shares the target's category and lists the target's display
    name in its ``substituteFor``.
    """
    term = name.lower()
    target = next((i for i in ingredients if _is_exact(i, term)), None)
    if target is None:
        raise NotFound(
            f"No ingredient found with name: {name}", error="Ingredient not found"
        )

    substitutes = [
        i for i in ingredients
        if i.get("id") != target.get("id")
        and i.get("category") == target.get("category")
        and target.get("name") in (i.get("substituteFor") or [])
    ]
    return target, substitutes


def validate_ingredients(
    ingredients: list[dict[str, Any]], names: Any
) -> ValidationResult:
    if not isinstance(names, list):
        raise InvalidInput("Please provide an array of ingredient names")

    items: list[ValidationItem] = []
    for raw in names:
        term = normalize_term(raw)
        found = next((i for i in ingredients if _is_exact(i, term)), None)
        suggestions: list[dict[str, Any]] = []
        if found is None:
            suggestions = [i for i in ingredients if _is_similar(i, term)][:MAX_SUGGESTIONS]
        items.append(ValidationItem(
            input=raw,
            found=found is not None,
            ingredient=found,
            suggestions=suggestions,
        ))

    valid = sum(1 for item in items if item.found)
    return ValidationResult(
        total_ingredients=len(names),
        valid_ingredients=valid,
        invalid_ingredients=len(names) - valid,
        items=items,
    )
