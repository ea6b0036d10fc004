from __future__ import annotations

from typing import Any

import pandas as pd

POPULARITY_RATING_WEIGHT = 0.7
POPULARITY_VIEWS_WEIGHT = 0.3


def _frame(recipes: list[dict[str, Any]]) -> pd.DataFrame:
    """Tabular view of the columns the listings rank on, indexed by position."""
    df = pd.DataFrame({
        "cookingTime": pd.to_numeric(
            pd.Series([r.get("cookingTime") for r in recipes], dtype=object),
            errors="coerce",
        ),
        "rating": pd.to_numeric(
            pd.Series([r.get("rating") for r in recipes], dtype=object),
            errors="coerce",
        ).fillna(0),
        "views": pd.to_numeric(
            pd.Series([r.get("views") for r in recipes], dtype=object),
            errors="coerce",
        ).fillna(0),
        "category": pd.Series([r.get("category") for r in recipes], dtype=object),
        "cuisine": pd.Series([r.get("cuisine") for r in recipes], dtype=object),
    })

    # Lowercase for case-insensitive lookup
    df["category_lower"] = df["category"].fillna("").astype(str).str.lower()
    df["cuisine_lower"] = df["cuisine"].fillna("").astype(str).str.lower()
    return df


def _records(recipes: list[dict[str, Any]], df: pd.DataFrame) -> list[dict[str, Any]]:
    return [recipes[i] for i in df.index]


def popular_recipes(
    recipes: list[dict[str, Any]],
    limit: int = 10,
    category: str | None = None,
) -> dict[str, Any]:
    """Rank recipes by ``rating * 0.7 + views * 0.3``, optionally within a category or cuisine."""
    df = _frame(recipes)

    if category:
        wanted = category.lower()
        df = df.loc[(df["category_lower"] == wanted) | (df["cuisine_lower"] == wanted)]

    df = df.assign(
        _popularity=df["rating"] * POPULARITY_RATING_WEIGHT
        + df["views"] * POPULARITY_VIEWS_WEIGHT
    )
    ranked = df.sort_values("_popularity", ascending=False, kind="stable")

    return {"count": len(ranked), "data": _records(recipes, ranked.head(limit))}


def quick_recipes(
    recipes: list[dict[str, Any]],
    max_time: int | float = 30,
    limit: int = 10,
) -> dict[str, Any]:
    """Recipes ready within ``max_time`` minutes, fastest first, best rated on ties."""
    df = _frame(recipes)
    df = df.loc[df["cookingTime"] <= max_time]
    ranked = df.sort_values(
        ["cookingTime", "rating"], ascending=[True, False], kind="stable"
    )

    return {
        "criteria": {"maxCookingTime": max_time},
        "count": len(ranked),
        "data": _records(recipes, ranked.head(limit)),
    }
