from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from recipe_api.app import app
from recipe_api.errors import InvalidInput, NotFound
from recipe_api.ingredients.service import (
    find_substitutes,
    list_categories,
    list_ingredients,
    validate_ingredients,
)

client = TestClient(app)

CATALOG = [
    {"id": "1", "name": "Olive Oil", "category": "Oils", "aliases": ["EVOO"], "substituteFor": []},
    {"id": "2", "name": "Butter", "category": "dairy", "aliases": [], "substituteFor": ["Olive Oil"]},
    {"id": "3", "name": "Canola Oil", "category": "oils", "aliases": ["rapeseed oil"], "substituteFor": ["Olive Oil"]},
    {"id": "4", "name": "Sunflower Oil", "category": "Oils", "aliases": [], "substituteFor": ["Olive Oil"]},
    {"id": "5", "name": "Basil", "category": "herbs", "aliases": ["sweet basil"], "substituteFor": []},
    {"id": "6", "name": "Sage", "category": "", "aliases": [], "substituteFor": []},
]


def _ids(items):
    return [i["id"] for i in items]


# ── Listing ──────────────────────────────────────────────────────────────


class TestListIngredients:
    def test_no_filters_returns_everything(self):
        assert _ids(list_ingredients(CATALOG)) == ["1", "2", "3", "4", "5", "6"]

    def test_category_is_case_insensitive(self):
        assert _ids(list_ingredients(CATALOG, category="OILS")) == ["1", "3", "4"]

    def test_search_matches_name_substring(self):
        assert _ids(list_ingredients(CATALOG, search="oil")) == ["1", "3", "4"]

    def test_search_matches_alias(self):
        assert _ids(list_ingredients(CATALOG, search="evoo")) == ["1"]
        assert _ids(list_ingredients(CATALOG, search="Sweet")) == ["5"]

    def test_category_and_search_combine(self):
        assert _ids(list_ingredients(CATALOG, category="herbs", search="oil")) == []


def test_categories_are_distinct_sorted_and_non_empty():
    assert list_categories(CATALOG) == ["Oils", "dairy", "herbs", "oils"]
    assert list_categories([]) == []


# ── Substitutes ──────────────────────────────────────────────────────────


class TestSubstitutes:
    def test_alias_locates_target(self):
        target, subs = find_substitutes(CATALOG, "evoo")
        assert target["name"] == "Olive Oil"
        # Same category (exact) and listing the target's name
        assert _ids(subs) == ["4"]

    def test_name_lookup_is_case_insensitive(self):
        target, _ = find_substitutes(CATALOG, "OLIVE OIL")
        assert target["id"] == "1"

    def test_partial_name_is_not_found(self):
        with pytest.raises(NotFound) as exc_info:
            find_substitutes(CATALOG, "Olive")
        assert "Olive" in exc_info.value.message
        assert exc_info.value.error == "Ingredient not found"

    def test_no_substitutes(self):
        _, subs = find_substitutes(CATALOG, "basil")
        assert subs == []


# ── Validation ───────────────────────────────────────────────────────────


class TestValidate:
    def test_mixed_input(self):
        result = validate_ingredients(CATALOG, ["olive oil", " BASIL ", "oil", "sunflower oil spray"])
        assert result.total_ingredients == 4
        assert result.valid_ingredients == 2
        assert result.invalid_ingredients == 2

        olive, basil, oil, spray = result.items
        assert olive.found and olive.ingredient["id"] == "1"
        assert basil.found and basil.input == " BASIL "
        assert basil.suggestions == []
        assert not oil.found and oil.ingredient is None
        assert _ids(oil.suggestions) == ["1", "3", "4"]
        assert _ids(spray.suggestions) == ["4"]

    def test_empty_list(self):
        result = validate_ingredients(CATALOG, [])
        assert result.valid_ingredients == 0
        assert result.invalid_ingredients == 0
        assert result.items == []

    def test_non_list_is_rejected(self):
        with pytest.raises(InvalidInput):
            validate_ingredients(CATALOG, "olive oil")
        with pytest.raises(InvalidInput):
            validate_ingredients(CATALOG, None)


# ── API ──────────────────────────────────────────────────────────────────


def test_api_list_ingredients():
    resp = client.get("/api/ingredients")
    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["count"] == len(body["data"]) > 0
    for ing in body["data"]:
        assert {"id", "name", "category"} <= set(ing)


def test_api_filter_by_category():
    resp = client.get("/api/ingredients?category=Vegetables")
    body = resp.json()
    assert body["count"] > 0
    for ing in body["data"]:
        assert ing["category"].lower() == "vegetables"


def test_api_search_by_name():
    body = client.get("/api/ingredients?search=tomato").json()
    assert any("tomato" in ing["name"].lower() for ing in body["data"])


def test_api_categories():
    body = client.get("/api/ingredients/categories").json()
    assert body["success"] is True
    assert body["data"] == sorted(body["data"])
    assert "vegetables" in body["data"]
    assert body["count"] == len(body["data"])


def test_api_substitutes():
    resp = client.get("/api/ingredients/chicken/substitutes")
    assert resp.status_code == 200
    body = resp.json()
    assert body["ingredient"] == "Chicken Breast"
    assert {s["name"] for s in body["data"]} == {"Chicken Thighs", "Tofu", "Turkey Breast"}
    assert body["count"] == 3


def test_api_substitutes_unknown_ingredient():
    resp = client.get("/api/ingredients/tomato/substitutes")
    assert resp.status_code == 404
    body = resp.json()
    assert body["success"] is False
    assert body["error"] == "Ingredient not found"
    assert "tomato" in body["message"]


def test_api_validate():
    resp = client.post("/api/ingredients/validate", json={"ingredients": ["Garlic", "tomato"]})
    assert resp.status_code == 200
    body = resp.json()
    assert body["totalIngredients"] == 2
    assert body["validIngredients"] == 1
    assert body["invalidIngredients"] == 1
    garlic, tomato = body["data"]
    assert garlic["found"] is True and garlic["ingredient"]["id"] == "garlic"
    assert tomato["found"] is False
    assert [s["name"] for s in tomato["suggestions"]] == ["Cherry Tomatoes", "Canned Tomatoes"]


def test_api_validate_empty_list():
    body = client.post("/api/ingredients/validate", json={"ingredients": []}).json()
    assert body["validIngredients"] == 0
    assert body["invalidIngredients"] == 0
    assert body["data"] == []


def test_api_validate_rejects_non_array():
    resp = client.post("/api/ingredients/validate", json={"ingredients": "garlic"})
    assert resp.status_code == 400
    assert resp.json()["success"] is False

    resp = client.post("/api/ingredients/validate", json={})
    assert resp.status_code == 400
    assert resp.json()["error"] == "Invalid input"
