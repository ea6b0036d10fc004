from __future__ import annotations

import logging
import time
from datetime import datetime, timezone

from fastapi import Depends, FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .catalog.cache import get_cache_stats
from .catalog.loader import load_ingredients, load_recipes
from .config import DEFAULT_APP_CONFIG, AppConfig
from .errors import InternalFailure, RecipeAPIError
from .ingredients.models import ValidateRequest
from .ingredients.service import (
    find_substitutes,
    list_categories,
    list_ingredients,
    validate_ingredients,
)
from .recipes.models import RateRequest, SearchRequest
from .recipes.search import get_recipe, list_recipes, rate_recipe, search_recipes
from .recommendations.engine import recommend
from .recommendations.listings import popular_recipes, quick_recipes
from .recommendations.models import RecommendationRequest

logging.basicConfig(
    level=DEFAULT_APP_CONFIG.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

SERVICE_NAME = "Recipe Recommender API"

app = FastAPI(title=SERVICE_NAME, version="1.0.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(DEFAULT_APP_CONFIG.cors_origins),
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_config() -> AppConfig:
    return DEFAULT_APP_CONFIG


@app.middleware("http")
async def log_and_secure(request: Request, call_next):
    start_time = time.time()
    response = await call_next(request)
    elapsed_ms = round((time.time() - start_time) * 1000, 1)
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    logger.info(
        "%s %s -> %d (%.1f ms)",
        request.method, request.url.path, response.status_code, elapsed_ms,
    )
    return response


# ── Error handlers ───────────────────────────────────────────────────────


@app.exception_handler(RecipeAPIError)
async def recipe_api_error_handler(request: Request, exc: RecipeAPIError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    details = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        details.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return JSONResponse(
        status_code=400,
        content={"success": False, "error": "Invalid input", "message": "; ".join(details)},
    )


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 404:
        return JSONResponse(
            status_code=404,
            content={
                "success": False,
                "error": "Route not found",
                "message": f"Cannot {request.method} {request.url.path}",
            },
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": str(exc.detail), "message": str(exc.detail)},
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    message = "Something went wrong" if DEFAULT_APP_CONFIG.is_production else str(exc)
    failure = InternalFailure(message)
    return JSONResponse(status_code=failure.status_code, content=failure.to_dict())


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {
        "status": "OK",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "service": SERVICE_NAME,
    }


@app.get("/api/cache/stats")
def cache_stats(config: AppConfig = Depends(get_config)) -> dict:
    return {**get_cache_stats(), "enabled": config.cache_enabled}


# ── Recipe endpoints ─────────────────────────────────────────────────────


@app.get("/api/recipes")
def recipes_index(
    dietary: str | None = None,
    max_time: int | float | None = Query(default=None, alias="maxTime"),
    difficulty: str | None = None,
    config: AppConfig = Depends(get_config),
) -> dict:
    tags = dietary.split(",") if dietary else None
    results = list_recipes(
        load_recipes(config), dietary=tags, max_time=max_time, difficulty=difficulty,
    )
    return {"success": True, "count": len(results), "data": results}


@app.post("/api/recipes/search")
def recipes_search(body: SearchRequest, config: AppConfig = Depends(get_config)) -> dict:
    result = search_recipes(
        load_recipes(config),
        body.ingredients,
        must_have=body.must_have,
        dietary=body.dietary,
        max_time=body.max_time,
    )
    return {"success": True, **result}


@app.get("/api/recipes/{recipe_id}")
def recipes_show(recipe_id: str, config: AppConfig = Depends(get_config)) -> dict:
    return {"success": True, "data": get_recipe(load_recipes(config), recipe_id)}


@app.post("/api/recipes/{recipe_id}/rate")
def recipes_rate(recipe_id: str, body: RateRequest) -> dict:
    rating = rate_recipe(recipe_id, body.rating, body.review)
    return {
        "success": True,
        "message": "Rating submitted successfully",
        "data": rating.model_dump(by_alias=True),
    }


# ── Ingredient endpoints ─────────────────────────────────────────────────


@app.get("/api/ingredients")
def ingredients_index(
    category: str | None = None,
    search: str | None = None,
    config: AppConfig = Depends(get_config),
) -> dict:
    results = list_ingredients(load_ingredients(config), category=category, search=search)
    return {"success": True, "count": len(results), "data": results}


@app.get("/api/ingredients/categories")
def ingredients_categories(config: AppConfig = Depends(get_config)) -> dict:
    categories = list_categories(load_ingredients(config))
    return {"success": True, "count": len(categories), "data": categories}


@app.get("/api/ingredients/{name}/substitutes")
def ingredients_substitutes(name: str, config: AppConfig = Depends(get_config)) -> dict:
    target, substitutes = find_substitutes(load_ingredients(config), name)
    return {
        "success": True,
        "ingredient": target.get("name"),
        "count": len(substitutes),
        "data": substitutes,
    }


@app.post("/api/ingredients/validate")
def ingredients_validate(body: ValidateRequest, config: AppConfig = Depends(get_config)) -> dict:
    result = validate_ingredients(load_ingredients(config), body.ingredients)
    return {
        "success": True,
        "totalIngredients": result.total_ingredients,
        "validIngredients": result.valid_ingredients,
        "invalidIngredients": result.invalid_ingredients,
        "data": [item.model_dump() for item in result.items],
    }


# ── Recommendation endpoints ─────────────────────────────────────────────


@app.post("/api/recommendations")
def recommendations(
    body: RecommendationRequest, config: AppConfig = Depends(get_config)
) -> dict:
    return {"success": True, **recommend(load_recipes(config), body)}


@app.get("/api/recommendations/popular")
def recommendations_popular(
    limit: int = Query(default=10, ge=0),
    category: str | None = None,
    config: AppConfig = Depends(get_config),
) -> dict:
    return {"success": True, **popular_recipes(load_recipes(config), limit=limit, category=category)}


@app.get("/api/recommendations/quick")
def recommendations_quick(
    max_time: int | float = Query(default=30, alias="maxTime"),
    limit: int = Query(default=10, ge=0),
    config: AppConfig = Depends(get_config),
) -> dict:
    return {"success": True, **quick_recipes(load_recipes(config), max_time=max_time, limit=limit)}
