from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from ..config import DEFAULT_APP_CONFIG, AppConfig
from .cache import cache_get, cache_set

logger = logging.getLogger(__name__)


def _read_collection(path: Path) -> list[dict[str, Any]]:
    with path.open("r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"expected a JSON array, got {type(data).__name__}")
    return data


def load_collection(path: Path, use_cache: bool = False) -> list[dict[str, Any]]:
    """
    Load a JSON array of records from ``path``.

    Any failure (missing file, unreadable file, invalid JSON, non-array
    payload) is logged and yields an empty list. Failures are never cached.
    """
    try:
        mtime_ns = path.stat().st_mtime_ns
        if use_cache:
            cached = cache_get(path, mtime_ns)
            if cached is not None:
                return list(cached)
        records = _read_collection(path)
    except (OSError, ValueError) as exc:
        logger.error("Error loading %s: %s", path, exc)
        return []

    if use_cache:
        cache_set(path, mtime_ns, records)
    return list(records)


def load_recipes(config: AppConfig = DEFAULT_APP_CONFIG) -> list[dict[str, Any]]:
    return load_collection(config.recipes_path, use_cache=config.cache_enabled)


def load_ingredients(config: AppConfig = DEFAULT_APP_CONFIG) -> list[dict[str, Any]]:
    return load_collection(config.ingredients_path, use_cache=config.cache_enabled)
