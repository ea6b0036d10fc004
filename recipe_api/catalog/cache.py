from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

_cache: dict[str, dict[str, Any]] = {}
_hits: int = 0
_misses: int = 0


def _make_key(path: Path) -> str:
    return str(path.resolve())


def cache_get(path: Path, mtime_ns: int) -> list[dict[str, Any]] | None:
    """Return the cached collection for ``path`` if it was read at ``mtime_ns``."""
    global _hits, _misses
    key = _make_key(path)
    entry = _cache.get(key)
    if entry and entry["mtime_ns"] == mtime_ns:
        _hits += 1
        return entry["value"]
    if entry:
        logger.debug("Cached copy of %s is stale, reloading", path)
        # A concurrent request may already have evicted it
        _cache.pop(key, None)
    _misses += 1
    return None


def cache_set(path: Path, mtime_ns: int, value: list[dict[str, Any]]) -> None:
    key = _make_key(path)
    _cache[key] = {"value": value, "mtime_ns": mtime_ns}


def get_cache_stats() -> dict:
    """Hit/miss counters plus the modification time each cached file was read at."""
    lookups = _hits + _misses
    entries = {key: entry["mtime_ns"] for key, entry in list(_cache.items())}
    return {
        "size": len(entries),
        "hits": _hits,
        "misses": _misses,
        "hit_rate": round(_hits / lookups * 100, 1) if lookups else 0.0,
        "entries": entries,
    }


def clear_cache(path: Path | None = None) -> None:
    """Evict one file's snapshot, or everything (counters included) when no path is given."""
    global _hits, _misses
    if path is not None:
        _cache.pop(_make_key(path), None)
        return
    _cache.clear()
    _hits = 0
    _misses = 0
