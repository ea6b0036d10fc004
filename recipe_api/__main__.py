"""
Run the API server.

Usage:
    python -m recipe_api
"""
from __future__ import annotations

import uvicorn

from .config import DEFAULT_APP_CONFIG


def main() -> None:
    uvicorn.run(
        "recipe_api.app:app",
        host=DEFAULT_APP_CONFIG.host,
        port=DEFAULT_APP_CONFIG.port,
        log_level=DEFAULT_APP_CONFIG.log_level.lower(),
    )


if __name__ == "__main__":
    main()
