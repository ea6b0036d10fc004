from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent / ".env")

_DEFAULT_DATA_DIR = Path(__file__).resolve().parent / "data"


def _split_origins(raw: str) -> tuple[str, ...]:
    return tuple(o.strip() for o in raw.split(",") if o.strip())


@dataclass(frozen=True)
class AppConfig:
    data_dir: Path = Path(os.getenv("RECIPE_DATA_DIR") or _DEFAULT_DATA_DIR)
    environment: str = os.getenv("APP_ENV", "development")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    cache_enabled: bool = os.getenv("DATA_CACHE_ENABLED", "false").lower() == "true"
    cors_origins: tuple[str, ...] = field(
        default_factory=lambda: _split_origins(os.getenv("CORS_ORIGINS", "*"))
    )
    host: str = os.getenv("HOST", "127.0.0.1")
    port: int = int(os.getenv("PORT", "3001"))
    recipes_filename: str = "recipes.json"
    ingredients_filename: str = "ingredients.json"

    @property
    def recipes_path(self) -> Path:
        return self.data_dir / self.recipes_filename

    @property
    def ingredients_path(self) -> Path:
        return self.data_dir / self.ingredients_filename

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"


DEFAULT_APP_CONFIG = AppConfig()
