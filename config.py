"""Environment-driven settings. A local .env file is loaded if present."""

import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Optional, Tuple

from dotenv import load_dotenv

from models.subscription import FREE_ROUND_LIMIT

DEFAULT_CORS_ORIGINS = ("http://localhost:5173",)


@dataclass(frozen=True)
class Settings:
    database_url: Optional[str] = None
    free_round_limit: int = FREE_ROUND_LIMIT
    cors_origins: Tuple[str, ...] = field(default=DEFAULT_CORS_ORIGINS)
    log_level: str = "INFO"


def _parse_origins(value: Optional[str]) -> Tuple[str, ...]:
    if not value:
        return DEFAULT_CORS_ORIGINS
    return tuple(origin.strip() for origin in value.split(",") if origin.strip())


def _parse_int(value: Optional[str], default: int) -> int:
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise ValueError(f"Expected an integer, got {value!r}") from exc


def load_settings() -> Settings:
    """Read settings from the process environment."""
    load_dotenv()
    return Settings(
        database_url=os.environ.get("DATABASE_URL"),
        free_round_limit=_parse_int(os.environ.get("FREE_ROUND_LIMIT"), FREE_ROUND_LIMIT),
        cors_origins=_parse_origins(os.environ.get("CORS_ORIGINS")),
        log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()
