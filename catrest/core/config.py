"""
Configuration helpers for the catrest service.

Settings are read once from environment variables so that routers, services
and repositories never touch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os


STORAGE_BACKENDS = ("memory", "sql")


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str = "dev"
    storage_backend: str = "memory"
    database_url: str = ""
    base_path: str = "/catREST"
    log_level: str = "INFO"
    reset_schema_on_shutdown: bool = False


def normalize_base_path(value: str | None) -> str:
    """Return the mount path with a leading slash and no trailing slash."""
    path = (value or "").strip().strip("/")
    if not path:
        return "/catREST"
    return "/" + path


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        storage_backend=(os.getenv("CATREST_STORAGE") or "memory").strip().lower(),
        database_url=os.getenv("DATABASE_URL", "").strip(),
        base_path=normalize_base_path(os.getenv("CATREST_BASE_PATH")),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").strip().upper(),
        reset_schema_on_shutdown=_bool(os.getenv("CATREST_RESET_SCHEMA"), False),
    )
