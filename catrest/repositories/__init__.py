"""
Persistence adapters.

Services depend on the CatRepository protocol rather than on a concrete
store; the backend is chosen from settings when the app is wired.
"""
from __future__ import annotations

from typing import Protocol

from catrest.core.config import Settings
from catrest.core.errors import ConfigurationError
from catrest.db.session import create_db_engine
from catrest.domain.cats import Cat

from .memory_repository import InMemoryCatRepository
from .sql_repository import SQLCatRepository


class CatRepository(Protocol):
    backend: str

    def list_all(self) -> list[Cat]: ...

    def create(self, cat: Cat) -> Cat: ...

    def get_by_id(self, cat_id: int) -> Cat: ...

    def count(self) -> int: ...


def build_repository(settings: Settings) -> CatRepository:
    if settings.storage_backend == "memory":
        return InMemoryCatRepository()
    if settings.storage_backend == "sql":
        return SQLCatRepository(create_db_engine(settings.database_url))
    raise ConfigurationError(
        f"Unknown storage backend {settings.storage_backend!r}; use 'memory' or 'sql'."
    )


__all__ = ["CatRepository", "InMemoryCatRepository", "SQLCatRepository", "build_repository"]
