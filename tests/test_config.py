from __future__ import annotations

import pytest

from catrest.core.config import Settings, get_settings, normalize_base_path
from catrest.core.errors import ConfigurationError
from catrest.repositories import InMemoryCatRepository, SQLCatRepository, build_repository


def test_defaults(monkeypatch):
    for name in ("APP_ENV", "CATREST_STORAGE", "DATABASE_URL", "CATREST_BASE_PATH", "LOG_LEVEL", "CATREST_RESET_SCHEMA"):
        monkeypatch.delenv(name, raising=False)
    settings = get_settings()
    assert settings == Settings()
    assert settings.base_path == "/catREST"
    assert settings.storage_backend == "memory"


def test_environment_overrides(monkeypatch, db_url):
    monkeypatch.setenv("CATREST_STORAGE", " SQL ")
    monkeypatch.setenv("DATABASE_URL", db_url)
    monkeypatch.setenv("CATREST_BASE_PATH", "api/cats/")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("CATREST_RESET_SCHEMA", "yes")
    settings = get_settings()
    assert settings.storage_backend == "sql"
    assert settings.database_url == db_url
    assert settings.base_path == "/api/cats"
    assert settings.log_level == "DEBUG"
    assert settings.reset_schema_on_shutdown is True


@pytest.mark.parametrize("raw, expected", [(None, "/catREST"), ("", "/catREST"), ("/", "/catREST"), ("cats", "/cats"), ("/a/b/", "/a/b")])
def test_normalize_base_path(raw, expected):
    assert normalize_base_path(raw) == expected


def test_build_repository_selects_backend(db_url):
    assert isinstance(build_repository(Settings(storage_backend="memory")), InMemoryCatRepository)
    repo = build_repository(Settings(storage_backend="sql", database_url=db_url))
    assert isinstance(repo, SQLCatRepository)
    repo.engine.dispose()


def test_sql_backend_requires_database_url():
    with pytest.raises(ConfigurationError):
        build_repository(Settings(storage_backend="sql", database_url=""))


def test_unknown_backend_is_rejected():
    with pytest.raises(ConfigurationError):
        build_repository(Settings(storage_backend="redis"))
