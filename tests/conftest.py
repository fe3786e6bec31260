from __future__ import annotations

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Garante que o pacote catrest seja importável sem instalação
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from catrest.app import create_app  # noqa: E402
from catrest.core import config as core_config  # noqa: E402
from catrest.core.config import Settings  # noqa: E402
from catrest.db.schema import SchemaPreparer  # noqa: E402
from catrest.db.session import create_db_engine  # noqa: E402
from catrest.repositories import InMemoryCatRepository, SQLCatRepository  # noqa: E402


@pytest.fixture(autouse=True)
def clear_settings_cache():
    core_config.get_settings.cache_clear()
    yield
    core_config.get_settings.cache_clear()


@pytest.fixture()
def db_url(tmp_path):
    return f"sqlite:///{tmp_path / 'cats.db'}"


@pytest.fixture()
def engine(db_url):
    """Temporary SQLite engine, disposed on teardown so the file is not left locked."""
    eng = create_db_engine(db_url)
    yield eng
    eng.dispose()


@pytest.fixture()
def sql_repo(engine):
    SchemaPreparer(engine).prepare()
    return SQLCatRepository(engine)


@pytest.fixture()
def memory_repo():
    return InMemoryCatRepository()


@pytest.fixture(params=["memory", "sql"])
def client(request, db_url):
    """TestClient running the full app (lifespan included) on each backend."""
    settings = Settings(storage_backend=request.param, database_url=db_url)
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client
    engine = getattr(app.state.repository, "engine", None)
    if engine is not None:
        engine.dispose()
