"""Engine/session helpers for the SQL backend."""
from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session

from catrest.core.errors import ConfigurationError

Base = declarative_base()


def create_db_engine(database_url: str) -> Engine:
    url = (database_url or "").strip()
    if not url:
        raise ConfigurationError("DATABASE_URL must be configured to use the SQL backend.")
    connect_args = {}
    if url.startswith("sqlite"):
        # handlers run on the threadpool, so connections cross threads
        connect_args["check_same_thread"] = False
    return create_engine(url, future=True, pool_pre_ping=True, connect_args=connect_args)


def session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False, future=True)


@contextmanager
def session_scope(factory: sessionmaker) -> Iterator[Session]:
    session: Session = factory()
    try:
        yield session
    finally:
        session.close()
