"""Create or drop the cats table.

Run ``python -m catrest.db.schema`` to create the table on DATABASE_URL, or
add ``--drop`` to remove it.
"""
from __future__ import annotations

import argparse
import logging

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from catrest.core.config import get_settings
from catrest.core.errors import CatRestError, StorageError
from .models import CatRow
from .session import create_db_engine

logger = logging.getLogger(__name__)


class SchemaPreparer:
    """Owns the DDL for the cats table on one engine."""

    def __init__(self, engine: Engine) -> None:
        self.engine = engine
        self.table = CatRow.__table__

    def prepare(self) -> None:
        """Create the table if it does not exist yet. Safe to call repeatedly."""
        try:
            self.table.create(bind=self.engine, checkfirst=True)
        except SQLAlchemyError as exc:
            logger.exception("Failed to create table %s", self.table.name)
            raise StorageError(f"Could not create table {self.table.name}") from exc
        logger.info("Table %s ready", self.table.name)

    def revert(self) -> None:
        """Drop the table and everything stored in it."""
        try:
            self.table.drop(bind=self.engine, checkfirst=True)
        except SQLAlchemyError as exc:
            logger.exception("Failed to drop table %s", self.table.name)
            raise StorageError(f"Could not drop table {self.table.name}") from exc
        logger.info("Table %s dropped", self.table.name)


class NullSchemaPreparer:
    """Stand-in used with the in-memory backend, which has no schema."""

    def prepare(self) -> None:
        return None

    def revert(self) -> None:
        return None


def build_schema_preparer(repository) -> SchemaPreparer | NullSchemaPreparer:
    engine = getattr(repository, "engine", None)
    if engine is None:
        return NullSchemaPreparer()
    return SchemaPreparer(engine)


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(description="Create or drop the cats table")
    ap.add_argument("--drop", action="store_true", help="drop the table instead of creating it")
    ap.add_argument("--database-url", help="override DATABASE_URL")
    args = ap.parse_args(argv)

    url = args.database_url or get_settings().database_url
    preparer = SchemaPreparer(create_db_engine(url))
    if args.drop:
        preparer.revert()
        print("Table dropped.")
    else:
        preparer.prepare()
        print("Table created successfully.")


if __name__ == "__main__":
    try:
        main()
    except CatRestError as exc:
        raise SystemExit(f"Failed: {exc}") from exc
