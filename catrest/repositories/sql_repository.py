"""Cat storage backed by SQLAlchemy."""
from __future__ import annotations

import logging

from sqlalchemy import func, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from catrest.core.errors import NotFoundError, StorageError
from catrest.db.models import CatRow
from catrest.db.session import session_factory, session_scope
from catrest.domain.cats import Cat

logger = logging.getLogger(__name__)


class SQLCatRepository:
    """CRUD helpers wrapping an SQLAlchemy session per call.

    Ids come from the table's autoincrement key. Driver failures are raised
    as StorageError with the original exception chained.
    """

    backend = "sql"

    def __init__(self, engine: Engine) -> None:
        self.engine = engine
        self._sessions = session_factory(engine)

    def list_all(self) -> list[Cat]:
        try:
            with session_scope(self._sessions) as session:
                rows = session.execute(select(CatRow).order_by(CatRow.id)).scalars().all()
                records = [row.as_row() for row in rows]
        except SQLAlchemyError as exc:
            logger.exception("Listing cats failed")
            raise StorageError("Could not list cats") from exc
        return [Cat.from_row(record) for record in records]

    def create(self, cat: Cat) -> Cat:
        entity = CatRow(name=cat.name, breed=cat.breed, snack=cat.snack)
        try:
            with session_scope(self._sessions) as session:
                session.add(entity)
                session.commit()
                session.refresh(entity)
                record = entity.as_row()
        except SQLAlchemyError as exc:
            logger.exception("Storing cat failed")
            raise StorageError("Could not store cat") from exc
        logger.debug("Stored cat %s", record["id"])
        return Cat.from_row(record)

    def get_by_id(self, cat_id: int) -> Cat:
        try:
            with session_scope(self._sessions) as session:
                entity = session.get(CatRow, cat_id)
                record = entity.as_row() if entity else None
        except SQLAlchemyError as exc:
            logger.exception("Loading cat %s failed", cat_id)
            raise StorageError(f"Could not load cat {cat_id}") from exc
        if record is None:
            raise NotFoundError(f"Cat {cat_id} not found")
        return Cat.from_row(record)

    def count(self) -> int:
        try:
            with session_scope(self._sessions) as session:
                return int(session.execute(select(func.count()).select_from(CatRow)).scalar_one())
        except SQLAlchemyError as exc:
            logger.exception("Counting cats failed")
            raise StorageError("Could not count cats") from exc
