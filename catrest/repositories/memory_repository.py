"""Process-local cat storage. Everything is lost on restart."""
from __future__ import annotations

import logging
import threading
from typing import Dict

from catrest.core.errors import NotFoundError
from catrest.domain.cats import Cat

logger = logging.getLogger(__name__)


class InMemoryCatRepository:
    """Dict-backed repository; id assignment and insertion share one lock."""

    backend = "memory"

    def __init__(self) -> None:
        self._rows: Dict[int, dict] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def list_all(self) -> list[Cat]:
        with self._lock:
            rows = list(self._rows.values())
        return [Cat.from_row(row) for row in rows]

    def create(self, cat: Cat) -> Cat:
        with self._lock:
            cat_id = self._next_id
            self._next_id += 1
            stored = cat.with_id(cat_id)
            self._rows[cat_id] = stored.to_row()
        logger.debug("Stored cat %s in memory", cat_id)
        return stored

    def get_by_id(self, cat_id: int) -> Cat:
        with self._lock:
            row = self._rows.get(cat_id)
        if row is None:
            raise NotFoundError(f"Cat {cat_id} not found")
        return Cat.from_row(row)

    def count(self) -> int:
        with self._lock:
            return len(self._rows)
