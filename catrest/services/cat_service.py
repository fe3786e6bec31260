"""Cat use cases: request parsing and repository orchestration."""
from __future__ import annotations

import logging
import re
from typing import Any, Mapping, Union

import pydantic

from catrest.core.errors import ValidationError
from catrest.domain.cats import Cat, CatIn, describe_errors
from catrest.repositories import CatRepository

logger = logging.getLogger(__name__)

CAT_ID_PATTERN = re.compile(r"[+-]?[0-9]+")
# ids are stored as signed 64-bit integers
MIN_CAT_ID = -(2**63)
MAX_CAT_ID = 2**63 - 1


def parse_cat_id(raw: str | None) -> int:
    """Parse a path segment as an integer id, rejecting anything else."""
    if raw is None or not CAT_ID_PATTERN.fullmatch(raw):
        raise ValidationError(f"Cat id must be an integer, got {raw!r}")
    value = int(raw)
    if not MIN_CAT_ID <= value <= MAX_CAT_ID:
        raise ValidationError(f"Cat id {raw} is out of range")
    return value


def parse_payload(raw_body: bytes) -> CatIn:
    """Validate a request body that must hold a JSON object with the cat fields."""
    try:
        return CatIn.model_validate_json(raw_body or b"")
    except pydantic.ValidationError as exc:
        raise ValidationError(f"Invalid cat payload: {describe_errors(exc)}") from exc


class CatService:
    """Thin layer between the HTTP handlers and whichever repository is wired in."""

    def __init__(self, repository: CatRepository) -> None:
        self.repository = repository

    def list_cats(self) -> list[Cat]:
        return self.repository.list_all()

    def create_cat(self, payload: Union[CatIn, Mapping[str, Any]]) -> Cat:
        cat = Cat.from_json(payload)
        stored = self.repository.create(cat)
        logger.info("Created cat %s (%s)", stored.id, stored.name)
        return stored

    def get_cat(self, raw_id: str) -> Cat:
        return self.repository.get_by_id(parse_cat_id(raw_id))
