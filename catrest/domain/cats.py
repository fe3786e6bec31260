"""Cat entity, its request schema and its row/JSON conversions."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional, Union

import pydantic
from pydantic import BaseModel, ConfigDict, StrictStr, field_validator

from catrest.core.errors import MalformedRecordError, ValidationError

CAT_FIELDS = ("name", "breed", "snack")
ROW_FIELDS = ("id",) + CAT_FIELDS


class CatIn(BaseModel):
    """Schema for creating a cat. Unknown keys (including ``id``) are ignored."""

    model_config = ConfigDict(extra="ignore")

    name: StrictStr
    breed: StrictStr
    snack: StrictStr

    @field_validator("name", "breed", "snack")
    @classmethod
    def _encodable(cls, value: str) -> str:
        # lone surrogates decode from JSON escapes but cannot be stored or rendered
        try:
            value.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise ValueError("must be valid UTF-8 text") from exc
        return value


def describe_errors(exc: pydantic.ValidationError) -> str:
    """Flatten pydantic errors into one message naming every offending field."""
    parts = []
    for err in exc.errors():
        loc = ".".join(str(item) for item in err.get("loc", ()))
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts)


def validate_cat_payload(payload: Union[CatIn, Mapping[str, Any]]) -> CatIn:
    if isinstance(payload, CatIn):
        return payload
    try:
        return CatIn.model_validate(payload)
    except pydantic.ValidationError as exc:
        raise ValidationError(f"Invalid cat payload: {describe_errors(exc)}") from exc


@dataclass(frozen=True)
class Cat:
    """A cat record. ``id`` stays None until a repository stores it."""

    name: str
    breed: str
    snack: str
    id: Optional[int] = None

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    def with_id(self, cat_id: int) -> "Cat":
        return replace(self, id=cat_id)

    def to_row(self) -> dict:
        return {field: getattr(self, field) for field in ROW_FIELDS}

    def to_json(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "breed": self.breed,
            "snack": self.snack,
        }

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Cat":
        """Rebuild a stored cat, rejecting rows with missing or mistyped fields."""
        missing = [field for field in ROW_FIELDS if field not in row]
        if missing:
            raise MalformedRecordError(f"Row is missing field(s): {', '.join(missing)}")
        cat_id = row["id"]
        if not isinstance(cat_id, int) or isinstance(cat_id, bool):
            raise MalformedRecordError(f"Row field 'id' must be an integer, got {cat_id!r}")
        for field in CAT_FIELDS:
            if not isinstance(row[field], str):
                raise MalformedRecordError(
                    f"Row {cat_id}: field '{field}' must be text, got {type(row[field]).__name__}"
                )
        return cls(name=row["name"], breed=row["breed"], snack=row["snack"], id=cat_id)

    @classmethod
    def from_json(cls, payload: Union[CatIn, Mapping[str, Any]]) -> "Cat":
        """Build an unsaved cat from a request payload or an already validated CatIn."""
        data = validate_cat_payload(payload)
        return cls(name=data.name, breed=data.breed, snack=data.snack)
