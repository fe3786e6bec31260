"""Error taxonomy shared by the domain, repositories and routers."""
from __future__ import annotations


class CatRestError(Exception):
    """Base error carrying the code/status the HTTP layer answers with."""

    code = "error"
    status_code = 500

    def __init__(self, message: str, code: str | None = None, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        if status_code is not None:
            self.status_code = status_code


class ValidationError(CatRestError):
    """Malformed or missing client input."""

    code = "validation_error"
    status_code = 400


class NotFoundError(CatRestError):
    """No record exists for the requested id."""

    code = "not_found"
    status_code = 404


class StorageError(CatRestError):
    """The backing store is unreachable or failed."""

    code = "storage_error"
    status_code = 500


class MalformedRecordError(StorageError):
    """A stored row does not match the expected shape."""


class ConfigurationError(CatRestError):
    """Invalid settings detected while wiring the application."""

    code = "configuration_error"
