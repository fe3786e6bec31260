"""Cat REST API: a FastAPI service exposing one CRUD resource."""

from catrest.app import create_app

__all__ = ["create_app"]
