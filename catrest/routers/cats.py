from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from catrest.core.errors import CatRestError, MalformedRecordError
from catrest.services.cat_service import CatService, parse_payload

logger = logging.getLogger(__name__)


def _get_cat_service(request: Request) -> CatService:
    svc = getattr(getattr(request.app, "state", None), "cat_service", None)
    if not svc:
        raise RuntimeError("CatService not configured")
    return svc


async def _raw_body(request: Request) -> bytes:
    return await request.body()


def _error_response(err: CatRestError) -> JSONResponse:
    if isinstance(err, MalformedRecordError):
        logger.error("Malformed record in storage: %s", err.message)
    return JSONResponse(
        {"success": False, "error": err.code, "message": err.message},
        status_code=err.status_code,
    )


def index(request: Request):
    svc = _get_cat_service(request)
    try:
        cats = svc.list_cats()
    except CatRestError as exc:
        return _error_response(exc)
    return JSONResponse([cat.to_json() for cat in cats])


def create(request: Request, body: bytes = Depends(_raw_body)):
    svc = _get_cat_service(request)
    try:
        cat = svc.create_cat(parse_payload(body))
    except CatRestError as exc:
        return _error_response(exc)
    return JSONResponse({"success": True, **cat.to_json()})


def show(cat_id: str, request: Request):
    svc = _get_cat_service(request)
    try:
        cat = svc.get_cat(cat_id)
    except CatRestError as exc:
        return _error_response(exc)
    return JSONResponse(cat.to_json())


# method, path below the base path, handler
ROUTES = (
    ("GET", "", index),
    ("POST", "", create),
    ("GET", "/{cat_id}", show),
)


def build_router(base_path: str) -> APIRouter:
    """Mount the cat handlers under ``base_path`` (e.g. ``/catREST``)."""
    router = APIRouter(prefix=base_path, tags=["cats"])
    for method, path, handler in ROUTES:
        router.add_api_route(path, handler, methods=[method], name=f"cats.{handler.__name__}")
    return router
