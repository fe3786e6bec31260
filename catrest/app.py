import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from catrest.core.config import Settings, get_settings
from catrest.core.errors import CatRestError
from catrest.core.logging import configure_logging
from catrest.db.schema import build_schema_preparer
from catrest.repositories import CatRepository, build_repository
from catrest.routers import cats as cats_router
from catrest.services.cat_service import CatService

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and duration of every request."""

    async def dispatch(self, request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "%s %s -> %s (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response


def create_app(settings: Settings | None = None, repository: CatRepository | None = None) -> FastAPI:
    """Build the application. Compatible with ``uvicorn --factory catrest.app:create_app``.

    ``repository`` lets callers inject a store; otherwise one is built from
    ``settings.storage_backend``.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    repository = repository if repository is not None else build_repository(settings)
    preparer = build_schema_preparer(repository)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        preparer.prepare()
        logger.info(
            "catrest started (env=%s, backend=%s, base_path=%s)",
            settings.app_env,
            repository.backend,
            settings.base_path,
        )
        yield
        if settings.reset_schema_on_shutdown:
            preparer.revert()
        logger.info("catrest stopped")

    app = FastAPI(title="Cat REST API", lifespan=lifespan)
    app.state.settings = settings
    app.state.repository = repository
    app.state.schema_preparer = preparer
    app.state.cat_service = CatService(repository)

    app.add_middleware(RequestLoggingMiddleware)
    app.include_router(cats_router.build_router(settings.base_path))

    @app.get("/health")
    def health():
        try:
            count = repository.count()
        except CatRestError as exc:
            return JSONResponse(
                {"ok": False, "backend": repository.backend, "error": exc.code},
                status_code=503,
            )
        return {"ok": True, "backend": repository.backend, "count": count}

    return app
