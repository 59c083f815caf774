from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from api.core.config import Settings, get_settings
from api.core.logging import configure_logging
from api.repositories.feedback_store import FeedbackStore
from api.routers import feedback as feedback_router
from api.routers import health as health_router

logger = logging.getLogger(__name__)


def _route_not_found() -> JSONResponse:
    return JSONResponse({"success": False, "message": "Route not found"}, status_code=404)


def _internal_error() -> JSONResponse:
    return JSONResponse({"success": False, "message": "Internal server error"}, status_code=500)


class ErrorBoundaryMiddleware(BaseHTTPMiddleware):
    """Turn uncaught errors into the generic 500 envelope.

    Installed inside CORSMiddleware so error responses keep the CORS headers.
    """

    async def dispatch(self, request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            logger.error("Server Error on %s %s", request.method, request.url.path, exc_info=exc)
            return _internal_error()


async def _http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # unknown path and known path with an unsupported method look the same to clients
    if exc.status_code in (404, 405):
        return _route_not_found()
    return JSONResponse(
        {"success": False, "message": str(exc.detail)},
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


async def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    # last resort for failures raised by the middleware stack itself
    logger.error("Server Error on %s %s", request.method, request.url.path, exc_info=exc)
    return _internal_error()


def log_startup_banner(settings: Settings, store: FeedbackStore) -> None:
    logger.info("Server running on port %s", settings.port)
    logger.info("Feedback API: http://localhost:%s/feedback", settings.port)
    logger.info("Data file: %s", store.data_file)
    logger.info("Loaded %d existing feedback entries", len(store))


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the API: load the stored collection, wire routers and handlers."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    store = FeedbackStore(settings.data_file)
    store.load()

    app = FastAPI(title="Feedback API")
    app.state.settings = settings
    app.state.feedback_store = store

    # last added runs first: CORS wraps the error boundary
    app.add_middleware(ErrorBoundaryMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _unhandled_exception_handler)

    app.include_router(feedback_router.router)
    app.include_router(health_router.router)
    return app
