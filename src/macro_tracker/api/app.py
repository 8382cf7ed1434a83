"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from macro_tracker.api.admin import router as admin_router
from macro_tracker.api.history import router as history_router
from macro_tracker.api.meals import router as meals_router
from macro_tracker.api.recipes import router as recipes_router
from macro_tracker.app_logging import configure_logging
from macro_tracker.containers import AppContainer
from macro_tracker.errors import MacroTrackerError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="Macro Tracker", lifespan=lifespan)
    app.state.container = container

    app.include_router(meals_router)
    app.include_router(recipes_router)
    app.include_router(history_router)
    app.include_router(admin_router)

    @app.exception_handler(MacroTrackerError)
    async def handle_tracker_error(
        request: Request, exc: MacroTrackerError
    ) -> JSONResponse:
        if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error(
                "Request failed: %s %s",
                request.method,
                request.url.path,
                exc_info=exc,
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": _user_message(container, exc)},
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": _format_validation_errors(exc)},
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "Unhandled error: %s %s", request.method, request.url.path, exc_info=exc
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app


def _user_message(container: AppContainer, exc: MacroTrackerError) -> str:
    """Return the error message, with the cause attached in local runs."""
    cause = exc.__cause__
    if container.settings.environment == "local" and cause is not None:
        return f"{exc.message} (debug: {type(cause).__name__}: {cause})"
    return exc.message


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        location = ".".join(loc)
        message = str(error.get("msg", "invalid value"))
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "Invalid request"
