"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from nutrition_ai.api.callables import resolve_caller
from nutrition_ai.api.callables import router as callables_router
from nutrition_ai.app_logging import configure_logging
from nutrition_ai.containers import AppContainer
from nutrition_ai.errors import (
    CallError,
    InternalError,
    InvalidArgumentError,
    UnauthenticatedError,
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(callables_router)

    @app.exception_handler(CallError)
    async def call_error_handler(request: Request, exc: CallError) -> JSONResponse:
        if isinstance(exc, InternalError):
            logger.error("%s failed: %s", request.url.path, exc.message)
        else:
            logger.info("%s rejected (%s): %s", request.url.path, exc.kind, exc)
        return _error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        # The body is decoded before dependencies run; identity still comes first.
        try:
            resolve_caller(request)
        except UnauthenticatedError as auth_error:
            logger.info("%s rejected (%s)", request.url.path, auth_error.kind)
            return _error_response(auth_error)
        logger.info("%s rejected invalid body", request.url.path)
        return _error_response(InvalidArgumentError(_describe(exc)))

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app


def _error_response(exc: CallError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.http_status,
        content={"success": False, "error": exc.to_dict()},
    )


def _describe(exc: RequestValidationError) -> str:
    """Summarize the first body validation error."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    return f"{location or 'body'}: {first.get('msg', 'invalid value')}"
