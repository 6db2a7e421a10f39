"""Global exception handlers — translate domain errors to HTTP responses.

Each domain exception maps to a specific HTTP status code and the
standard ``{"status": "error", "message": "..."}`` envelope.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from commits_since_tag.domain.exceptions import (
    ApiError,
    CommitsSinceTagError,
    ConfigurationError,
    ForkedRepositoryError,
    MissingVersionTagError,
    NoRepositoriesError,
    RepoNameFormatError,
    TransportError,
)

logger = logging.getLogger(__name__)

_EXCEPTION_STATUS: list[tuple[type[CommitsSinceTagError], int]] = [
    (RepoNameFormatError, 422),
    (ForkedRepositoryError, 422),
    (MissingVersionTagError, 404),
    (NoRepositoriesError, 404),
    (TransportError, 502),
    (ConfigurationError, 500),
]


def _error_json(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"status": "error", "message": message},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Attach exception handlers to the FastAPI application."""

    # ── Domain exceptions ───────────────────────────────────────────────

    for exc_type, code in _EXCEPTION_STATUS:

        def _make_handler(
            status_code: int,
        ):  # type: ignore[no-untyped-def]
            async def handler(request: Request, exc: Exception) -> JSONResponse:
                logger.warning("%s: %s", type(exc).__name__, exc)
                return _error_json(status_code, str(exc))

            return handler

        app.add_exception_handler(exc_type, _make_handler(code))

    # ── Upstream API errors ─────────────────────────────────────────────

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
        logger.warning("ApiError %d on %s: %s", exc.status_code, exc.path, exc)
        return _error_json(404 if exc.status_code == 404 else 502, str(exc))

    # ── Catch-all for unexpected errors ─────────────────────────────────

    @app.exception_handler(Exception)
    async def generic_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception")
        return _error_json(500, "An unexpected error occurred. Please try again later.")
