"""Error Handlers: global exception handlers producing {statusCode, message}.

Invariants:
    - CatalogError -> its own http_status and message
    - RequestValidationError -> 400 with the first violated field and reason
    - HTTPException (unknown route, wrong method) -> same shape, Starlette's status
    - Exception (catch-all) -> 500, never leaks internal details or stack traces

Design Decisions:
    - Handlers registered once on the app: routes never catch or format errors
    - Extracted from main.py to keep the entry point small
"""

import logging
from collections.abc import Sequence

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from catalog_api.core.errors import CatalogError

logger = logging.getLogger(__name__)

_LOCATION_ROOTS = frozenset({"body", "query", "path", "header", "cookie"})


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_catalog_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _error_body(status_code: int, message: str) -> dict:
    return {"statusCode": status_code, "message": message}


def _register_catalog_error_handler(app: FastAPI) -> None:
    """Register catalog domain/infrastructure error handler."""

    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError):
        """Handle all catalog domain/infrastructure errors."""
        log = logger.warning if exc.http_status < 500 else logger.error
        log(
            f"CatalogError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "method": request.method,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        message = first_violation_message(exc.errors())
        logger.warning(
            f"Validation error on {request.url.path}: {message}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_error_body(status.HTTP_400_BAD_REQUEST, message),
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register handler for routing-level HTTP errors."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(exc.status_code, str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_error_body(
                status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error",
            ),
        )


def first_violation_message(errors: Sequence[dict]) -> str:
    """Describe the first violation as '<field>: <reason>'."""
    if not errors:
        return "Invalid request data"
    first = errors[0]
    if first.get("type") == "json_invalid":
        return f"body: {first.get('msg', 'JSON decode error')}"
    parts = [str(p) for p in first.get("loc", ()) if p not in _LOCATION_ROOTS]
    field = ".".join(parts) or str(first.get("loc", ("body",))[0])
    return f"{field}: {first.get('msg', 'invalid value')}"
