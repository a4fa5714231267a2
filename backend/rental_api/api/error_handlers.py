"""Error Handlers — global exception handlers for the rental API.

Invariants:
    - RentalApiError → its http_status with {"error": message}
    - RequestValidationError (malformed/mistyped body) → 400 {"error": "Invalid input"}
    - HTTPException (unknown route, wrong method) → its status with {"error": detail}
    - Exception (catch-all) → 500 {"error": str(exc)} — the raw cause is surfaced

Design Decisions:
    - Layered handlers: domain (RentalApiError), validation (Pydantic),
      routing (HTTPException), catch-all (Exception)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from rental_api.core.errors import InvalidInputError, RentalApiError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_rental_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_rental_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RentalApiError)
    async def rental_error_handler(request: Request, exc: RentalApiError):
        """Handle validation, not-found and store errors raised by handlers."""
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"{exc.code}: {exc.message}",
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

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Body failed its schema — reported without field details."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"path": request.url.path, "method": request.method},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=InvalidInputError().to_response(),
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        """Unknown routes and disallowed methods use the same envelope."""
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": str(exc)},
        )
