"""
Translation of service errors into enveloped HTTP responses.

Endpoints wrap their service calls in ``translate_errors(message)``:
record misses become 404, schema failures 400 and any other
``RecordsError`` a 500 carrying ``message`` plus the raw error text.
``register_exception_handlers`` renders ``ApiError`` and the framework's
own errors with the same ``{status, message, data, error}`` envelope.
"""

import logging
from contextlib import contextmanager
from typing import Any, Iterator, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..core.errors import RecordNotFound, RecordsError, RecordValidationError
from ..schemas.envelope import envelope

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """An error that should be returned to the client as an envelope."""

    def __init__(self, status_code: int, message: str, error: Optional[str] = None, data: Any = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.error = error
        self.data = data


@contextmanager
def translate_errors(message: str) -> Iterator[None]:
    """Convert ``RecordsError`` raised in the block into ``ApiError``."""
    try:
        yield
    except RecordNotFound as exc:
        raise ApiError(status.HTTP_404_NOT_FOUND, str(exc)) from exc
    except RecordValidationError as exc:
        raise ApiError(status.HTTP_400_BAD_REQUEST, str(exc)) from exc
    except RecordsError as exc:
        logger.exception(message)
        raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, message, error=str(exc)) from exc


def _describe(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()))
        parts.append(f"{location}: {err.get('msg')}")
    return "; ".join(parts)


def register_exception_handlers(app: FastAPI) -> None:
    """Register envelope-producing exception handlers on ``app``."""

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=envelope(exc.status_code, exc.message, data=exc.data, error=exc.error),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        detail = _describe(exc)
        logger.warning("Invalid request %s %s: %s", request.method, request.url.path, detail)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=envelope(status.HTTP_400_BAD_REQUEST, "Invalid request", error=detail),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=envelope(exc.status_code, str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=envelope(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error", error=str(exc)),
        )
