"""
Error envelope shared by every endpoint.

Clients always receive `{"success": false, "error": "...", ...}` on failure,
whether the error came from a route (`HTTPException`, `ApiError`), from the
router itself (404/405), or from request validation.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from http import HTTPStatus
from typing import Any, Iterator

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

# Detail Starlette gives the 405 it raises for an unrouted method.
ROUTER_METHOD_NOT_ALLOWED = HTTPStatus.METHOD_NOT_ALLOWED.phrase


class ApiError(Exception):
    """
    An error that maps directly to an HTTP response.

    `message` carries the underlying cause for 500s (the client-facing `error`
    stays generic).
    """

    def __init__(self, status_code: int, error: str, *, message: str | None = None) -> None:
        super().__init__(error)
        self.status_code = status_code
        self.error = error
        self.message = message


def error_body(error: str, *, message: str | None = None, **extra: Any) -> dict[str, Any]:
    body: dict[str, Any] = {"success": False, "error": error}
    if message is not None:
        body["message"] = message
    body.update(extra)
    return body


@contextmanager
def recover_as(error: str, *, event: str) -> Iterator[None]:
    """
    Convert unexpected failures (DB errors, pool not initialized, ...) in the
    wrapped block into a logged 500 `ApiError`.
    """
    try:
        yield
    except (ApiError, HTTPException):
        raise
    except Exception as exc:
        logger.exception(event)
        raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, error, message=str(exc)) from exc


async def api_error_handler(_: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.error, message=exc.message))


async def http_error_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    detail = exc.detail
    # Only the router's own 405 is renamed; routes may raise 405 with their own text.
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED and detail == ROUTER_METHOD_NOT_ALLOWED:
        detail = "Method not allowed"
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(detail)),
        headers=getattr(exc, "headers", None),
    )


async def validation_error_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    details = [
        {"loc": [str(part) for part in err.get("loc", ())], "msg": err.get("msg", "")}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body("Invalid request", details=details),
    )


def install_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
