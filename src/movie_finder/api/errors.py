"""Mapping of application errors to HTTP responses."""

import logging
from http import HTTPStatus
from typing import Dict

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..utils import ErrorKind, MovieFinderError
from .schemas import ErrorResponse

logger = logging.getLogger(__name__)

STATUS_BY_KIND: Dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: HTTPStatus.BAD_REQUEST,
    ErrorKind.CONFLICT: HTTPStatus.BAD_REQUEST,
    ErrorKind.NOT_FOUND: HTTPStatus.NOT_FOUND,
    ErrorKind.UPSTREAM_TIMEOUT: HTTPStatus.GATEWAY_TIMEOUT,
    ErrorKind.UPSTREAM_FAILURE: HTTPStatus.BAD_GATEWAY,
    ErrorKind.PERSISTENCE_FAILURE: HTTPStatus.INTERNAL_SERVER_ERROR,
    ErrorKind.INTERNAL: HTTPStatus.INTERNAL_SERVER_ERROR,
}


def error_response(status_code: int, message: str, kind: ErrorKind) -> JSONResponse:
    """Build the JSON error response for a status and message."""
    body = ErrorResponse(
        status_code=int(status_code),
        message=message,
        error=HTTPStatus(status_code).phrase,
        kind=kind.value,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(by_alias=True))


async def handle_movie_finder_error(request: Request, exc: MovieFinderError) -> JSONResponse:
    status_code = STATUS_BY_KIND.get(exc.kind, HTTPStatus.INTERNAL_SERVER_ERROR)
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return error_response(status_code, exc.message, exc.kind)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        problems.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))

    message = "; ".join(problems) or "Invalid request"
    return error_response(HTTPStatus.BAD_REQUEST, message, ErrorKind.VALIDATION)


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == HTTPStatus.NOT_FOUND:
        kind = ErrorKind.NOT_FOUND
    elif exc.status_code < 500:
        kind = ErrorKind.VALIDATION
    else:
        kind = ErrorKind.INTERNAL
    return error_response(exc.status_code, str(exc.detail), kind)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return error_response(
        HTTPStatus.INTERNAL_SERVER_ERROR, "Internal server error", ErrorKind.INTERNAL
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error handlers on an application."""
    app.add_exception_handler(MovieFinderError, handle_movie_finder_error)  # type: ignore
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)  # type: ignore
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)  # type: ignore
    app.add_exception_handler(Exception, handle_unexpected_error)
