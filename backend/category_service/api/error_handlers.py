"""Error Handlers — map anything that escapes a route to a {message, error} body.

Invariants:
    - Every failure body has exactly two keys: message and error
    - CategoryServiceError and unhandled exceptions → 500; the POST /categories
      message is "Error creating category", same as the route's own outer guard
    - Unparsable JSON → 400 with per-field details in error
    - Unhandled exception details stay in the log, never in the body
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from category_service.core.errors import CategoryServiceError

logger = logging.getLogger(__name__)

_ROUTE_FAILURES = {"/categories": "Error creating category"}
_DEFAULT_FAILURE = "Internal server error"


def failure_response(status_code: int, message: str, error) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content={"message": message, "error": error},
    )


def _failure_message(request: Request) -> str:
    return _ROUTE_FAILURES.get(request.url.path.rstrip("/"), _DEFAULT_FAILURE)


async def _service_error(request: Request, exc: CategoryServiceError):
    logger.error(
        f"{exc.code} on {request.url.path}: {exc.message}",
        extra={"error_code": exc.code, "path": request.url.path},
    )
    return failure_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, _failure_message(request), exc.to_error(),
    )


async def _validation_error(request: Request, exc: RequestValidationError):
    logger.warning(f"Unreadable request body on {request.url.path}: {exc.errors()}")
    details = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    return failure_response(
        status.HTTP_400_BAD_REQUEST, "Invalid request body", details,
    )


async def _unhandled_error(request: Request, exc: Exception):
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
    return failure_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        _failure_message(request),
        "An unexpected error occurred",
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register the global error handlers on the FastAPI app."""
    app.add_exception_handler(CategoryServiceError, _service_error)
    app.add_exception_handler(RequestValidationError, _validation_error)
    app.add_exception_handler(Exception, _unhandled_error)
