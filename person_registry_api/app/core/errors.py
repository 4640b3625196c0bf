"""
Error responses and exception handlers.

Every error leaves the API as ``{"error": "<message>"}``.  Handlers
return ``error_response`` directly for expected failures (invalid
payloads, unknown ids).  The exception handlers registered here cover
the rest: requests that match no route, request bodies that are not
valid JSON, and any exception that escapes a handler.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

PERSON_NOT_FOUND = "Person not found"
ENDPOINT_NOT_FOUND = "Endpoint not found"
INTERNAL_SERVER_ERROR = "Internal server error"
INVALID_JSON_BODY = "Invalid JSON body"


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build a JSON error response with the uniform ``error`` body."""
    return JSONResponse(status_code=status_code, content={"error": message})


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # The router raises 404 for unknown paths and 405 for known paths
    # with an unsupported method; both mean "no such endpoint".
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return error_response(status.HTTP_404_NOT_FOUND, ENDPOINT_NOT_FOUND)
    return error_response(exc.status_code, str(exc.detail))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Map request parsing failures to 400.

    Person payloads are validated by the handlers themselves, so this
    is only reached when the body cannot be decoded at all.
    """
    errors = exc.errors()
    if not errors or errors[0].get("type") == "json_invalid":
        message = INVALID_JSON_BODY
    else:
        message = str(errors[0].get("msg", INVALID_JSON_BODY))
    logger.debug("Rejected request to %s: %s", request.url.path, errors)
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled error on %s %s",
        request.method,
        request.url.path,
        exc_info=(type(exc), exc, exc.__traceback__),
    )
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_SERVER_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the API's exception handlers to ``app``."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
