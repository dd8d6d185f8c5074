"""
Exception handlers.

Every failure leaves the API as ``{"error": "<message>"}`` with the status
of its error class. Unexpected exceptions are logged here and reported
as a generic 500.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from riftdex.models.errors import RiftdexError

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def riftdex_error_handler(request: Request, exc: RiftdexError) -> JSONResponse:
    return error_response(exc.status_code, exc.message)


async def request_validation_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.info("Rejected malformed request to %s %s", request.method, request.url.path)
    return error_response(status.HTTP_400_BAD_REQUEST, "Invalid request body")


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled error on %s %s", request.method, request.url.path, exc_info=exc
    )
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error translation on an app."""
    app.add_exception_handler(RiftdexError, riftdex_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
