"""
Error taxonomy shared by both services and the single boundary that turns
errors into HTTP responses.
"""

import logging
from typing import Dict

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

ERROR_MESSAGE = "errorMessage"
ERROR_CODE = "errorCode"
DETAILS = "details"


# =============================================================================
# EXCEPTIONS
# =============================================================================

class ServiceError(Exception):
    """Base error; status_code decides the HTTP mapping at the boundary"""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidRequest(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST


class InvalidContentType(InvalidRequest):
    def __init__(self, content_type: str):
        super().__init__(f"Invalid file format: {content_type}. Only MP3 files are allowed")


class InvalidAudioFormat(InvalidRequest):
    pass


class InvalidId(InvalidRequest):
    pass


class NotFound(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND


class AlreadyExists(ServiceError):
    status_code = status.HTTP_409_CONFLICT


class SyncFailure(ServiceError):
    """Call to the song service failed; only ever logged by the resource service"""

    def __init__(self, message: str, resource_id: int = None):
        self.resource_id = resource_id
        super().__init__(message)


class ExtractionFailure(ServiceError):
    pass


# =============================================================================
# BOUNDARY
# =============================================================================

def error_body(message: str, status_code: int) -> Dict[str, str]:
    return {ERROR_MESSAGE: message, ERROR_CODE: str(status_code)}


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{type(exc).__name__} on {request.method} {request.url.path}: {exc.message}")
        message = "An error occurred on the server"
    else:
        logger.error(f"{type(exc).__name__}: {exc.message}")
        message = exc.message
    return JSONResponse(status_code=exc.status_code, content=error_body(message, exc.status_code))


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = {}
    for error in exc.errors():
        # loc looks like ("body", "duration"); a missing or malformed body has no field part
        field = ".".join(str(part) for part in error["loc"][1:]) or error["loc"][0]
        details[field] = _strip_pydantic_prefix(error["msg"])

    logger.error(f"Validation error: {details}")
    content = error_body("Validation error", status.HTTP_400_BAD_REQUEST)
    content[DETAILS] = details
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=content)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Internal server error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("An error occurred on the server", status.HTTP_500_INTERNAL_SERVER_ERROR),
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)


def _strip_pydantic_prefix(message: str) -> str:
    # Custom validators surface as "Value error, <message>"
    prefix = "Value error, "
    return message[len(prefix):] if message.startswith(prefix) else message
