# api/middleware.py
import logging
from typing import Awaitable, Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("api.requests")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs every request line and the status it ended with"""

    async def dispatch(self, request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
        method, path = request.method, request.url.path
        logger.info(f"Received request: {method} {path}")
        response = await call_next(request)
        logger.info(f"Response: {method} {path} - Status: {response.status_code}")
        return response
