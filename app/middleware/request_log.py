"""Access-log middleware — one line per request with status and duration."""


import logging
import time
from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("app.access")

class RequestLogMiddleware(BaseHTTPMiddleware):
    """Logs ``METHOD path?query -> status (ms)``.

    Server errors are logged at ERROR, client errors at WARNING, the rest at INFO.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start = time.monotonic()
        response = await call_next(request)
        duration_ms = round((time.monotonic() - start) * 1000)

        path = request.url.path
        if request.url.query:
            path = f"{path}?{request.url.query}"

        if response.status_code >= 500:
            level = logging.ERROR
        elif response.status_code >= 400:
            level = logging.WARNING
        else:
            level = logging.INFO
        logger.log(
            level, "%s %s -> %s (%sms)",
            request.method, path, response.status_code, duration_ms,
        )
        return response
