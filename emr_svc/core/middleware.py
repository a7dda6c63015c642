"""
Request logging middleware.

Each request is tagged with a request id: the caller's ``X-Request-ID`` when it
sends a usable one, otherwise a fresh 8-character id. The id is bound to the
logging context for the duration of the request and echoed in the response.
"""

import logging
import re
import time
import uuid
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from core.logging_config import clear_request_id, set_request_id

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

_VALID_REQUEST_ID = re.compile(r"^[A-Za-z0-9._-]{1,64}$")


def _request_id_for(request: Request) -> str:
    incoming = request.headers.get(REQUEST_ID_HEADER)
    if incoming and _VALID_REQUEST_ID.match(incoming):
        return incoming
    return uuid.uuid4().hex[:8]


class LoggingMiddleware(BaseHTTPMiddleware):
    """
    Log one line per API request with its outcome and duration.

    Client errors (404 for an unknown MRN, 422 for a rejected field) are part of
    normal operation and log at INFO; 5xx responses log at WARNING, and
    exceptions escaping the app are logged with their traceback.
    """

    # Health checks and docs are polled often and carry no patient data
    QUIET_PATHS = frozenset({"/health", "/ready", "/docs", "/redoc", "/openapi.json"})

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = _request_id_for(request)
        set_request_id(request_id)
        path = request.url.path
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "Request failed",
                extra={"method": request.method, "path": path, "duration_ms": _elapsed_ms(started)}
            )
            raise
        finally:
            clear_request_id()

        if path not in self.QUIET_PATHS:
            log = logger.warning if response.status_code >= 500 else logger.info
            log(
                "Request completed",
                extra={
                    "method": request.method,
                    "path": path,
                    "status_code": response.status_code,
                    "duration_ms": _elapsed_ms(started),
                    "request_id": request_id,
                }
            )

        response.headers[REQUEST_ID_HEADER] = request_id
        return response


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)
