"""FastAPI middleware for request tracing."""

import time
import uuid
from collections.abc import Awaitable, Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from biztime.logging import get_logger

REQUEST_ID_HEADER = "X-Request-ID"

logger = get_logger(__name__)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Tag every request with an id and log its outcome.

    - Reuses X-Request-ID from the request, or generates a UUID
    - Binds request_id to the structlog context for the rest of the request
    - Echoes X-Request-ID on the response
    - Emits one ``request_completed`` event with status and duration
    """

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)

        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            # The outermost error handler answers this one; it reads the
            # request id back from the structlog context.
            self._log_completed(request, 500, started)
            raise

        self._log_completed(request, response.status_code, started)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response

    @staticmethod
    def _log_completed(request: Request, status: int, started: float) -> None:
        logger.info(
            "request_completed",
            method=request.method,
            path=request.url.path,
            status=status,
            duration_ms=round((time.perf_counter() - started) * 1000, 2),
        )


def current_request_id() -> str | None:
    """Request id bound by RequestIDMiddleware for the request in progress."""
    return structlog.contextvars.get_contextvars().get("request_id")
