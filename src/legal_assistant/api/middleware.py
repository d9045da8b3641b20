"""Request tracing middleware."""

import time
import uuid
from typing import Awaitable, Callable

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = structlog.get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

# Polled by load balancers and Prometheus; logged at debug only
QUIET_PATHS = frozenset({"/api/health", "/metrics"})


class RequestTracingMiddleware(BaseHTTPMiddleware):
    """Bind a request id to every log line of a request.

    The frontend may send its own X-Request-ID; otherwise a UUID4 is
    generated. The id is echoed back in the response header so a visitor's
    failed consultation can be matched with the retry warnings logged for it.
    """

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        path = request.url.path
        log = logger.debug if path in QUIET_PATHS else logger.info

        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=path,
        )
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            logger.exception("Request failed", duration_ms=_elapsed_ms(started))
            raise
        else:
            log("Request completed", status_code=response.status_code, duration_ms=_elapsed_ms(started))
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            structlog.contextvars.clear_contextvars()


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)
