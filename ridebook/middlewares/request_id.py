"""Correlation ids and one access-log line per request."""

from __future__ import annotations

import logging
import time
from contextvars import ContextVar
from uuid import uuid4

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

request_id_ctx_var: ContextVar[str | None] = ContextVar("request_id", default=None)
logger = logging.getLogger("ridebook.access")


def _access_fields(request: Request, response: Response, elapsed_ms: float) -> dict[str, object]:
    fields: dict[str, object] = {
        "method": request.method,
        "path": request.url.path,
        "status": response.status_code,
        "duration_ms": round(elapsed_ms, 2),
    }
    # Set by ResponseCacheMiddleware on memoised routes only.
    cache_state = response.headers.get("X-Cache")
    if cache_state:
        fields["cache"] = cache_state.lower()
    return fields


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Tag each request with an id (client supplied or generated) and log it."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex
        request.state.request_id = request_id
        token = request_id_ctx_var.set(request_id)
        started = time.perf_counter()
        try:
            response = await call_next(request)
            elapsed_ms = (time.perf_counter() - started) * 1000
            response.headers[REQUEST_ID_HEADER] = request_id
            response.headers.setdefault("X-Response-Time", f"{elapsed_ms:.2f}ms")
            logger.info("request.completed", extra={"extra_data": _access_fields(request, response, elapsed_ms)})
        finally:
            request_id_ctx_var.reset(token)
        return response
