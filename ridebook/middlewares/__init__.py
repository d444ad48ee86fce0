from __future__ import annotations

from .request_id import RequestIdMiddleware, request_id_ctx_var
from .response_cache import ResponseCacheMiddleware
from .security_headers import SecurityHeadersMiddleware

__all__ = [
    "RequestIdMiddleware",
    "ResponseCacheMiddleware",
    "SecurityHeadersMiddleware",
    "request_id_ctx_var",
]
