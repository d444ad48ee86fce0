"""Fixed-TTL memoisation of whole GET responses for selected paths."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Mapping

from cachetools import TTLCache
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)

# Recomputed by ``Response`` when the cached body is replayed.
_SKIP_HEADERS = {"content-length", "x-cache", "cache-control"}


@dataclass(frozen=True)
class CachedResponse:
    body: bytes
    status_code: int
    headers: tuple[tuple[str, str], ...]


class ResponseCacheMiddleware(BaseHTTPMiddleware):
    """Serve a stored copy of a 200 GET response until its TTL runs out.

    ``ttl_by_path`` maps exact request paths to a lifetime in seconds; every
    other path passes straight through. The query string is part of the key.
    Cache reads and writes never await.
    """

    def __init__(
        self,
        app,
        ttl_by_path: Mapping[str, float],
        maxsize: int = 128,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:  # type: ignore[override]
        super().__init__(app)
        self._caches: dict[str, TTLCache[str, CachedResponse]] = {
            path: TTLCache(maxsize=maxsize, ttl=ttl, timer=timer) for path, ttl in ttl_by_path.items()
        }

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        cache = self._caches.get(request.url.path)
        if cache is None or request.method != "GET":
            return await call_next(request)

        key = request.url.path
        if request.url.query:
            key = f"{key}?{request.url.query}"

        entry = cache.get(key)
        if entry is not None:
            logger.debug("response_cache_hit", extra={"extra_data": {"key": key}})
            return self._replay(entry, cache.ttl, "HIT")

        response = await call_next(request)
        if response.status_code != 200:
            return response

        body = b"".join([chunk async for chunk in response.body_iterator])  # type: ignore[attr-defined]
        entry = CachedResponse(
            body=body,
            status_code=response.status_code,
            headers=tuple((k, v) for k, v in response.headers.items() if k.lower() not in _SKIP_HEADERS),
        )
        cache[key] = entry
        return self._replay(entry, cache.ttl, "MISS")

    @staticmethod
    def _replay(entry: CachedResponse, ttl: float, state: str) -> Response:
        headers = dict(entry.headers)
        headers["Cache-Control"] = f"public, max-age={int(ttl)}"
        headers["X-Cache"] = state
        return Response(content=entry.body, status_code=entry.status_code, headers=headers)
