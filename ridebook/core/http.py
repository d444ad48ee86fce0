from __future__ import annotations

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """Raised when an upstream answers with a non-success status."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"HTTP {status_code}: {body}")
        self.status_code = status_code
        self.body = body


async def _send(client: httpx.AsyncClient, url: str, method: str, options: dict[str, Any]) -> Any:
    response = await client.request(method, url, **options)
    if not response.is_success:
        logger.error("Upstream error %s for %s %s", response.status_code, method, url)
        raise FetchError(response.status_code, response.text)
    return response.json()


async def get_json(
    url: str,
    *,
    method: str = "GET",
    client: httpx.AsyncClient | None = None,
    **options: Any,
) -> Any:
    """Perform one request and return the decoded JSON body.

    ``options`` are handed to ``httpx.AsyncClient.request`` untouched
    (``headers``, ``params``, ``json``, ``content`` ...). Pass ``client`` to
    reuse an existing connection pool; otherwise a short-lived one is opened.
    """

    if client is not None:
        return await _send(client, url, method, options)
    async with httpx.AsyncClient() as owned:
        return await _send(owned, url, method, options)
