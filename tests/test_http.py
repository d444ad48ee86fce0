import asyncio

import httpx
import pytest

from ridebook.core.http import FetchError, get_json


def _client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def test_get_json_returns_decoded_body():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"a": 1})

    async def scenario():
        async with _client(handler) as client:
            return await get_json("https://upstream.test/data", client=client)

    assert asyncio.run(scenario()) == {"a": 1}


def test_get_json_raises_with_status_and_body():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, text="not found")

    async def scenario():
        async with _client(handler) as client:
            await get_json("https://upstream.test/missing", client=client)

    with pytest.raises(FetchError) as excinfo:
        asyncio.run(scenario())

    assert str(excinfo.value) == "HTTP 404: not found"
    assert excinfo.value.status_code == 404
    assert excinfo.value.body == "not found"


def test_get_json_passes_request_options():
    seen: dict = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["auth"] = request.headers.get("Authorization")
        seen["q"] = request.url.params.get("q")
        seen["body"] = request.content
        return httpx.Response(201, json=[1, 2])

    async def scenario():
        async with _client(handler) as client:
            return await get_json(
                "https://upstream.test/search",
                method="POST",
                client=client,
                headers={"Authorization": "Bearer abc"},
                params={"q": "copenhagen"},
                json={"limit": 2},
            )

    assert asyncio.run(scenario()) == [1, 2]
    assert seen["method"] == "POST"
    assert seen["auth"] == "Bearer abc"
    assert seen["q"] == "copenhagen"
    assert b'"limit"' in seen["body"]


def test_get_json_server_error_is_fetch_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, text="upstream down")

    async def scenario():
        async with _client(handler) as client:
            await get_json("https://upstream.test/", client=client)

    with pytest.raises(FetchError, match="503"):
        asyncio.run(scenario())
