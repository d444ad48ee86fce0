"""Tests for the mock tracking feed and the DevTools discovery route."""

import time

from ridebook.services.tracking import build_mock_feed


def test_build_mock_feed_has_two_vehicles():
    before = int(time.time() * 1000)
    feed = build_mock_feed()
    after = int(time.time() * 1000)

    assert [v.id for v in feed.vehicles] == ["EQB-1", "SPRINTER-1"]
    assert before <= feed.ts <= after


def test_mock_route_shape(client):
    response = client.get("/api/track/mock")

    assert response.status_code == 200
    body = response.json()
    assert body["vehicles"] == [
        {"id": "EQB-1", "lat": 55.6761, "lng": 12.5683, "status": "idle"},
        {"id": "SPRINTER-1", "lat": 55.684, "lng": 12.577, "status": "on-trip"},
    ]
    assert isinstance(body["ts"], int)
    assert body["ts"] > 0
    # Cached for at most ten seconds.
    assert abs(time.time() * 1000 - body["ts"]) < 11_000


def test_mock_route_is_cached(client):
    first = client.get("/api/track/mock")
    second = client.get("/api/track/mock")

    assert second.headers["X-Cache"] == "HIT"
    assert second.headers["Cache-Control"] == "public, max-age=10"
    assert second.json()["ts"] == first.json()["ts"]


def test_devtools_discovery_returns_empty_object(client):
    response = client.get("/.well-known/appspecific/com.chrome.devtools.json")

    assert response.status_code == 200
    assert response.json() == {}
