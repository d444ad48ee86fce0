"""Static vehicle positions served while live telemetry is not wired up."""

from __future__ import annotations

import time

from ..schemas.tracking import TrackingFeed, VehiclePosition

MOCK_VEHICLES: tuple[VehiclePosition, ...] = (
    VehiclePosition(id="EQB-1", lat=55.6761, lng=12.5683, status="idle"),
    VehiclePosition(id="SPRINTER-1", lat=55.6840, lng=12.5770, status="on-trip"),
)


def now_ms() -> int:
    return int(time.time() * 1000)


def build_mock_feed() -> TrackingFeed:
    return TrackingFeed(vehicles=list(MOCK_VEHICLES), ts=now_ms())
