from __future__ import annotations

from pydantic import BaseModel


class VehiclePosition(BaseModel):
    id: str
    lat: float
    lng: float
    status: str


class TrackingFeed(BaseModel):
    vehicles: list[VehiclePosition]
    ts: int

    model_config = {
        "json_schema_extra": {
            "example": {
                "vehicles": [{"id": "EQB-1", "lat": 55.6761, "lng": 12.5683, "status": "idle"}],
                "ts": 1717171717171,
            }
        }
    }
