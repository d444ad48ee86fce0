from __future__ import annotations

from fastapi import APIRouter

from ..schemas.tracking import TrackingFeed
from ..services.tracking import build_mock_feed

router = APIRouter(prefix="/api/track", tags=["tracking"])

# Served through ResponseCacheMiddleware; see ``cached_paths`` in ridebook/__init__.py.
MOCK_FEED_PATH = "/api/track/mock"


@router.get("/mock", response_model=TrackingFeed)
async def mock_feed():
    return build_mock_feed()
