from __future__ import annotations

from fastapi import APIRouter, Depends

from ..deps.drivers import DriverStore, get_driver_store
from ..schemas.driver import DriverOut

router = APIRouter(prefix="/api/drivers", tags=["drivers"])


@router.get("", response_model=list[DriverOut])
def api_list(store: DriverStore = Depends(get_driver_store)):
    return store.list_active()
