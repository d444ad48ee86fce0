# ridebook/crud/drivers.py
from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..models.driver import Driver


def list_active_drivers(db: Session) -> list[Driver]:
    """
    Return every active driver ordered by name (ascending).
    """
    stmt = select(Driver).where(Driver.is_active.is_(True)).order_by(Driver.name.asc())
    return list(db.execute(stmt).scalars().all())


def create_driver(db: Session, payload: dict) -> Driver:
    """
    Persist a driver from a payload dict. Used by seeding and fixtures.
    """
    data = payload.copy()
    if isinstance(data.get("name"), str):
        data["name"] = data["name"].strip()
    data.setdefault("is_active", True)
    data.setdefault(
        "created_at",
        datetime.now(tz=timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z"),
    )

    obj = Driver(**data)
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return obj
