# ridebook/crud/users.py
from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy.orm import Session

from ..models.user import User


def get_user(db: Session, user_id: int) -> User | None:
    return db.get(User, user_id)


def create_user(db: Session, payload: dict) -> User:
    """
    Persist a user from a payload dict. ``password_hash`` must already be hashed.
    """
    data = payload.copy()
    data["email"] = (data.get("email") or "").strip().lower()
    data.setdefault(
        "created_at",
        datetime.now(tz=timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z"),
    )

    obj = User(**data)
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return obj
