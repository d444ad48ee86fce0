from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any

from jose import JWTError, jwt

from .config import settings

ALGORITHM = "HS256"


def _now() -> datetime:
    return datetime.now(tz=timezone.utc)


def sign_token(payload: dict[str, Any], expires_delta: timedelta | None = None) -> str:
    """Sign ``payload`` as a session JWT (one week by default)."""

    now = _now()
    delta = expires_delta if expires_delta is not None else timedelta(days=settings.SESSION_TTL_DAYS)
    claims = dict(payload)
    claims["iat"] = int(now.timestamp())
    claims["exp"] = int((now + delta).timestamp())
    return jwt.encode(claims, settings.SECRET, algorithm=ALGORITHM)


def decode_token(token: str) -> dict[str, Any]:
    try:
        return jwt.decode(token, settings.SECRET, algorithms=[ALGORITHM])
    except JWTError as exc:
        raise ValueError("Invalid token") from exc
