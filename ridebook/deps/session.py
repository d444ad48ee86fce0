from __future__ import annotations

import logging
from typing import Protocol

from fastapi import Depends, Request
from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool

from ..core.config import settings
from ..core.security import decode_token
from ..crud.users import get_user
from ..db.session import get_db
from ..models.user import User

logger = logging.getLogger(__name__)


class SessionProvider(Protocol):
    async def get_current_user(self) -> User | None: ...


class CookieSessionProvider:
    """Resolve the signed-in user from the JWT held in the session cookie."""

    def __init__(self, request: Request, db: Session) -> None:
        self.request = request
        self.db = db

    def _user_id(self) -> int | None:
        token = self.request.cookies.get(settings.SESSION_COOKIE_NAME)
        if not token:
            return None
        try:
            claims = decode_token(token)
        except ValueError:
            logger.info("session.bad_token")
            return None
        try:
            return int(claims.get("id"))
        except (TypeError, ValueError):
            return None

    async def get_current_user(self) -> User | None:
        user_id = self._user_id()
        if user_id is None:
            return None
        return await run_in_threadpool(get_user, self.db, user_id)


def get_session_provider(request: Request, db: Session = Depends(get_db)) -> SessionProvider:
    return CookieSessionProvider(request, db)
