from __future__ import annotations

from typing import Protocol, Sequence

from fastapi import Depends
from sqlalchemy.orm import Session

from ..crud.drivers import list_active_drivers
from ..db.session import get_db
from ..models.driver import Driver


class DriverStore(Protocol):
    def list_active(self) -> Sequence[Driver]: ...


class SqlDriverStore:
    def __init__(self, db: Session) -> None:
        self.db = db

    def list_active(self) -> Sequence[Driver]:
        return list_active_drivers(self.db)


def get_driver_store(db: Session = Depends(get_db)) -> DriverStore:
    return SqlDriverStore(db)
