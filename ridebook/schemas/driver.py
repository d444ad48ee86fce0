from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class DriverOut(BaseModel):
    id: int
    name: str
    phone: Optional[str] = None
    is_active: bool = Field(serialization_alias="isActive")

    model_config = ConfigDict(from_attributes=True)
