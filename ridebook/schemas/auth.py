from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class UserOut(BaseModel):
    id: int
    email: str
    role: str = "USER"
    first_name: str = Field(default="", serialization_alias="firstName")
    last_name: str = Field(default="", serialization_alias="lastName")
    phone: str = ""
    email_verified: bool = Field(default=False, serialization_alias="emailVerified")

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "email": "jane@example.com",
                "role": "USER",
                "firstName": "Jane",
                "lastName": "Doe",
                "phone": "+4512345678",
                "emailVerified": True,
            }
        },
    )

    @field_validator("first_name", "last_name", "phone", mode="before")
    @classmethod
    def blank_for_missing_text(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("role", mode="before")
    @classmethod
    def default_role(cls, value: Any) -> Any:
        return "USER" if value is None else value

    @field_validator("email_verified", mode="before")
    @classmethod
    def false_for_missing_flag(cls, value: Any) -> Any:
        return False if value is None else value


class MeResponse(BaseModel):
    ok: bool
    user: UserOut | None = None
