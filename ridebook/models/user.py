"""Account records. Written by the signup flow; this service only reads them."""

from __future__ import annotations

from sqlalchemy import Boolean, Column, Integer, Text

from ..db.session import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(Text, nullable=False, unique=True, index=True)
    password_hash = Column(Text, nullable=False)
    first_name = Column(Text, nullable=False, default="")
    last_name = Column(Text, nullable=False, default="")
    phone = Column(Text, nullable=False, default="")
    role = Column(Text, nullable=False, default="USER")
    email_verified = Column(Boolean, nullable=False, default=False)
    created_at = Column(Text, nullable=False)
