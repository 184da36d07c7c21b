"""Users and their DB-backed login sessions."""

from __future__ import annotations

import enum
from datetime import datetime

from sqlalchemy import String, DateTime, Enum, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from suddenlyspaces.models.base import Base, ULIDMixin


class UserRole(str, enum.Enum):
    OWNER = "OWNER"
    TENANT = "TENANT"


class User(Base, ULIDMixin):
    __tablename__ = "users"

    email: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    password_hash: Mapped[str] = mapped_column(String(255))
    # No role-change path exists; set once at creation
    role: Mapped[UserRole] = mapped_column(Enum(UserRole, native_enum=False, length=20))

    properties = relationship("Property", back_populates="owner")
    applications = relationship("Application", back_populates="tenant")


class UserSession(Base, ULIDMixin):
    __tablename__ = "user_sessions"

    user_id: Mapped[str] = mapped_column(String(26), ForeignKey("users.id", ondelete="CASCADE"))
    token_hash: Mapped[str] = mapped_column(String(64), unique=True, index=True)
    expires_at: Mapped[datetime] = mapped_column(DateTime(timezone=True))
    ip_address: Mapped[str] = mapped_column(String(45), default="")
