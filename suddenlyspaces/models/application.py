from __future__ import annotations

import enum

from sqlalchemy import String, Integer, Enum, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from suddenlyspaces.models.base import Base, ULIDMixin


class ApplicationStatus(str, enum.Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class Application(Base, ULIDMixin):
    __tablename__ = "applications"

    property_id: Mapped[str] = mapped_column(
        String(26), ForeignKey("properties.id", ondelete="CASCADE"), index=True
    )
    tenant_id: Mapped[str] = mapped_column(String(26), ForeignKey("users.id"), index=True)
    status: Mapped[ApplicationStatus] = mapped_column(
        Enum(ApplicationStatus, native_enum=False, length=20),
        default=ApplicationStatus.PENDING,
    )
    risk_score: Mapped[int] = mapped_column(Integer)  # 0-100, synthetic

    property = relationship("Property", back_populates="applications", lazy="selectin")
    tenant = relationship("User", back_populates="applications", lazy="selectin")
