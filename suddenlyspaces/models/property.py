from __future__ import annotations

import enum

from sqlalchemy import String, Text, Float, Boolean, Enum, ForeignKey, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from suddenlyspaces.models.base import Base, ULIDMixin


class PropertyType(str, enum.Enum):
    RESIDENTIAL = "RESIDENTIAL"
    COWORKING = "COWORKING"
    SHORT_TERM = "SHORT_TERM"


class LeaseType(str, enum.Enum):
    MONTHLY = "MONTHLY"
    YEARLY = "YEARLY"
    FLEXIBLE = "FLEXIBLE"


class Property(Base, ULIDMixin):
    __tablename__ = "properties"
    __table_args__ = (
        CheckConstraint("rent_amount > 0", name="ck_properties_rent_positive"),
    )

    owner_id: Mapped[str] = mapped_column(String(26), ForeignKey("users.id"), index=True)
    title: Mapped[str] = mapped_column(String(255))
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    location: Mapped[str] = mapped_column(String(500))
    city: Mapped[str] = mapped_column(String(255), index=True)
    rent_amount: Mapped[float] = mapped_column(Float)
    property_type: Mapped[PropertyType] = mapped_column(Enum(PropertyType, native_enum=False, length=20))
    lease_type: Mapped[LeaseType] = mapped_column(Enum(LeaseType, native_enum=False, length=20))
    is_available: Mapped[bool] = mapped_column(Boolean, default=True, index=True)

    owner = relationship("User", back_populates="properties", lazy="selectin")
    applications = relationship(
        "Application", back_populates="property",
        cascade="all, delete-orphan", order_by="Application.created_at.desc()",
    )
