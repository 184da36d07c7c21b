"""SQLAlchemy ORM models."""

from suddenlyspaces.models.base import Base
from suddenlyspaces.models.user import User, UserRole, UserSession
from suddenlyspaces.models.property import Property, PropertyType, LeaseType
from suddenlyspaces.models.application import Application, ApplicationStatus

__all__ = [
    "Base",
    "User", "UserRole", "UserSession",
    "Property", "PropertyType", "LeaseType",
    "Application", "ApplicationStatus",
]
