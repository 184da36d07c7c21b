from __future__ import annotations

from datetime import datetime

from pydantic import Field

from suddenlyspaces.models.property import PropertyType, LeaseType
from suddenlyspaces.schemas.application import ApplicationWithTenant
from suddenlyspaces.schemas.base import CamelModel
from suddenlyspaces.schemas.user import UserSummary


class _PropertyFields(CamelModel):
    title: str = Field(min_length=1)
    description: str | None = None
    location: str = Field(min_length=1)
    city: str = Field(min_length=1)
    rent_amount: float = Field(gt=0)
    property_type: PropertyType
    lease_type: LeaseType


class PropertyCreate(_PropertyFields):
    is_available: bool = True


class PropertyUpdate(_PropertyFields):
    """Full replace of the required fields; description/isAvailable only when sent."""

    is_available: bool | None = None


class PropertyRead(CamelModel):
    id: str
    title: str
    description: str | None = None
    location: str
    city: str
    rent_amount: float
    property_type: PropertyType
    lease_type: LeaseType
    is_available: bool
    owner_id: str
    created_at: datetime
    owner: UserSummary


class PropertyWithApplications(PropertyRead):
    applications: list[ApplicationWithTenant] = []


class Pagination(CamelModel):
    current_page: int
    total_pages: int
    total_count: int
    has_next_page: bool
    has_previous_page: bool


class PropertyPage(CamelModel):
    properties: list[PropertyRead]
    pagination: Pagination


class OwnerPropertyPage(CamelModel):
    properties: list[PropertyWithApplications]
    pagination: Pagination


class MessageResponse(CamelModel):
    message: str
