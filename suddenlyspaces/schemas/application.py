from __future__ import annotations

from datetime import datetime

from pydantic import Field

from suddenlyspaces.models.application import ApplicationStatus
from suddenlyspaces.models.property import PropertyType, LeaseType
from suddenlyspaces.schemas.base import CamelModel
from suddenlyspaces.schemas.user import UserSummary


class ApplicationCreate(CamelModel):
    property_id: str = Field(min_length=1)


class ApplicationStatusUpdate(CamelModel):
    status: ApplicationStatus


class ApplicationRead(CamelModel):
    id: str
    property_id: str
    tenant_id: str
    status: ApplicationStatus
    risk_score: int
    created_at: datetime


class ApplicationWithTenant(ApplicationRead):
    tenant: UserSummary


class PropertySummary(CamelModel):
    id: str
    title: str
    city: str
    rent_amount: float
    property_type: PropertyType
    lease_type: LeaseType
    owner_id: str


class ApplicationDetail(ApplicationWithTenant):
    property: PropertySummary
