"""Pydantic request/response schemas."""

from suddenlyspaces.schemas.user import UserSummary, LoginRequest, MeRead
from suddenlyspaces.schemas.application import (
    ApplicationCreate, ApplicationStatusUpdate, ApplicationRead,
    ApplicationWithTenant, ApplicationDetail, PropertySummary,
)
from suddenlyspaces.schemas.property import (
    PropertyCreate, PropertyUpdate, PropertyRead, PropertyWithApplications,
    Pagination, PropertyPage, OwnerPropertyPage, MessageResponse,
)
from suddenlyspaces.schemas.synthetic import RiskScoreRead, TenantRead, TenantListResponse

__all__ = [
    "UserSummary", "LoginRequest", "MeRead",
    "ApplicationCreate", "ApplicationStatusUpdate", "ApplicationRead",
    "ApplicationWithTenant", "ApplicationDetail", "PropertySummary",
    "PropertyCreate", "PropertyUpdate", "PropertyRead", "PropertyWithApplications",
    "Pagination", "PropertyPage", "OwnerPropertyPage", "MessageResponse",
    "RiskScoreRead", "TenantRead", "TenantListResponse",
]
