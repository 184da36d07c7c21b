from __future__ import annotations

from pydantic import Field

from suddenlyspaces.schemas.base import CamelModel


class RiskScoreRead(CamelModel):
    tenant_id: str | None = None
    risk_score: int = Field(ge=0, le=100)


class TenantRead(CamelModel):
    id: str
    name: str
    email: str
    phone: str
    last_activity: str
    properties_viewed: int
    applications_submitted: int
    status: str


class TenantListResponse(CamelModel):
    success: bool = True
    data: list[TenantRead]
