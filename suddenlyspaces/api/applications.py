"""Tenant applications: apply, list, owner review."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from suddenlyspaces.db import crud
from suddenlyspaces.db.engine import get_db
from suddenlyspaces.dependencies import require_auth, require_role
from suddenlyspaces.models import UserRole
from suddenlyspaces.services.auth import AuthContext
from suddenlyspaces.services.synthetic import RiskScoreGenerator
from suddenlyspaces.api.risk import get_risk_scores
from suddenlyspaces.schemas import ApplicationCreate, ApplicationStatusUpdate, ApplicationDetail

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/applications", tags=["applications"])


@router.post("", response_model=ApplicationDetail, status_code=201)
async def apply_for_property(
    body: ApplicationCreate,
    auth: AuthContext = Depends(
        require_role(UserRole.TENANT, detail="Only tenants can apply for properties")
    ),
    risk_scores: RiskScoreGenerator = Depends(get_risk_scores),
    db: AsyncSession = Depends(get_db),
):
    prop = await crud.get_property(db, body.property_id)
    if not prop:
        raise HTTPException(404, "Property not found")
    if not prop.is_available:
        raise HTTPException(400, "Property is not available")

    application = await crud.create_application(
        db, prop.id, auth.user_id, risk_score=risk_scores.score(),
    )
    logger.info("Tenant %s applied for property %s", auth.user_id, prop.id)
    return application


@router.get("", response_model=list[ApplicationDetail])
async def list_applications(
    auth: AuthContext = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
):
    """Owners see applications on their listings; tenants see their own."""
    if auth.role == UserRole.OWNER:
        return await crud.list_applications_for_owner(db, auth.user_id)
    return await crud.list_applications_for_tenant(db, auth.user_id)


@router.patch("/{application_id}", response_model=ApplicationDetail)
async def update_application_status(
    application_id: str,
    body: ApplicationStatusUpdate,
    auth: AuthContext = Depends(
        require_role(UserRole.OWNER, detail="Only property owners can review applications")
    ),
    db: AsyncSession = Depends(get_db),
):
    application = await crud.get_application(db, application_id)
    if not application:
        raise HTTPException(404, "Application not found")
    if application.property.owner_id != auth.user_id:
        raise HTTPException(403, "Forbidden: You can only review applications for your own properties")

    application = await crud.update_application_status(db, application, body.status)
    logger.info("Owner %s set application %s to %s", auth.user_id, application.id, body.status.value)
    return application
