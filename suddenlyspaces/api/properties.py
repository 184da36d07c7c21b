from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from suddenlyspaces.config import Settings
from suddenlyspaces.db import crud
from suddenlyspaces.db.engine import get_db
from suddenlyspaces.dependencies import get_settings_dep, require_auth, require_role
from suddenlyspaces.models import UserRole, PropertyType, LeaseType
from suddenlyspaces.services.auth import AuthContext
from suddenlyspaces.services.listing import (
    PageRequest, PropertyFilter, search_available_properties, list_owner_properties,
)
from suddenlyspaces.schemas import (
    PropertyCreate, PropertyUpdate, PropertyRead, PropertyWithApplications,
    PropertyPage, OwnerPropertyPage, Pagination, MessageResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/properties", tags=["properties"])

require_owner = require_role(UserRole.OWNER, detail="Only property owners can access this endpoint")


@router.get("", response_model=PropertyPage)
async def search_properties(
    city: str | None = Query(default=None),
    min_price: float | None = Query(default=None, alias="minPrice"),
    max_price: float | None = Query(default=None, alias="maxPrice"),
    property_type: PropertyType | None = Query(default=None, alias="propertyType"),
    lease_type: LeaseType | None = Query(default=None, alias="leaseType"),
    page: int | None = Query(default=None),
    limit: int | None = Query(default=None),
    settings: Settings = Depends(get_settings_dep),
    db: AsyncSession = Depends(get_db),
):
    filters = PropertyFilter(
        city=city or None,
        min_price=min_price,
        max_price=max_price,
        property_type=property_type,
        lease_type=lease_type,
    )
    page_req = PageRequest.clamped(
        page, limit, settings.pagination.default_limit, settings.pagination.max_limit,
    )
    result = await search_available_properties(db, filters, page_req)
    return PropertyPage(
        properties=[PropertyRead.model_validate(p) for p in result.properties],
        pagination=Pagination.model_validate(result.pagination),
    )


@router.post("", response_model=PropertyRead, status_code=201)
async def create_property(
    body: PropertyCreate,
    auth: AuthContext = Depends(
        require_role(UserRole.OWNER, detail="Only property owners can create properties")
    ),
    db: AsyncSession = Depends(get_db),
):
    prop = await crud.create_property(db, auth.user_id, **body.model_dump())
    logger.info("Owner %s created property %s", auth.user_id, prop.id)
    return prop


@router.get("/my-properties", response_model=OwnerPropertyPage)
async def my_properties(
    page: int | None = Query(default=None),
    limit: int | None = Query(default=None),
    auth: AuthContext = Depends(require_owner),
    settings: Settings = Depends(get_settings_dep),
    db: AsyncSession = Depends(get_db),
):
    page_req = PageRequest.clamped(
        page, limit, settings.pagination.owner_default_limit, settings.pagination.max_limit,
    )
    result = await list_owner_properties(db, auth.user_id, page_req)
    return OwnerPropertyPage(
        properties=[PropertyWithApplications.model_validate(p) for p in result.properties],
        pagination=Pagination.model_validate(result.pagination),
    )


@router.get("/{property_id}", response_model=PropertyRead)
async def get_property(
    property_id: str,
    db: AsyncSession = Depends(get_db),
):
    prop = await crud.get_property(db, property_id)
    if not prop:
        raise HTTPException(404, "Property not found")
    return prop


@router.patch("/{property_id}", response_model=PropertyRead)
async def update_property(
    property_id: str,
    body: PropertyUpdate,
    auth: AuthContext = Depends(
        require_role(UserRole.OWNER, detail="Only property owners can edit properties")
    ),
    db: AsyncSession = Depends(get_db),
):
    prop = await crud.get_property(db, property_id)
    if not prop:
        raise HTTPException(404, "Property not found")
    if prop.owner_id != auth.user_id:
        raise HTTPException(403, "Forbidden: You can only edit your own properties")

    fields = body.model_dump(exclude_unset=True)
    # isAvailable is optional on update; absent or null keeps the stored value
    if fields.get("is_available") is None:
        fields.pop("is_available", None)

    prop = await crud.update_property(db, prop, **fields)
    logger.info("Owner %s updated property %s", auth.user_id, prop.id)
    return prop


@router.delete("/{property_id}", response_model=MessageResponse)
async def delete_property(
    property_id: str,
    auth: AuthContext = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
):
    prop = await crud.get_property(db, property_id)
    if not prop:
        raise HTTPException(404, "Property not found")
    if prop.owner_id != auth.user_id:
        raise HTTPException(403, "Forbidden: You can only delete your own properties")

    await crud.delete_property(db, prop)
    logger.info("Owner %s deleted property %s", auth.user_id, property_id)
    return MessageResponse(message="Property deleted successfully")
