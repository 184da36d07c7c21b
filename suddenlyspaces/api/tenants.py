from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from suddenlyspaces.db import crud
from suddenlyspaces.db.engine import get_db
from suddenlyspaces.schemas import TenantRead, TenantListResponse
from suddenlyspaces.services.synthetic import tenant_display_fields

router = APIRouter(prefix="/api/tenants", tags=["tenants"])


@router.get("", response_model=TenantListResponse)
async def list_tenants(db: AsyncSession = Depends(get_db)):
    """Tenant users padded with synthetic display fields (phone, activity, counts)."""
    tenants = await crud.list_tenants(db)
    data = [
        TenantRead(
            id=t.id,
            name=t.name or f"Tenant {i + 1}",
            email=t.email,
            **tenant_display_fields(t.id),
        )
        for i, t in enumerate(tenants)
    ]
    return TenantListResponse(success=True, data=data)
