"""Central router that includes all sub-routers."""

from fastapi import APIRouter

from suddenlyspaces.api.auth import router as auth_router
from suddenlyspaces.api.properties import router as properties_router
from suddenlyspaces.api.applications import router as applications_router
from suddenlyspaces.api.risk import router as risk_router
from suddenlyspaces.api.tenants import router as tenants_router

api_router = APIRouter()
api_router.include_router(auth_router)
api_router.include_router(properties_router)
api_router.include_router(applications_router)
api_router.include_router(risk_router)
api_router.include_router(tenants_router)
