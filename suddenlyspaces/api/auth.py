"""Auth API: login, logout, current user."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from suddenlyspaces.db.engine import get_db
from suddenlyspaces.dependencies import require_auth
from suddenlyspaces.schemas import LoginRequest, MeRead
from suddenlyspaces.services.auth import (
    AuthContext, SESSION_COOKIE_NAME, SESSION_MAX_AGE_DAYS,
    authenticate, create_session, remove_session,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login")
async def login(
    body: LoginRequest,
    request: Request,
    db: AsyncSession = Depends(get_db),
):
    user = await authenticate(body.email, body.password, db)
    if not user:
        return JSONResponse(status_code=401, content={"message": "Invalid email or password"})

    ip = request.client.host if request.client else ""
    token = await create_session(user, db, ip_address=ip)
    logger.info("User %s signed in", user.id)

    response = JSONResponse(content={"ok": True, "userId": user.id, "role": user.role.value})
    response.set_cookie(
        SESSION_COOKIE_NAME, token,
        httponly=True, samesite="lax",
        max_age=86400 * SESSION_MAX_AGE_DAYS,
    )
    return response


@router.post("/logout")
async def logout(
    request: Request,
    auth: AuthContext = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
):
    token = request.cookies.get(SESSION_COOKIE_NAME)
    if token:
        await remove_session(token, db)
    response = JSONResponse(content={"ok": True})
    response.delete_cookie(SESSION_COOKIE_NAME)
    return response


@router.get("/me", response_model=MeRead)
async def get_me(auth: AuthContext = Depends(require_auth)):
    return MeRead(user_id=auth.user_id, email=auth.email, name=auth.name, role=auth.role)
