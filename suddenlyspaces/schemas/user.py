from __future__ import annotations

from pydantic import BaseModel

from suddenlyspaces.models.user import UserRole
from suddenlyspaces.schemas.base import CamelModel


class UserSummary(CamelModel):
    id: str
    name: str | None = None
    email: str


class LoginRequest(BaseModel):
    email: str
    password: str


class MeRead(CamelModel):
    user_id: str
    email: str
    name: str | None = None
    role: UserRole
