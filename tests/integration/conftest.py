"""Shared fixtures: in-memory DB, seeded users with live sessions, HTTP clients."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone, timedelta

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from suddenlyspaces.main import app
from suddenlyspaces.models import Base, User, UserRole, UserSession
from suddenlyspaces.db.engine import enable_sqlite_foreign_keys, get_db
from suddenlyspaces.services.auth import hash_password, hash_token, SESSION_COOKIE_NAME

_PASSWORD = "testpass123"


@dataclass
class Clients:
    owner: AsyncClient
    other_owner: AsyncClient
    tenant: AsyncClient
    anon: AsyncClient
    ids: dict
    session_factory: async_sessionmaker


@pytest_asyncio.fixture
async def clients():
    """Create in-memory DB, seed two owners + one tenant, yield per-user clients."""
    test_engine = create_async_engine("sqlite+aiosqlite:///:memory:")
    enable_sqlite_foreign_keys(test_engine)
    test_factory = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    ids = {}
    tokens = {}
    async with test_factory() as db:
        for key, email, name, role in [
            ("owner", "owner@test.com", "Olive Owner", UserRole.OWNER),
            ("other_owner", "other@test.com", "Oscar Owner", UserRole.OWNER),
            ("tenant", "tenant@test.com", "Tina Tenant", UserRole.TENANT),
        ]:
            user = User(email=email, name=name, password_hash=hash_password(_PASSWORD), role=role)
            db.add(user)
            await db.flush()
            token = f"test-session-{key}"
            db.add(UserSession(
                user_id=user.id,
                token_hash=hash_token(token),
                expires_at=datetime.now(timezone.utc) + timedelta(hours=24),
                ip_address="127.0.0.1",
            ))
            ids[key] = user.id
            tokens[key] = token
        await db.commit()

    async def override_get_db():
        async with test_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    opened = {}
    for key in ("owner", "other_owner", "tenant"):
        opened[key] = AsyncClient(
            transport=transport, base_url="http://test",
            cookies={SESSION_COOKIE_NAME: tokens[key]},
        )
    opened["anon"] = AsyncClient(transport=transport, base_url="http://test")

    yield Clients(ids=ids, session_factory=test_factory, **opened)

    for c in opened.values():
        await c.aclose()
    app.dependency_overrides.clear()
    await test_engine.dispose()

