import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from suddenlyspaces.models import Base, UserRole
from suddenlyspaces.db import crud
from suddenlyspaces.services.auth import (
    authenticate, create_session, hash_password, remove_session, validate_session,
)


@pytest_asyncio.fixture
async def db():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session
    await engine.dispose()


async def _user(db):
    return await crud.create_user(
        db, "owner@example.com", hash_password("password123"), UserRole.OWNER, name="Olive",
    )


async def test_get_user(db):
    user = await _user(db)
    assert (await crud.get_user(db, user.id)).email == "owner@example.com"
    assert await crud.get_user(db, "missing") is None


async def test_authenticate(db):
    user = await _user(db)
    assert (await authenticate("owner@example.com", "password123", db)).id == user.id
    assert await authenticate("owner@example.com", "wrong", db) is None
    assert await authenticate("nobody@example.com", "password123", db) is None


async def test_session_lifecycle(db):
    user = await _user(db)
    token = await create_session(user, db)
    assert (await validate_session(token, db)).id == user.id
    assert await validate_session("not-a-token", db) is None

    await remove_session(token, db)
    assert await validate_session(token, db) is None


async def test_expired_session_is_rejected(db):
    user = await _user(db)
    token = await create_session(user, db, max_age_days=-1)
    assert await validate_session(token, db) is None
