"""CRUD operations for users, properties and applications."""

from __future__ import annotations

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from suddenlyspaces.models import (
    User, UserRole, Property, Application, ApplicationStatus,
)


# ── User ─────────────────────────────────────────────────

async def create_user(
    db: AsyncSession, email: str, password_hash: str, role: UserRole, name: str | None = None,
) -> User:
    user = User(email=email, password_hash=password_hash, role=role, name=name)
    db.add(user)
    await db.commit()
    await db.refresh(user)
    return user


async def get_user(db: AsyncSession, user_id: str) -> User | None:
    return await db.get(User, user_id)


async def get_user_by_email(db: AsyncSession, email: str) -> User | None:
    result = await db.execute(select(User).where(User.email == email))
    return result.scalars().first()


async def list_tenants(db: AsyncSession) -> list[User]:
    result = await db.execute(
        select(User)
        .where(User.role == UserRole.TENANT)
        .order_by(User.created_at.desc(), User.id.desc())
    )
    return list(result.scalars().all())


# ── Property ─────────────────────────────────────────────

async def create_property(db: AsyncSession, owner_id: str, **fields) -> Property:
    prop = Property(owner_id=owner_id, **fields)
    db.add(prop)
    await db.commit()
    await db.refresh(prop, attribute_names=["owner"])
    return prop


async def get_property(db: AsyncSession, property_id: str) -> Property | None:
    return await db.get(Property, property_id)


async def update_property(db: AsyncSession, prop: Property, **fields) -> Property:
    for k, v in fields.items():
        setattr(prop, k, v)
    await db.commit()
    await db.refresh(prop, attribute_names=["owner"])
    return prop


async def delete_property(db: AsyncSession, prop: Property) -> None:
    """Delete a property; its applications go with it."""
    await db.refresh(prop, attribute_names=["applications"])
    await db.delete(prop)
    await db.commit()


# ── Application ──────────────────────────────────────────

async def create_application(
    db: AsyncSession, property_id: str, tenant_id: str, risk_score: int,
    status: ApplicationStatus = ApplicationStatus.PENDING,
) -> Application:
    application = Application(
        property_id=property_id, tenant_id=tenant_id,
        risk_score=risk_score, status=status,
    )
    db.add(application)
    await db.commit()
    await db.refresh(application, attribute_names=["property", "tenant"])
    return application


async def get_application(db: AsyncSession, application_id: str) -> Application | None:
    return await db.get(Application, application_id)


async def list_applications_for_tenant(db: AsyncSession, tenant_id: str) -> list[Application]:
    result = await db.execute(
        select(Application)
        .where(Application.tenant_id == tenant_id)
        .order_by(Application.created_at.desc(), Application.id.desc())
    )
    return list(result.scalars().all())


async def list_applications_for_owner(db: AsyncSession, owner_id: str) -> list[Application]:
    result = await db.execute(
        select(Application)
        .join(Property, Property.id == Application.property_id)
        .where(Property.owner_id == owner_id)
        .order_by(Application.created_at.desc(), Application.id.desc())
    )
    return list(result.scalars().all())


async def update_application_status(
    db: AsyncSession, application: Application, status: ApplicationStatus,
) -> Application:
    application.status = status
    await db.commit()
    await db.refresh(application, attribute_names=["property", "tenant"])
    return application


async def count_applications_for_property(db: AsyncSession, property_id: str) -> int:
    result = await db.execute(
        select(func.count()).select_from(Application).where(Application.property_id == property_id)
    )
    return result.scalar_one()
