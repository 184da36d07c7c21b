"""Listing query service: filtered, ordered, offset-paginated property reads.

Two entry points share one ordering/pagination contract:

- ``search_available_properties`` is the public search. Only available
  listings are eligible; every supplied filter narrows the result (AND).
- ``list_owner_properties`` is an owner's management view. It ignores
  availability and the search filters, and embeds each listing's
  applications.

Ordering is newest first (``created_at DESC``) with the id as a tie-break so
consecutive pages never overlap or skip rows.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from sqlalchemy import Select, select, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from suddenlyspaces.models import Property, Application, PropertyType, LeaseType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PropertyFilter:
    """Public search criteria; ``None`` means unconstrained."""

    city: str | None = None
    min_price: float | None = None
    max_price: float | None = None
    property_type: PropertyType | None = None
    lease_type: LeaseType | None = None


@dataclass(frozen=True)
class PageRequest:
    page: int
    limit: int

    @classmethod
    def clamped(cls, page: int | None, limit: int | None, default_limit: int, max_limit: int) -> "PageRequest":
        """Build a request with ``page >= 1`` and ``1 <= limit <= max_limit``."""
        page = 1 if page is None else max(page, 1)
        limit = default_limit if limit is None else limit
        limit = min(max(limit, 1), max_limit)
        return cls(page=page, limit=limit)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass
class PageMeta:
    current_page: int
    total_pages: int
    total_count: int
    has_next_page: bool
    has_previous_page: bool

    @classmethod
    def build(cls, page: PageRequest, total_count: int) -> "PageMeta":
        total_pages = math.ceil(total_count / page.limit)
        return cls(
            current_page=page.page,
            total_pages=total_pages,
            total_count=total_count,
            has_next_page=page.page < total_pages,
            has_previous_page=page.page > 1,
        )


@dataclass
class PropertyPageResult:
    properties: list[Property]
    pagination: PageMeta


def apply_filters(stmt: Select, filters: PropertyFilter) -> Select:
    """Narrow a Property select to available listings matching ``filters``."""
    stmt = stmt.where(Property.is_available.is_(True))
    if filters.city:
        stmt = stmt.where(Property.city.icontains(filters.city, autoescape=True))
    if filters.min_price is not None:
        stmt = stmt.where(Property.rent_amount >= filters.min_price)
    if filters.max_price is not None:
        stmt = stmt.where(Property.rent_amount <= filters.max_price)
    if filters.property_type is not None:
        stmt = stmt.where(Property.property_type == filters.property_type)
    if filters.lease_type is not None:
        stmt = stmt.where(Property.lease_type == filters.lease_type)
    return stmt


async def _paginate(db: AsyncSession, stmt: Select, page: PageRequest, *options) -> PropertyPageResult:
    count_stmt = select(func.count()).select_from(stmt.subquery())
    total_count = (await db.execute(count_stmt)).scalar_one()

    page_stmt = (
        stmt.options(*options)
        .order_by(Property.created_at.desc(), Property.id.desc())
        .offset(page.offset)
        .limit(page.limit)
    )
    result = await db.execute(page_stmt)
    properties = list(result.scalars().all())
    return PropertyPageResult(properties=properties, pagination=PageMeta.build(page, total_count))


async def search_available_properties(
    db: AsyncSession, filters: PropertyFilter, page: PageRequest,
) -> PropertyPageResult:
    stmt = apply_filters(select(Property), filters)
    result = await _paginate(db, stmt, page, selectinload(Property.owner))
    logger.debug(
        "Property search %s page=%d limit=%d -> %d of %d",
        filters, page.page, page.limit, len(result.properties), result.pagination.total_count,
    )
    return result


async def list_owner_properties(
    db: AsyncSession, owner_id: str, page: PageRequest,
) -> PropertyPageResult:
    stmt = select(Property).where(Property.owner_id == owner_id)
    return await _paginate(
        db, stmt, page,
        selectinload(Property.owner),
        selectinload(Property.applications).selectinload(Application.tenant),
    )
