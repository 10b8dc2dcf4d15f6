"""Repository helpers for the Authors, Books and Users collections.

Every write commits immediately. Callers that perform several writes get no
atomicity across them: a failure after the first commit leaves it in place.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from .dbmodels import Authors, Books, Users

Record = TypeVar("Record", Authors, Books, Users)


async def create(session: AsyncSession, model: type[Record], **fields: Any) -> Record:
    record = model(**fields)
    session.add(record)
    await session.commit()
    await session.refresh(record)
    return record


async def find_by_id(session: AsyncSession, model: type[Record], id: str) -> Record | None:
    result = await session.execute(select(model).where(model.id == id))
    return result.scalar_one_or_none()


async def find(session: AsyncSession, model: type[Record], **filters: Any) -> Sequence[Record]:
    """Return records matching equality filters in insertion order."""
    stmt = select(model).filter_by(**filters).order_by(model.seq)
    result = await session.execute(stmt)
    return result.scalars().all()


async def save(session: AsyncSession, record: Record) -> Record:
    session.add(record)
    await session.commit()
    await session.refresh(record)
    return record


async def update(
    session: AsyncSession, model: type[Record], id: str, fields: Mapping[str, Any]
) -> Record | None:
    """Apply a partial update; fields whose value is None are left untouched."""
    record = await find_by_id(session, model, id)
    if record is None:
        return None

    for key, value in fields.items():
        if value is not None:
            setattr(record, key, value)

    return await save(session, record)
