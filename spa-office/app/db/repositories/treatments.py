# app/db/repositories/treatments.py
import logging
from typing import Iterable, List, Optional
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import select

from app.core.errors import PersistenceError
from app.db.models.treatment_categories import TreatmentCategory
from app.db.models.treatments import Treatment

logger = logging.getLogger(__name__)


async def get_treatment_by_id(
    db: AsyncSession,
    treatment_id: UUID
) -> Optional[Treatment]:
    result = await db.execute(
        select(Treatment).where(Treatment.id == treatment_id)
    )
    return result.scalar_one_or_none()


async def get_active_treatments_by_ids(
    db: AsyncSession,
    treatment_ids: Iterable[UUID],
) -> List[Treatment]:
    result = await db.execute(
        select(Treatment).where(
            Treatment.id.in_(list(treatment_ids)),
            Treatment.is_active.is_(True),
        )
    )
    return list(result.scalars().all())


async def list_treatments(
    db: AsyncSession,
    active_only: bool = True,
) -> List[Treatment]:
    query = select(Treatment)
    if active_only:
        query = query.where(Treatment.is_active.is_(True))
    result = await db.execute(query.order_by(Treatment.name))
    return list(result.scalars().all())


async def list_categories(db: AsyncSession) -> List[TreatmentCategory]:
    result = await db.execute(
        select(TreatmentCategory).order_by(TreatmentCategory.display_order)
    )
    return list(result.scalars().all())


async def save(db: AsyncSession, obj):
    try:
        db.add(obj)
        await db.commit()
    except SQLAlchemyError as exc:
        await db.rollback()
        logger.error("Failed to save %s: %s", type(obj).__name__, exc)
        raise PersistenceError(str(exc)) from exc
    await db.refresh(obj)
    return obj


async def remove(db: AsyncSession, obj) -> None:
    try:
        await db.delete(obj)
        await db.commit()
    except SQLAlchemyError as exc:
        await db.rollback()
        logger.error("Failed to delete %s: %s", type(obj).__name__, exc)
        raise PersistenceError(str(exc)) from exc
