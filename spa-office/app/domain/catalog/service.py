# app/domain/catalog/service.py
import logging
from typing import List
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import NotFoundError
from app.db.models.treatments import Treatment
from app.db.repositories import treatments as treatments_repo
from app.domain.pricing.calculator import effective_price
from .schemas import CategoryOut, TreatmentCreate, TreatmentOut, TreatmentUpdate

logger = logging.getLogger(__name__)


def to_treatment_out(treatment: Treatment) -> TreatmentOut:
    return TreatmentOut(
        id=treatment.id,
        name=treatment.name,
        description=treatment.description,
        image_url=treatment.image_url,
        category_id=treatment.category_id,
        price=treatment.price,
        discount_active=bool(treatment.discount_active),
        discount_percentage=treatment.discount_percentage,
        is_active=treatment.is_active,
        effective_price=effective_price(treatment),
    )


async def list_active_treatments(db: AsyncSession) -> List[TreatmentOut]:
    treatments = await treatments_repo.list_treatments(db, active_only=True)
    return [to_treatment_out(t) for t in treatments]


async def list_all_treatments(db: AsyncSession) -> List[TreatmentOut]:
    treatments = await treatments_repo.list_treatments(db, active_only=False)
    return [to_treatment_out(t) for t in treatments]


async def list_categories_with_treatments(db: AsyncSession) -> List[CategoryOut]:
    categories = await treatments_repo.list_categories(db)
    return [
        CategoryOut(
            id=category.id,
            name=category.name,
            description=category.description,
            display_order=category.display_order,
            treatments=[
                to_treatment_out(t)
                for t in category.treatments
                if t.is_active
            ],
        )
        for category in categories
    ]


async def create_treatment(db: AsyncSession, data: TreatmentCreate) -> TreatmentOut:
    treatment = Treatment(**data.model_dump())
    treatment = await treatments_repo.save(db, treatment)
    logger.info("Treatment %s (%s) created", treatment.id, treatment.name)
    return to_treatment_out(treatment)


async def update_treatment(
    db: AsyncSession,
    treatment_id: UUID,
    data: TreatmentUpdate,
) -> TreatmentOut:
    treatment = await treatments_repo.get_treatment_by_id(db, treatment_id)
    if treatment is None:
        raise NotFoundError("Treatment not found")

    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(treatment, field, value)

    treatment = await treatments_repo.save(db, treatment)
    logger.info("Treatment %s updated", treatment.id)
    return to_treatment_out(treatment)


async def delete_treatment(db: AsyncSession, treatment_id: UUID) -> None:
    """Remove a treatment from the catalog.

    Historical line items keep their snapshot name and price.
    """
    treatment = await treatments_repo.get_treatment_by_id(db, treatment_id)
    if treatment is None:
        raise NotFoundError("Treatment not found")
    await treatments_repo.remove(db, treatment)
    logger.info("Treatment %s deleted", treatment_id)
