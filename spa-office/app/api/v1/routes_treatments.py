# app/api/v1/routes_treatments.py
from typing import List
from fastapi import APIRouter, Depends, Response, status
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.security import CurrentUser, require_admin
from app.db.base import get_db
from app.domain.catalog.schemas import CategoryOut, TreatmentCreate, TreatmentOut, TreatmentUpdate
from app.domain.catalog import service as catalog_service


router = APIRouter(prefix="/api/v1/treatments", tags=["treatments"])


@router.get("", response_model=List[TreatmentOut])
async def list_treatments_endpoint(db: AsyncSession = Depends(get_db)):
    return await catalog_service.list_active_treatments(db)


@router.get("/categories", response_model=List[CategoryOut])
async def list_categories_endpoint(db: AsyncSession = Depends(get_db)):
    return await catalog_service.list_categories_with_treatments(db)


@router.get("/all", response_model=List[TreatmentOut])
async def list_all_treatments_endpoint(
    db: AsyncSession = Depends(get_db),
    _: CurrentUser = Depends(require_admin),
):
    return await catalog_service.list_all_treatments(db)


@router.post("", response_model=TreatmentOut, status_code=status.HTTP_201_CREATED)
async def create_treatment_endpoint(
    payload: TreatmentCreate,
    db: AsyncSession = Depends(get_db),
    _: CurrentUser = Depends(require_admin),
):
    return await catalog_service.create_treatment(db, payload)


@router.patch("/{treatment_id}", response_model=TreatmentOut)
async def update_treatment_endpoint(
    treatment_id: UUID,
    payload: TreatmentUpdate,
    db: AsyncSession = Depends(get_db),
    _: CurrentUser = Depends(require_admin),
):
    return await catalog_service.update_treatment(db, treatment_id, payload)


@router.delete("/{treatment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_treatment_endpoint(
    treatment_id: UUID,
    db: AsyncSession = Depends(get_db),
    _: CurrentUser = Depends(require_admin),
):
    await catalog_service.delete_treatment(db, treatment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
