# app/api/v1/routes_checkout.py
from typing import List
from fastapi import APIRouter, Depends, Response, status
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession


from app.core.security import CurrentUser, get_current_user
from app.db.base import get_db
from app.domain.checkout.schemas import TransactionCreate, TransactionCreated, TransactionOut
from app.domain.checkout.service import create_transaction, delete_transaction, list_recent_transactions


router = APIRouter(prefix="/api/v1/transactions", tags=["transactions"])


@router.post("", response_model=TransactionCreated, status_code=status.HTTP_201_CREATED)
async def create_transaction_endpoint(
    payload: TransactionCreate,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    txn, receipt = await create_transaction(db, payload, user)
    return TransactionCreated(
        transaction=TransactionOut.model_validate(txn),
        receipt=receipt,
    )


@router.get("/mine", response_model=List[TransactionOut])
async def my_transactions_endpoint(
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    return await list_recent_transactions(db, user)


@router.delete("/{transaction_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_transaction_endpoint(
    transaction_id: UUID,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    await delete_transaction(db, transaction_id, user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
