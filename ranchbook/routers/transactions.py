from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ranchbook.core.dates import to_naive_utc
from ranchbook.core.permissions import Action
from ranchbook.dependencies import get_db, require_permission
from ranchbook.models.user import User
from ranchbook.schemas.common import MessageResponse
from ranchbook.schemas.transaction import (
    FinancialSummary,
    TransactionCreate,
    TransactionRead,
    TransactionUpdate,
)
from ranchbook.services.summary_service import financial_summary
from ranchbook.services.transaction_service import (
    create_transaction,
    delete_transaction,
    list_transactions,
    update_transaction,
)

router = APIRouter(prefix="/api/transactions", tags=["Transactions"])


@router.get("", response_model=list[TransactionRead])
def get_all_transactions(
    start: Optional[datetime] = Query(None, description="Earliest transaction date (inclusive)"),
    end: Optional[datetime] = Query(None, description="Latest transaction date (inclusive)"),
    db: Session = Depends(get_db),
    _user=Depends(require_permission(Action.READ)),
):
    return list_transactions(db, start=to_naive_utc(start), end=to_naive_utc(end))


@router.get("/summary", response_model=FinancialSummary)
def get_financial_summary(
    db: Session = Depends(get_db),
    _user=Depends(require_permission(Action.READ)),
):
    return financial_summary(db)


@router.post("", response_model=TransactionRead)
def add_transaction(
    payload: TransactionCreate,
    db: Session = Depends(get_db),
    user: User = Depends(require_permission(Action.CREATE)),
):
    return create_transaction(db, payload, user)


@router.put("/{transaction_id}", response_model=TransactionRead)
def edit_transaction(
    transaction_id: int,
    payload: TransactionUpdate,
    db: Session = Depends(get_db),
    _user=Depends(require_permission(Action.UPDATE)),
):
    return update_transaction(db, transaction_id, payload.changes())


@router.delete("/{transaction_id}", response_model=MessageResponse)
def remove_transaction(
    transaction_id: int,
    db: Session = Depends(get_db),
    _user=Depends(require_permission(Action.DELETE)),
):
    delete_transaction(db, transaction_id)
    return {"message": "Transaction deleted successfully"}


__all__ = ["router"]
