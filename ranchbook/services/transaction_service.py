from datetime import datetime

from sqlalchemy import select
from sqlalchemy.orm import Session

from ranchbook.models.transaction import Transaction
from ranchbook.models.user import User
from ranchbook.schemas.transaction import TransactionCreate
from ranchbook.services.livestock_service import ensure_livestock_exists
from ranchbook.services.store import apply_changes, commit, get_or_404
from ranchbook.services.user_service import ensure_user_exists


def list_transactions(
    db: Session,
    *,
    start: datetime | None = None,
    end: datetime | None = None,
) -> list[Transaction]:
    stmt = select(Transaction).order_by(Transaction.date.desc(), Transaction.id.desc())
    if start is not None:
        stmt = stmt.where(Transaction.date >= start)
    if end is not None:
        stmt = stmt.where(Transaction.date <= end)
    return list(db.execute(stmt).scalars().all())


def get_transaction(db: Session, transaction_id: int) -> Transaction:
    return get_or_404(db, Transaction, transaction_id, "Transaction")


def create_transaction(db: Session, payload: TransactionCreate, actor: User) -> Transaction:
    data = payload.model_dump()
    if data["partner_id"] is None:
        data["partner_id"] = actor.id
    ensure_user_exists(db, data["partner_id"])
    ensure_livestock_exists(db, data["livestock_id"])

    transaction = Transaction(**data)
    db.add(transaction)
    commit(db)
    db.refresh(transaction)
    return transaction


def update_transaction(db: Session, transaction_id: int, changes: dict) -> Transaction:
    transaction = get_transaction(db, transaction_id)
    if changes.get("partner_id") is not None:
        ensure_user_exists(db, changes["partner_id"])
    if changes.get("livestock_id") is not None:
        ensure_livestock_exists(db, changes["livestock_id"])
    apply_changes(transaction, changes)
    commit(db)
    db.refresh(transaction)
    return transaction


def delete_transaction(db: Session, transaction_id: int) -> None:
    transaction = get_transaction(db, transaction_id)
    db.delete(transaction)
    commit(db)


__all__ = [
    "create_transaction",
    "delete_transaction",
    "get_transaction",
    "list_transactions",
    "update_transaction",
]
