"""Derived views over the entity tables.

Every figure is recomputed from storage on each call; nothing is cached.
Sums are taken in Python over ``Decimal`` column values so they stay
exact regardless of how the backing database accumulates NUMERIC.
"""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from ranchbook.core.constants import HEALTH_STATUSES
from ranchbook.core.dates import month_start, upcoming_window, utc_now
from ranchbook.models.health_record import HealthRecord
from ranchbook.models.inventory import InventoryItem
from ranchbook.models.livestock import Livestock
from ranchbook.models.transaction import Transaction

ZERO = Decimal("0.00")
CENTS = Decimal("0.01")


def financial_summary(db: Session, *, now: datetime | None = None) -> dict:
    now = now or utc_now()
    start_of_month = month_start(now)

    rows = db.execute(select(Transaction.type, Transaction.amount, Transaction.date)).all()

    total_income = ZERO
    total_expenses = ZERO
    monthly_revenue = ZERO
    for tx_type, amount, tx_date in rows:
        amount = Decimal(amount or 0)
        if tx_type == "income":
            total_income += amount
            if start_of_month <= tx_date <= now:
                monthly_revenue += amount
        elif tx_type == "expense":
            total_expenses += amount

    return {
        "total_income": total_income,
        "total_expenses": total_expenses,
        "net_profit": total_income - total_expenses,
        "monthly_revenue": monthly_revenue,
    }


def livestock_stats(db: Session) -> dict:
    rows = db.execute(
        select(Livestock.health_status, func.count(Livestock.id))
        .where(Livestock.is_active.is_(True))
        .group_by(Livestock.health_status)
    ).all()

    counts = {status: 0 for status in HEALTH_STATUSES}
    total = 0
    for status, count in rows:
        total += count
        if status in counts:
            counts[status] += count
    return {"total": total, **counts}


def is_low_stock(item: InventoryItem) -> bool:
    minimum = item.min_stock_level if item.min_stock_level is not None else ZERO
    return Decimal(item.quantity) <= Decimal(minimum)


def low_stock_items(db: Session) -> list[InventoryItem]:
    items = db.execute(select(InventoryItem).order_by(InventoryItem.id)).scalars().all()
    return [item for item in items if is_low_stock(item)]


def upcoming_health_tasks(
    db: Session,
    *,
    days: int = 7,
    now: datetime | None = None,
) -> list[HealthRecord]:
    window_start, window_end = upcoming_window(now or utc_now(), days)
    stmt = (
        select(HealthRecord)
        .where(
            HealthRecord.next_due_date.is_not(None),
            HealthRecord.next_due_date >= window_start,
            HealthRecord.next_due_date <= window_end,
        )
        .order_by(HealthRecord.next_due_date.asc(), HealthRecord.id.asc())
    )
    return list(db.execute(stmt).scalars().all())


def inventory_summary(db: Session) -> dict:
    items = db.execute(select(InventoryItem)).scalars().all()
    total_value = ZERO
    low_stock_count = 0
    for item in items:
        if item.cost_per_unit is not None:
            total_value += Decimal(item.quantity) * Decimal(item.cost_per_unit)
        if is_low_stock(item):
            low_stock_count += 1
    return {
        "total_items": len(items),
        "low_stock_count": low_stock_count,
        "total_value": total_value.quantize(CENTS),
    }


__all__ = [
    "financial_summary",
    "inventory_summary",
    "is_low_stock",
    "livestock_stats",
    "low_stock_items",
    "upcoming_health_tasks",
]
