from datetime import datetime
from decimal import Decimal
from typing import ClassVar, Literal, Optional

from ranchbook.schemas.common import ApiModel, InputModel, Money, UpdateModel, UtcDateTime

TransactionType = Literal["income", "expense"]


class TransactionCreate(InputModel):
    type: TransactionType
    category: str
    description: str
    amount: Money
    date: UtcDateTime
    partner_id: Optional[str] = None
    livestock_id: Optional[int] = None
    receipt_url: Optional[str] = None
    notes: Optional[str] = None


class TransactionUpdate(UpdateModel):
    required_fields: ClassVar[frozenset] = frozenset(
        {"type", "category", "description", "amount", "date"}
    )

    type: Optional[TransactionType] = None
    category: Optional[str] = None
    description: Optional[str] = None
    amount: Optional[Money] = None
    date: Optional[UtcDateTime] = None
    partner_id: Optional[str] = None
    livestock_id: Optional[int] = None
    receipt_url: Optional[str] = None
    notes: Optional[str] = None


class TransactionRead(ApiModel):
    id: int
    type: str
    category: str
    description: str
    amount: Decimal
    date: datetime
    partner_id: Optional[str] = None
    livestock_id: Optional[int] = None
    receipt_url: Optional[str] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None


class FinancialSummary(ApiModel):
    total_income: Decimal
    total_expenses: Decimal
    net_profit: Decimal
    monthly_revenue: Decimal
