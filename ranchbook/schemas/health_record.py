from datetime import datetime
from decimal import Decimal
from typing import Optional

from ranchbook.schemas.common import ApiModel, InputModel, SmallMoney, UtcDateTime


class HealthRecordCreate(InputModel):
    livestock_id: int
    record_type: str
    description: str
    veterinarian: Optional[str] = None
    cost: Optional[SmallMoney] = None
    date: UtcDateTime
    next_due_date: Optional[UtcDateTime] = None
    notes: Optional[str] = None


class HealthRecordRead(ApiModel):
    id: int
    livestock_id: int
    record_type: str
    description: str
    veterinarian: Optional[str] = None
    cost: Optional[Decimal] = None
    date: datetime
    next_due_date: Optional[datetime] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
