from datetime import datetime
from decimal import Decimal
from typing import ClassVar, Literal, Optional

from pydantic import computed_field

from ranchbook.core.dates import describe_age
from ranchbook.schemas.common import ApiModel, InputModel, Money, SmallMoney, UpdateModel, UtcDateTime

Gender = Literal["male", "female"]
HealthStatus = Literal["healthy", "monitoring", "sick"]


class LivestockCreate(InputModel):
    tag_id: str
    breed: str
    gender: Gender
    birth_date: Optional[UtcDateTime] = None
    weight: Optional[SmallMoney] = None
    health_status: HealthStatus = "healthy"
    location: Optional[str] = None
    purchase_price: Optional[Money] = None
    purchase_date: Optional[UtcDateTime] = None
    notes: Optional[str] = None


class LivestockUpdate(UpdateModel):
    required_fields: ClassVar[frozenset] = frozenset({"tag_id", "breed", "gender", "health_status"})

    tag_id: Optional[str] = None
    breed: Optional[str] = None
    gender: Optional[Gender] = None
    birth_date: Optional[UtcDateTime] = None
    weight: Optional[SmallMoney] = None
    health_status: Optional[HealthStatus] = None
    location: Optional[str] = None
    purchase_price: Optional[Money] = None
    purchase_date: Optional[UtcDateTime] = None
    notes: Optional[str] = None


class LivestockRead(ApiModel):
    id: int
    tag_id: str
    breed: str
    gender: str
    birth_date: Optional[datetime] = None
    weight: Optional[Decimal] = None
    health_status: str
    location: Optional[str] = None
    purchase_price: Optional[Decimal] = None
    purchase_date: Optional[datetime] = None
    notes: Optional[str] = None
    is_active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @computed_field
    @property
    def age(self) -> str:
        return describe_age(self.birth_date)


class LivestockStats(ApiModel):
    total: int
    healthy: int
    monitoring: int
    sick: int
