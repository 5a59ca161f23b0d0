from datetime import datetime
from decimal import Decimal
from typing import ClassVar, Optional

from ranchbook.schemas.common import ApiModel, InputModel, Money, Quantity, UpdateModel, UtcDateTime


class InventoryCreate(InputModel):
    name: str
    category: str
    quantity: Quantity
    unit: str
    min_stock_level: Optional[Quantity] = None
    cost_per_unit: Optional[Money] = None
    supplier: Optional[str] = None
    last_restocked: Optional[UtcDateTime] = None
    expiry_date: Optional[UtcDateTime] = None
    location: Optional[str] = None
    notes: Optional[str] = None


class InventoryUpdate(UpdateModel):
    required_fields: ClassVar[frozenset] = frozenset({"name", "category", "quantity", "unit"})

    name: Optional[str] = None
    category: Optional[str] = None
    quantity: Optional[Quantity] = None
    unit: Optional[str] = None
    min_stock_level: Optional[Quantity] = None
    cost_per_unit: Optional[Money] = None
    supplier: Optional[str] = None
    last_restocked: Optional[UtcDateTime] = None
    expiry_date: Optional[UtcDateTime] = None
    location: Optional[str] = None
    notes: Optional[str] = None


class InventoryRead(ApiModel):
    id: int
    name: str
    category: str
    quantity: Decimal
    unit: str
    min_stock_level: Optional[Decimal] = None
    cost_per_unit: Optional[Decimal] = None
    supplier: Optional[str] = None
    last_restocked: Optional[datetime] = None
    expiry_date: Optional[datetime] = None
    location: Optional[str] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class InventorySummary(ApiModel):
    total_items: int
    low_stock_count: int
    total_value: Decimal
