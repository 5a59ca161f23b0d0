from sqlalchemy import Column, DateTime, Integer, Numeric, String, Text

from ranchbook.core.dates import utc_now
from ranchbook.database.base import Base


class InventoryItem(Base):
    __tablename__ = "inventory"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    category = Column(String, nullable=False)
    quantity = Column(Numeric(10, 2, asdecimal=True), nullable=False)
    unit = Column(String, nullable=False)
    min_stock_level = Column(Numeric(10, 2, asdecimal=True))
    cost_per_unit = Column(Numeric(10, 2, asdecimal=True))

    supplier = Column(String)
    last_restocked = Column(DateTime)
    expiry_date = Column(DateTime)
    location = Column(String)
    notes = Column(Text)

    created_at = Column(DateTime, nullable=False, default=utc_now)
    updated_at = Column(DateTime, nullable=False, default=utc_now, onupdate=utc_now)


__all__ = ["InventoryItem"]
