from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, Numeric, String, Text

from ranchbook.core.dates import utc_now
from ranchbook.database.base import Base


class HealthRecord(Base):
    __tablename__ = "health_records"

    id = Column(Integer, primary_key=True)
    livestock_id = Column(Integer, ForeignKey("livestock.id"), nullable=False)
    record_type = Column(String, nullable=False)  # vaccination, treatment, checkup
    description = Column(Text, nullable=False)
    veterinarian = Column(String)
    cost = Column(Numeric(8, 2, asdecimal=True))
    date = Column(DateTime, nullable=False)
    next_due_date = Column(DateTime)
    notes = Column(Text)

    created_at = Column(DateTime, nullable=False, default=utc_now)

    __table_args__ = (
        Index("idx_health_records_livestock", "livestock_id"),
        Index("idx_health_records_next_due", "next_due_date"),
    )


__all__ = ["HealthRecord"]
