from sqlalchemy import Boolean, CheckConstraint, Column, DateTime, Integer, Numeric, String, Text

from ranchbook.core.dates import utc_now
from ranchbook.database.base import Base


class Livestock(Base):
    __tablename__ = "livestock"

    id = Column(Integer, primary_key=True)
    tag_id = Column(String, nullable=False, unique=True)
    breed = Column(String, nullable=False)
    gender = Column(String(10), nullable=False)
    birth_date = Column(DateTime)
    weight = Column(Numeric(8, 2, asdecimal=True))  # lbs

    health_status = Column(String(20), nullable=False, default="healthy")
    location = Column(String)
    purchase_price = Column(Numeric(10, 2, asdecimal=True))
    purchase_date = Column(DateTime)
    notes = Column(Text)

    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, nullable=False, default=utc_now)
    updated_at = Column(DateTime, nullable=False, default=utc_now, onupdate=utc_now)

    __table_args__ = (
        CheckConstraint("gender IN ('male', 'female')", name="ck_livestock_gender"),
        CheckConstraint(
            "health_status IN ('healthy', 'monitoring', 'sick')",
            name="ck_livestock_health_status",
        ),
    )


__all__ = ["Livestock"]
