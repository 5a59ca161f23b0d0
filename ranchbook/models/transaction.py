from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Index, Integer, Numeric, String, Text

from ranchbook.core.dates import utc_now
from ranchbook.database.base import Base


class Transaction(Base):
    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True)
    type = Column(String(10), nullable=False)
    category = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    # Magnitude only; the sign comes from ``type``
    amount = Column(Numeric(10, 2, asdecimal=True), nullable=False)
    date = Column(DateTime, nullable=False)

    partner_id = Column(String, ForeignKey("users.id"))
    livestock_id = Column(Integer, ForeignKey("livestock.id"))
    receipt_url = Column(String)
    notes = Column(Text)

    created_at = Column(DateTime, nullable=False, default=utc_now)

    __table_args__ = (
        CheckConstraint("type IN ('income', 'expense')", name="ck_transactions_type"),
        CheckConstraint("amount >= 0", name="ck_transactions_amount"),
        Index("idx_transactions_date", "date"),
    )


__all__ = ["Transaction"]
