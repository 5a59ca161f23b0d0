from sqlalchemy import Column, DateTime, ForeignKey, Index, String

from ranchbook.core.dates import utc_now
from ranchbook.database.base import Base


class UserSession(Base):
    __tablename__ = "sessions"

    sid = Column(String, primary_key=True)
    user_id = Column(String, ForeignKey("users.id"), nullable=False)
    expires_at = Column(DateTime, nullable=False)
    created_at = Column(DateTime, nullable=False, default=utc_now)

    __table_args__ = (
        Index("idx_session_expire", "expires_at"),
        Index("idx_session_user", "user_id"),
    )


__all__ = ["UserSession"]
