from sqlalchemy import Boolean, CheckConstraint, Column, DateTime, String

from ranchbook.core.dates import utc_now
from ranchbook.database.base import Base


class User(Base):
    __tablename__ = "users"

    # Subject id issued by the external identity provider
    id = Column(String, primary_key=True)
    email = Column(String, unique=True)
    first_name = Column(String)
    last_name = Column(String)
    profile_image_url = Column(String)

    role = Column(String(20), nullable=False, default="partner")
    is_active = Column(Boolean, nullable=False, default=True)

    last_active_at = Column(DateTime, default=utc_now)
    created_at = Column(DateTime, nullable=False, default=utc_now)
    updated_at = Column(DateTime, nullable=False, default=utc_now, onupdate=utc_now)

    __table_args__ = (
        CheckConstraint("role IN ('owner', 'admin', 'partner')", name="ck_users_role"),
    )


__all__ = ["User"]
