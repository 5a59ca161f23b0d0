"""Identity & session lifecycle.

Users are keyed by the identity provider's subject id and upserted on
every login. Sessions are server-side rows with a rolling expiry: each
successful lookup pushes ``expires_at`` forward by the TTL.
"""

import logging
import secrets
from datetime import datetime, timedelta
from typing import Iterable, Optional

from sqlalchemy import delete, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ranchbook.core.dates import utc_now
from ranchbook.core.errors import Forbidden, Unauthenticated
from ranchbook.core.permissions import Role
from ranchbook.core.security import IdentityAssertion
from ranchbook.models.session import UserSession
from ranchbook.models.user import User
from ranchbook.services.store import commit

logger = logging.getLogger(__name__)


def _is_default_admin(email: Optional[str], default_admin_emails: Iterable[str]) -> bool:
    if not email:
        return False
    normalized = email.strip().casefold()
    return any(normalized == entry.strip().casefold() for entry in default_admin_emails)


def upsert_from_identity_assertion(
    db: Session,
    assertion: IdentityAssertion,
    default_admin_emails: Iterable[str] = (),
) -> User:
    user = db.get(User, assertion.subject_id)
    if user is None:
        role = Role.ADMIN if _is_default_admin(assertion.email, default_admin_emails) else Role.PARTNER
        user = User(id=assertion.subject_id, role=role.value)
        db.add(user)
        logger.info("Creating user %s with role %s", assertion.subject_id, role.value)

    # Existing users keep their role; only profile fields are refreshed
    user.email = assertion.email
    user.first_name = assertion.given_name
    user.last_name = assertion.family_name
    user.profile_image_url = assertion.avatar_url
    commit(db, "Email {} belongs to another account".format(assertion.email))
    db.refresh(user)
    return user


def create_session(
    db: Session,
    user: User,
    ttl_seconds: int,
    *,
    now: Optional[datetime] = None,
) -> UserSession:
    if not user.is_active:
        raise Forbidden("Account has been deactivated")
    now = now or utc_now()
    session = UserSession(
        sid=secrets.token_urlsafe(32),
        user_id=user.id,
        created_at=now,
        expires_at=now + timedelta(seconds=ttl_seconds),
    )
    db.add(session)
    commit(db)
    return session


def resolve_session(
    db: Session,
    token: Optional[str],
    ttl_seconds: int,
    *,
    now: Optional[datetime] = None,
) -> User:
    if not token:
        raise Unauthenticated()

    session = db.get(UserSession, token)
    if session is None:
        raise Unauthenticated()

    now = now or utc_now()
    if session.expires_at <= now:
        db.delete(session)
        commit(db)
        raise Unauthenticated("Session expired")

    user = db.get(User, session.user_id)
    if user is None or not user.is_active:
        raise Unauthenticated()

    session.expires_at = now + timedelta(seconds=ttl_seconds)
    commit(db)
    return user


def revoke_session(db: Session, token: Optional[str]) -> None:
    if not token:
        return
    db.execute(delete(UserSession).where(UserSession.sid == token))
    commit(db)


def revoke_user_sessions(db: Session, user_id: str) -> None:
    db.execute(delete(UserSession).where(UserSession.user_id == user_id))
    commit(db)


def touch_last_active(db: Session, user_id: str, *, now: Optional[datetime] = None) -> None:
    """Best-effort bookkeeping; never fails the enclosing request."""
    try:
        db.execute(
            update(User)
            .where(User.id == user_id)
            .values(last_active_at=now or utc_now(), updated_at=User.updated_at)
        )
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.warning("Failed to update last active time for user %s", user_id, exc_info=True)


__all__ = [
    "create_session",
    "resolve_session",
    "revoke_session",
    "revoke_user_sessions",
    "touch_last_active",
    "upsert_from_identity_assertion",
]
