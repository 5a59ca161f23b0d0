import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from ranchbook.core.errors import NotFound, ValidationFailed
from ranchbook.core.permissions import Action, Role, ensure_allowed, ensure_not_self
from ranchbook.models.user import User
from ranchbook.services.identity_service import revoke_user_sessions
from ranchbook.services.store import apply_changes, commit, get_or_404

logger = logging.getLogger(__name__)


def get_user(db: Session, user_id: str) -> User:
    return get_or_404(db, User, user_id, "User")


def get_user_by_email(db: Session, email: str) -> User | None:
    return db.execute(select(User).where(User.email == email)).scalars().first()


def ensure_user_exists(db: Session, user_id) -> None:
    if user_id is None:
        return
    if db.get(User, user_id) is None:
        raise ValidationFailed(
            "Unknown partner reference",
            error="partnerId: no user with id {}".format(user_id),
        )


def list_users(db: Session) -> list[User]:
    return list(db.execute(select(User).order_by(User.created_at, User.id)).scalars().all())


def update_profile(db: Session, user: User, changes: dict) -> User:
    apply_changes(user, changes)
    commit(db)
    db.refresh(user)
    return user


def change_role(db: Session, actor: User, target_id: str, role_value) -> User:
    ensure_allowed(actor.role, Action.CHANGE_ROLE)
    ensure_not_self(actor.id, target_id, "change the role of")
    try:
        role = Role.parse(role_value)
    except ValueError as exc:
        raise ValidationFailed("Invalid role", error=str(exc)) from exc

    target = get_user(db, target_id)
    previous = target.role
    target.role = role.value
    commit(db)
    db.refresh(target)
    logger.info("User %s role changed from %s to %s by %s", target.id, previous, role.value, actor.id)
    return target


def deactivate_user(db: Session, actor: User, target_id: str) -> User:
    ensure_allowed(actor.role, Action.DEACTIVATE_USER)
    ensure_not_self(actor.id, target_id, "deactivate")

    target = get_user(db, target_id)
    if target.is_active:
        target.is_active = False
        commit(db)
        db.refresh(target)
        logger.info("User %s deactivated by %s", target.id, actor.id)
    revoke_user_sessions(db, target.id)
    return target


def grant_owner(db: Session, email: str) -> User:
    """Promote an existing account to owner; bootstrap path for the first owner."""
    user = get_user_by_email(db, email.strip())
    if user is None:
        raise NotFound("No user with email {}".format(email))
    user.role = Role.OWNER.value
    commit(db)
    db.refresh(user)
    logger.info("User %s granted owner role", user.id)
    return user


__all__ = [
    "change_role",
    "deactivate_user",
    "ensure_user_exists",
    "get_user",
    "get_user_by_email",
    "grant_owner",
    "list_users",
    "update_profile",
]
