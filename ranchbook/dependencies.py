from typing import Optional

from fastapi import Depends, Header, Request
from sqlalchemy.orm import Session

from ranchbook.config import Settings
from ranchbook.core.constants import SESSION_KEY
from ranchbook.core.errors import Forbidden
from ranchbook.core.permissions import Action, is_allowed
from ranchbook.core.security import get_bearer_token
from ranchbook.database.session import get_db
from ranchbook.models.user import User
from ranchbook.services.identity_service import resolve_session, touch_last_active


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_session_token(
    request: Request,
    authorization: Optional[str] = Header(None),
) -> Optional[str]:
    token = get_bearer_token(authorization)
    if token:
        return token
    return request.session.get(SESSION_KEY)


def get_current_user(
    token: Optional[str] = Depends(get_session_token),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> User:
    user = resolve_session(db, token, settings.SESSION_TTL_SECONDS)
    touch_last_active(db, user.id)
    return user


def require_permission(action: Action):
    def dependency(user: User = Depends(get_current_user)) -> User:
        if not is_allowed(user.role, action):
            raise Forbidden()
        return user

    return dependency


__all__ = [
    "get_app_settings",
    "get_current_user",
    "get_db",
    "get_session_token",
    "require_permission",
]
