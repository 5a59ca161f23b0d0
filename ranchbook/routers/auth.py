import logging

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from ranchbook.config import Settings
from ranchbook.core.constants import SESSION_KEY
from ranchbook.core.permissions import Action
from ranchbook.core.security import verify_identity_assertion
from ranchbook.dependencies import get_app_settings, get_db, get_session_token, require_permission
from ranchbook.models.user import User
from ranchbook.schemas.common import MessageResponse
from ranchbook.schemas.user import LoginRequest, LoginResponse, ProfileUpdate, UserRead
from ranchbook.services.identity_service import (
    create_session,
    revoke_session,
    upsert_from_identity_assertion,
)
from ranchbook.services.user_service import update_profile

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.post("/login", response_model=LoginResponse)
def login(
    payload: LoginRequest,
    request: Request,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    assertion = verify_identity_assertion(payload.id_token, settings)
    user = upsert_from_identity_assertion(db, assertion, settings.default_admin_emails())
    session = create_session(db, user, settings.SESSION_TTL_SECONDS)
    request.session[SESSION_KEY] = session.sid
    logger.info("User %s logged in", user.id)
    return LoginResponse(user=UserRead.model_validate(user), token=session.sid)


@router.post("/logout", response_model=MessageResponse)
def logout(
    request: Request,
    token=Depends(get_session_token),
    db: Session = Depends(get_db),
):
    revoke_session(db, token)
    request.session.clear()
    if token:
        logger.info("Session logged out")
    return {"message": "Logged out"}


@router.get("/user", response_model=UserRead)
def current_user(user: User = Depends(require_permission(Action.MANAGE_SELF))):
    return user


@router.put("/user", response_model=UserRead)
def update_current_user(
    payload: ProfileUpdate,
    user: User = Depends(require_permission(Action.MANAGE_SELF)),
    db: Session = Depends(get_db),
):
    return update_profile(db, user, payload.changes())


__all__ = ["router"]
