from typing import Optional

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from ranchbook.core.permissions import Action
from ranchbook.dependencies import get_db, require_permission
from ranchbook.models.user import User
from ranchbook.schemas.common import MessageResponse
from ranchbook.schemas.user import RoleUpdate, UserRead
from ranchbook.services.user_service import change_role, deactivate_user

router = APIRouter(prefix="/api/admin", tags=["Admin"])


@router.put("/users/{user_id}/role", response_model=UserRead)
def update_user_role(
    user_id: str,
    payload: Optional[RoleUpdate] = Body(None),
    db: Session = Depends(get_db),
    actor: User = Depends(require_permission(Action.CHANGE_ROLE)),
):
    role = payload.role if payload is not None else None
    return change_role(db, actor, user_id, role)


@router.delete("/users/{user_id}", response_model=MessageResponse)
def deactivate_user_account(
    user_id: str,
    db: Session = Depends(get_db),
    actor: User = Depends(require_permission(Action.DEACTIVATE_USER)),
):
    deactivate_user(db, actor, user_id)
    return {"message": "User deactivated successfully"}


__all__ = ["router"]
