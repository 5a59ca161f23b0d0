from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ranchbook.core.permissions import Action
from ranchbook.dependencies import get_db, require_permission
from ranchbook.schemas.user import UserRead
from ranchbook.services.user_service import list_users

router = APIRouter(prefix="/api/partners", tags=["Partners"])


@router.get("", response_model=list[UserRead])
def get_partners(
    db: Session = Depends(get_db),
    _user=Depends(require_permission(Action.READ)),
):
    return list_users(db)


__all__ = ["router"]
