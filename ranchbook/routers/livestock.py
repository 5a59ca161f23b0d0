from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ranchbook.core.permissions import Action
from ranchbook.dependencies import get_db, require_permission
from ranchbook.schemas.common import MessageResponse
from ranchbook.schemas.livestock import LivestockCreate, LivestockRead, LivestockStats, LivestockUpdate
from ranchbook.services.livestock_service import (
    create_livestock,
    delete_livestock,
    list_livestock,
    update_livestock,
)
from ranchbook.services.summary_service import livestock_stats

router = APIRouter(prefix="/api/livestock", tags=["Livestock"])


@router.get("", response_model=list[LivestockRead])
def get_all_livestock(
    db: Session = Depends(get_db),
    _user=Depends(require_permission(Action.READ)),
):
    return list_livestock(db)


@router.get("/stats", response_model=LivestockStats)
def get_livestock_stats(
    db: Session = Depends(get_db),
    _user=Depends(require_permission(Action.READ)),
):
    return livestock_stats(db)


@router.post("", response_model=LivestockRead)
def add_livestock(
    payload: LivestockCreate,
    db: Session = Depends(get_db),
    _user=Depends(require_permission(Action.CREATE)),
):
    return create_livestock(db, payload)


@router.put("/{livestock_id}", response_model=LivestockRead)
def edit_livestock(
    livestock_id: int,
    payload: LivestockUpdate,
    db: Session = Depends(get_db),
    _user=Depends(require_permission(Action.UPDATE)),
):
    return update_livestock(db, livestock_id, payload.changes())


@router.delete("/{livestock_id}", response_model=MessageResponse)
def remove_livestock(
    livestock_id: int,
    db: Session = Depends(get_db),
    _user=Depends(require_permission(Action.DELETE)),
):
    delete_livestock(db, livestock_id)
    return {"message": "Livestock deleted successfully"}


__all__ = ["router"]
