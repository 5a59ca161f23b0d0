from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ranchbook.config import Settings
from ranchbook.core.permissions import Action
from ranchbook.dependencies import get_app_settings, get_db, require_permission
from ranchbook.schemas.health_record import HealthRecordCreate, HealthRecordRead
from ranchbook.services.health_service import create_health_record, list_health_records
from ranchbook.services.summary_service import upcoming_health_tasks

router = APIRouter(prefix="/api/health-records", tags=["Health records"])


@router.get("", response_model=list[HealthRecordRead])
def get_health_records(
    livestock_id: Optional[int] = Query(None, alias="livestockId"),
    db: Session = Depends(get_db),
    _user=Depends(require_permission(Action.READ)),
):
    return list_health_records(db, livestock_id=livestock_id)


@router.get("/upcoming", response_model=list[HealthRecordRead])
def get_upcoming_health_tasks(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
    _user=Depends(require_permission(Action.READ)),
):
    return upcoming_health_tasks(db, days=settings.UPCOMING_WINDOW_DAYS)


@router.post("", response_model=HealthRecordRead)
def add_health_record(
    payload: HealthRecordCreate,
    db: Session = Depends(get_db),
    _user=Depends(require_permission(Action.CREATE)),
):
    return create_health_record(db, payload)


__all__ = ["router"]
