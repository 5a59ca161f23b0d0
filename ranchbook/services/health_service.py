from sqlalchemy import select
from sqlalchemy.orm import Session

from ranchbook.models.health_record import HealthRecord
from ranchbook.schemas.health_record import HealthRecordCreate
from ranchbook.services.livestock_service import ensure_livestock_exists
from ranchbook.services.store import commit


def list_health_records(db: Session, *, livestock_id: int | None = None) -> list[HealthRecord]:
    stmt = select(HealthRecord).order_by(HealthRecord.date.desc(), HealthRecord.id.desc())
    if livestock_id is not None:
        stmt = stmt.where(HealthRecord.livestock_id == livestock_id)
    return list(db.execute(stmt).scalars().all())


def create_health_record(db: Session, payload: HealthRecordCreate) -> HealthRecord:
    ensure_livestock_exists(db, payload.livestock_id)
    record = HealthRecord(**payload.model_dump())
    db.add(record)
    commit(db)
    db.refresh(record)
    return record


__all__ = ["create_health_record", "list_health_records"]
