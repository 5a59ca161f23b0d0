"""Small helpers shared by the entity services."""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ranchbook.core.errors import Conflict, NotFound


def get_or_404(db: Session, model, entity_id, label: str):
    instance = db.get(model, entity_id)
    if instance is None:
        raise NotFound("{} not found".format(label))
    return instance


def commit(db: Session, conflict_message: str = "Record conflicts with existing data") -> None:
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise Conflict(conflict_message, error=str(exc.orig)) from exc


def apply_changes(instance, changes: dict) -> None:
    for field, value in changes.items():
        setattr(instance, field, value)


__all__ = ["apply_changes", "commit", "get_or_404"]
