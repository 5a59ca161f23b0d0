import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from ranchbook.core.errors import Conflict, ValidationFailed
from ranchbook.models.livestock import Livestock
from ranchbook.schemas.livestock import LivestockCreate
from ranchbook.services.store import apply_changes, commit, get_or_404

logger = logging.getLogger(__name__)


def list_livestock(db: Session, *, include_inactive: bool = False) -> list[Livestock]:
    stmt = select(Livestock).order_by(Livestock.id)
    if not include_inactive:
        stmt = stmt.where(Livestock.is_active.is_(True))
    return list(db.execute(stmt).scalars().all())


def get_livestock(db: Session, livestock_id: int) -> Livestock:
    return get_or_404(db, Livestock, livestock_id, "Livestock")


def get_livestock_by_tag_id(db: Session, tag_id: str) -> Livestock | None:
    # Inactive animals keep their tag reserved
    return db.execute(select(Livestock).where(Livestock.tag_id == tag_id)).scalars().first()


def ensure_livestock_exists(db: Session, livestock_id) -> None:
    if livestock_id is None:
        return
    if db.get(Livestock, livestock_id) is None:
        raise ValidationFailed(
            "Unknown livestock reference",
            error="livestockId: no livestock with id {}".format(livestock_id),
        )


def _ensure_tag_available(db: Session, tag_id: str, current_id: int | None = None) -> None:
    existing = get_livestock_by_tag_id(db, tag_id)
    if existing is not None and existing.id != current_id:
        raise Conflict("Tag ID {} is already in use".format(tag_id))


def create_livestock(db: Session, payload: LivestockCreate) -> Livestock:
    _ensure_tag_available(db, payload.tag_id)
    animal = Livestock(**payload.model_dump())
    db.add(animal)
    commit(db, "Tag ID {} is already in use".format(payload.tag_id))
    db.refresh(animal)
    logger.info("Livestock %s created (id=%s)", animal.tag_id, animal.id)
    return animal


def update_livestock(db: Session, livestock_id: int, changes: dict) -> Livestock:
    animal = get_livestock(db, livestock_id)
    if "tag_id" in changes:
        _ensure_tag_available(db, changes["tag_id"], current_id=animal.id)
    apply_changes(animal, changes)
    commit(db, "Tag ID is already in use")
    db.refresh(animal)
    return animal


def delete_livestock(db: Session, livestock_id: int) -> Livestock:
    animal = get_livestock(db, livestock_id)
    if not animal.is_active:
        return animal
    animal.is_active = False
    commit(db)
    db.refresh(animal)
    logger.info("Livestock %s deactivated (id=%s)", animal.tag_id, animal.id)
    return animal


__all__ = [
    "create_livestock",
    "delete_livestock",
    "ensure_livestock_exists",
    "get_livestock",
    "get_livestock_by_tag_id",
    "list_livestock",
    "update_livestock",
]
