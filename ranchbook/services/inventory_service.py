from sqlalchemy import select
from sqlalchemy.orm import Session

from ranchbook.models.inventory import InventoryItem
from ranchbook.schemas.inventory import InventoryCreate
from ranchbook.services.store import apply_changes, commit, get_or_404


def list_inventory(db: Session) -> list[InventoryItem]:
    return list(db.execute(select(InventoryItem).order_by(InventoryItem.id)).scalars().all())


def get_inventory_item(db: Session, item_id: int) -> InventoryItem:
    return get_or_404(db, InventoryItem, item_id, "Inventory item")


def create_inventory_item(db: Session, payload: InventoryCreate) -> InventoryItem:
    item = InventoryItem(**payload.model_dump())
    db.add(item)
    commit(db)
    db.refresh(item)
    return item


def update_inventory_item(db: Session, item_id: int, changes: dict) -> InventoryItem:
    item = get_inventory_item(db, item_id)
    apply_changes(item, changes)
    commit(db)
    db.refresh(item)
    return item


def delete_inventory_item(db: Session, item_id: int) -> None:
    item = get_inventory_item(db, item_id)
    db.delete(item)
    commit(db)


__all__ = [
    "create_inventory_item",
    "delete_inventory_item",
    "get_inventory_item",
    "list_inventory",
    "update_inventory_item",
]
