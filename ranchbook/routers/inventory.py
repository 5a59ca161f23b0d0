from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ranchbook.core.permissions import Action
from ranchbook.dependencies import get_db, require_permission
from ranchbook.schemas.common import MessageResponse
from ranchbook.schemas.inventory import InventoryCreate, InventoryRead, InventoryUpdate
from ranchbook.services.inventory_service import (
    create_inventory_item,
    delete_inventory_item,
    list_inventory,
    update_inventory_item,
)
from ranchbook.services.summary_service import low_stock_items

router = APIRouter(prefix="/api/inventory", tags=["Inventory"])


@router.get("", response_model=list[InventoryRead])
def get_all_inventory(
    db: Session = Depends(get_db),
    _user=Depends(require_permission(Action.READ)),
):
    return list_inventory(db)


@router.get("/low-stock", response_model=list[InventoryRead])
def get_low_stock_items(
    db: Session = Depends(get_db),
    _user=Depends(require_permission(Action.READ)),
):
    return low_stock_items(db)


@router.post("", response_model=InventoryRead)
def add_inventory_item(
    payload: InventoryCreate,
    db: Session = Depends(get_db),
    _user=Depends(require_permission(Action.CREATE)),
):
    return create_inventory_item(db, payload)


@router.put("/{item_id}", response_model=InventoryRead)
def edit_inventory_item(
    item_id: int,
    payload: InventoryUpdate,
    db: Session = Depends(get_db),
    _user=Depends(require_permission(Action.UPDATE)),
):
    return update_inventory_item(db, item_id, payload.changes())


@router.delete("/{item_id}", response_model=MessageResponse)
def remove_inventory_item(
    item_id: int,
    db: Session = Depends(get_db),
    _user=Depends(require_permission(Action.DELETE)),
):
    delete_inventory_item(db, item_id)
    return {"message": "Inventory item deleted successfully"}


__all__ = ["router"]
