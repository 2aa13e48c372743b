# app/crud/inventory_crud.py
from datetime import datetime
from typing import List

from sqlalchemy.orm import Session

from shared.core.config import settings
from shared.utils.exceptions import BusinessValidationError, NotFoundError
from ..models.inventory import Inventory
from ..schemas.inventory_schemas import InventoryCreate, InventoryUpdate
from .product_crud import get_product_by_id


def get_inventories(db: Session) -> List[Inventory]:
    return db.query(Inventory).order_by(Inventory.id.asc()).all()


def get_inventory_by_id(db: Session, inventory_id: int) -> Inventory:
    db_inventory = db.query(Inventory).filter(Inventory.id == inventory_id).first()
    if not db_inventory:
        raise NotFoundError(f"Inventory not found with ID: {inventory_id}")
    return db_inventory


def get_inventory_by_product_id(db: Session, product_id: int) -> Inventory:
    db_inventory = db.query(Inventory).filter(Inventory.product_id == product_id).first()
    if not db_inventory:
        raise NotFoundError(f"Inventory not found for product ID: {product_id}")
    return db_inventory


def get_low_stock(db: Session) -> List[Inventory]:
    return (
        db.query(Inventory)
        .filter(Inventory.quantity <= Inventory.min_stock)
        .order_by(Inventory.id.asc())
        .all()
    )


def get_by_quantity(db: Session, quantity: int) -> List[Inventory]:
    return db.query(Inventory).filter(Inventory.quantity == quantity).order_by(Inventory.id.asc()).all()


def get_out_of_stock(db: Session) -> List[Inventory]:
    return get_by_quantity(db, 0)


def create_inventory(db: Session, inventory: InventoryCreate) -> Inventory:
    if inventory.product_id is not None:
        get_product_by_id(db, inventory.product_id)

    inventory_data = inventory.model_dump()
    if inventory_data["min_stock"] is None:
        inventory_data["min_stock"] = settings.DEFAULT_MIN_STOCK

    db_inventory = Inventory(**inventory_data)
    db_inventory.updated_at = datetime.now()
    db.add(db_inventory)
    db.commit()
    db.refresh(db_inventory)
    return db_inventory


def update_inventory(db: Session, inventory_id: int, inventory: InventoryUpdate) -> Inventory:
    db_inventory = get_inventory_by_id(db, inventory_id)

    if inventory.product_id is not None:
        get_product_by_id(db, inventory.product_id)

    for field, value in inventory.model_dump().items():
        setattr(db_inventory, field, value)
    db_inventory.id = inventory_id
    db_inventory.updated_at = datetime.now()

    db.commit()
    db.refresh(db_inventory)
    return db_inventory


def delete_inventory(db: Session, inventory_id: int) -> None:
    db_inventory = get_inventory_by_id(db, inventory_id)
    db.delete(db_inventory)
    db.commit()


def update_quantity(db: Session, product_id: int, quantity: int) -> Inventory:
    if quantity < 0:
        raise BusinessValidationError("quantity cannot be negative")

    db_inventory = get_inventory_by_product_id(db, product_id)
    db_inventory.quantity = quantity
    db_inventory.updated_at = datetime.now()
    db.commit()
    db.refresh(db_inventory)
    return db_inventory


def has_sufficient_stock(db: Session, product_id: int, required: int) -> bool:
    db_inventory = db.query(Inventory).filter(Inventory.product_id == product_id).first()
    if not db_inventory or db_inventory.quantity is None:
        return False
    return db_inventory.quantity >= required
