# app/schemas/inventory_schemas.py
from datetime import datetime
from typing import Optional
from pydantic import BaseModel

from .product_schemas import ProductOut


class InventoryBase(BaseModel):
    product_id: Optional[int] = None
    quantity: Optional[int] = None
    min_stock: Optional[int] = None


class InventoryCreate(InventoryBase):
    pass


class InventoryUpdate(InventoryBase):
    pass


class QuantityUpdate(BaseModel):
    quantity: int


class InventoryOut(InventoryBase):
    id: int
    updated_at: Optional[datetime] = None
    product: Optional[ProductOut] = None

    model_config = {
        "from_attributes": True
    }
