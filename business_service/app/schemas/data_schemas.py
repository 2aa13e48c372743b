# Representations returned by the data service
from datetime import datetime
from typing import Optional
from pydantic import BaseModel

from shared.core.schemas import Money


class CategoryDTO(BaseModel):
    id: int
    name: str
    description: Optional[str] = None


class ProductDTO(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    price: Optional[Money] = None
    category_id: Optional[int] = None
    category: Optional[CategoryDTO] = None


class InventoryDTO(BaseModel):
    id: int
    product_id: Optional[int] = None
    product: Optional[ProductDTO] = None
    quantity: Optional[int] = None
    min_stock: Optional[int] = None
    updated_at: Optional[datetime] = None
