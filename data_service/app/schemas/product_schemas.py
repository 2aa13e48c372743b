# app/schemas/product_schemas.py
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field

from shared.core.schemas import Money
from .category_schemas import CategoryOut


class ProductBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=150)
    description: Optional[str] = None
    price: Money = Field(..., ge=Decimal("0"))
    category_id: Optional[int] = None


class ProductCreate(ProductBase):
    pass


class ProductUpdate(ProductBase):
    pass


class ProductOut(ProductBase):
    id: int
    category: Optional[CategoryOut] = None

    model_config = {
        "from_attributes": True
    }
