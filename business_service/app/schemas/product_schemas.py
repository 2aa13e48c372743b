from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field

from shared.core.schemas import Money
from .data_schemas import ProductDTO


class ProductRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=150)
    description: Optional[str] = None
    # price and stock rules are business validations, not schema errors
    price: Optional[Decimal] = None
    category_id: Optional[int] = None
    stock: Optional[int] = None
    min_stock: Optional[int] = None


class ProductResponse(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    price: Optional[Money] = None
    category_name: Optional[str] = None

    @classmethod
    def from_dto(cls, product: ProductDTO) -> "ProductResponse":
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            price=product.price,
            category_name=product.category.name if product.category else None,
        )
