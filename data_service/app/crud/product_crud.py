# app/crud/product_crud.py
import logging
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from shared.utils.exceptions import DuplicateError, NotFoundError
from ..models.categories import Category
from ..models.products import Product
from ..schemas.product_schemas import ProductCreate, ProductUpdate
from .category_crud import get_category_by_id

logger = logging.getLogger(__name__)


def product_name_exists(db: Session, name: str, exclude_id: Optional[int] = None) -> bool:
    query = db.query(Product.id).filter(
        func.lower(Product.name) == func.lower(name)  # Case-insensitive
    )
    if exclude_id is not None:
        query = query.filter(Product.id != exclude_id)
    return query.first() is not None


def get_products(db: Session) -> List[Product]:
    return db.query(Product).order_by(Product.id.asc()).all()


def get_product_by_id(db: Session, product_id: int) -> Product:
    db_product = db.query(Product).filter(Product.id == product_id).first()
    if not db_product:
        raise NotFoundError(f"Product not found with ID: {product_id}")
    return db_product


def get_products_by_category_name(db: Session, category_name: str) -> List[Product]:
    return (
        db.query(Product)
        .join(Category, Product.category_id == Category.id)
        .filter(Category.name == category_name)
        .order_by(Product.id.asc())
        .all()
    )


def create_product(db: Session, product: ProductCreate) -> Product:
    if product_name_exists(db, product.name):
        logger.info("Rejected duplicate product name %r", product.name)
        raise DuplicateError(f"Product already registered: {product.name}")

    if product.category_id is not None:
        get_category_by_id(db, product.category_id)

    db_product = Product(**product.model_dump())
    db.add(db_product)
    db.commit()
    db.refresh(db_product)
    return db_product


def update_product(db: Session, product_id: int, product: ProductUpdate) -> Product:
    db_product = get_product_by_id(db, product_id)

    if product_name_exists(db, product.name, exclude_id=product_id):
        logger.info("Rejected rename of product %s to duplicate name %r", product_id, product.name)
        raise DuplicateError(f"Product already registered: {product.name}")

    if product.category_id is not None:
        get_category_by_id(db, product.category_id)

    for field, value in product.model_dump().items():
        setattr(db_product, field, value)
    db_product.id = product_id

    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise DuplicateError(f"Product already registered: {product.name}")
    db.refresh(db_product)
    return db_product


def delete_product(db: Session, product_id: int) -> None:
    db_product = get_product_by_id(db, product_id)
    db.delete(db_product)
    db.commit()
