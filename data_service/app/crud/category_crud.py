# app/crud/category_crud.py
import logging
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from shared.utils.exceptions import DuplicateError, NotFoundError
from ..models.categories import Category
from ..schemas.category_schemas import CategoryCreate, CategoryUpdate

logger = logging.getLogger(__name__)


def category_name_exists(db: Session, name: str, exclude_id: Optional[int] = None) -> bool:
    query = db.query(Category.id).filter(
        func.lower(Category.name) == func.lower(name)  # Case-insensitive
    )
    if exclude_id is not None:
        query = query.filter(Category.id != exclude_id)
    return query.first() is not None


def get_categories(db: Session) -> List[Category]:
    return db.query(Category).order_by(Category.id.asc()).all()


def get_category_by_id(db: Session, category_id: int) -> Category:
    db_category = db.query(Category).filter(Category.id == category_id).first()
    if not db_category:
        raise NotFoundError(f"Category not found with ID: {category_id}")
    return db_category


def get_category_by_name(db: Session, name: str) -> Category:
    db_category = db.query(Category).filter(
        func.lower(Category.name) == func.lower(name)
    ).first()
    if not db_category:
        raise NotFoundError(f"Category not found with name: {name}")
    return db_category


def create_category(db: Session, category: CategoryCreate) -> Category:
    if category_name_exists(db, category.name):
        logger.info("Rejected duplicate category name %r", category.name)
        raise DuplicateError(f"Category already registered: {category.name}")

    db_category = Category(**category.model_dump())
    db.add(db_category)
    db.commit()
    db.refresh(db_category)
    return db_category


def update_category(db: Session, category_id: int, category: CategoryUpdate) -> Category:
    db_category = get_category_by_id(db, category_id)

    if category_name_exists(db, category.name, exclude_id=category_id):
        logger.info("Rejected rename of category %s to duplicate name %r", category_id, category.name)
        raise DuplicateError(f"Category already registered: {category.name}")

    # full overwrite; the path id wins over anything in the payload
    for field, value in category.model_dump().items():
        setattr(db_category, field, value)
    db_category.id = category_id

    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise DuplicateError(f"Category already registered: {category.name}")
    db.refresh(db_category)
    return db_category


def delete_category(db: Session, category_id: int) -> None:
    db_category = get_category_by_id(db, category_id)
    db.delete(db_category)
    db.commit()
