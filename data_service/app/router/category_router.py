# app/router/category_router.py
from typing import List
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from shared.core.database import get_data_db as get_db
from ..schemas.category_schemas import CategoryOut, CategoryCreate, CategoryUpdate
from ..crud import category_crud as crud

router = APIRouter(prefix="/data/categorias", tags=["categorias"])


@router.get("", response_model=List[CategoryOut])
def read_categories(db: Session = Depends(get_db)):
    return crud.get_categories(db)


@router.get("/nombre/{nombre}", response_model=CategoryOut)
def read_category_by_name(nombre: str, db: Session = Depends(get_db)):
    return crud.get_category_by_name(db, nombre)


@router.get("/{category_id}", response_model=CategoryOut)
def read_category(category_id: int, db: Session = Depends(get_db)):
    return crud.get_category_by_id(db, category_id)


@router.post("", response_model=CategoryOut, status_code=status.HTTP_201_CREATED)
def create_category(category: CategoryCreate, db: Session = Depends(get_db)):
    return crud.create_category(db, category)


@router.put("/{category_id}", response_model=CategoryOut)
def update_category(category_id: int, category: CategoryUpdate, db: Session = Depends(get_db)):
    return crud.update_category(db, category_id, category)


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_category(category_id: int, db: Session = Depends(get_db)):
    crud.delete_category(db, category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
