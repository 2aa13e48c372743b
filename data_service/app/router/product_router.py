# app/router/product_router.py
from typing import List
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from shared.core.database import get_data_db as get_db
from ..schemas.product_schemas import ProductOut, ProductCreate, ProductUpdate
from ..crud import product_crud as crud

router = APIRouter(prefix="/data/productos", tags=["productos"])


@router.get("", response_model=List[ProductOut])
def read_products(db: Session = Depends(get_db)):
    return crud.get_products(db)


# Keep static routes ABOVE the parameterized ones
@router.get("/categoria/{nombre}", response_model=List[ProductOut])
def read_products_by_category(nombre: str, db: Session = Depends(get_db)):
    return crud.get_products_by_category_name(db, nombre)


@router.get("/{product_id}", response_model=ProductOut)
def read_product(product_id: int, db: Session = Depends(get_db)):
    return crud.get_product_by_id(db, product_id)


@router.post("", response_model=ProductOut, status_code=status.HTTP_201_CREATED)
def create_product(product: ProductCreate, db: Session = Depends(get_db)):
    return crud.create_product(db, product)


@router.put("/{product_id}", response_model=ProductOut)
def update_product(product_id: int, product: ProductUpdate, db: Session = Depends(get_db)):
    return crud.update_product(db, product_id, product)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(product_id: int, db: Session = Depends(get_db)):
    crud.delete_product(db, product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
