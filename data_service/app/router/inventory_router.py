# app/router/inventory_router.py
from typing import List
from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session
from shared.core.database import get_data_db as get_db
from ..schemas.inventory_schemas import InventoryOut, InventoryCreate, InventoryUpdate, QuantityUpdate
from ..crud import inventory_crud as crud

router = APIRouter(prefix="/data/inventario", tags=["inventario"])


@router.get("", response_model=List[InventoryOut])
def read_inventories(db: Session = Depends(get_db)):
    return crud.get_inventories(db)


@router.get("/stock-bajo", response_model=List[InventoryOut])
def read_low_stock(db: Session = Depends(get_db)):
    return crud.get_low_stock(db)


@router.get("/sin-stock", response_model=List[InventoryOut])
def read_out_of_stock(db: Session = Depends(get_db)):
    return crud.get_out_of_stock(db)


@router.get("/producto/{producto_id}", response_model=InventoryOut)
def read_inventory_by_product(producto_id: int, db: Session = Depends(get_db)):
    return crud.get_inventory_by_product_id(db, producto_id)


@router.get("/producto/{producto_id}/stock-suficiente", response_model=bool)
def read_sufficient_stock(
    producto_id: int,
    cantidad: int = Query(..., ge=0),
    db: Session = Depends(get_db),
):
    return crud.has_sufficient_stock(db, producto_id, cantidad)


@router.patch("/producto/{producto_id}/cantidad", response_model=InventoryOut)
def update_quantity(producto_id: int, payload: QuantityUpdate, db: Session = Depends(get_db)):
    return crud.update_quantity(db, producto_id, payload.quantity)


@router.get("/{inventory_id}", response_model=InventoryOut)
def read_inventory(inventory_id: int, db: Session = Depends(get_db)):
    return crud.get_inventory_by_id(db, inventory_id)


@router.post("", response_model=InventoryOut, status_code=status.HTTP_201_CREATED)
def create_inventory(inventory: InventoryCreate, db: Session = Depends(get_db)):
    return crud.create_inventory(db, inventory)


@router.put("/{inventory_id}", response_model=InventoryOut)
def update_inventory(inventory_id: int, inventory: InventoryUpdate, db: Session = Depends(get_db)):
    return crud.update_inventory(db, inventory_id, inventory)


@router.delete("/{inventory_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_inventory(inventory_id: int, db: Session = Depends(get_db)):
    crud.delete_inventory(db, inventory_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
