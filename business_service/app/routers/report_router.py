from typing import List
from fastapi import APIRouter, Depends
from ..schemas.data_schemas import InventoryDTO
from ..services.inventory_business_service import InventoryBusinessService
from .dependencies import get_inventory_service

router = APIRouter(prefix="/api/reportes", tags=["reportes"])


@router.get("/stock-bajo", response_model=List[InventoryDTO])
def read_low_stock(service: InventoryBusinessService = Depends(get_inventory_service)):
    return service.get_low_stock_products()


# bare JSON number, e.g. 25750.5
@router.get("/valor-inventario", response_model=None)
def read_inventory_value(service: InventoryBusinessService = Depends(get_inventory_service)):
    return service.calculate_total_inventory_value()
