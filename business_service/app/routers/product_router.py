from typing import List
from fastapi import APIRouter, Depends, status
from ..schemas.product_schemas import ProductRequest, ProductResponse
from ..services.product_business_service import ProductBusinessService
from .dependencies import get_product_service

router = APIRouter(prefix="/api/productos", tags=["productos"])


@router.get("", response_model=List[ProductResponse])
def read_products(service: ProductBusinessService = Depends(get_product_service)):
    return service.get_all_products()


@router.get("/categoria/{nombre}", response_model=List[ProductResponse])
def read_products_by_category(nombre: str, service: ProductBusinessService = Depends(get_product_service)):
    return service.get_products_by_category(nombre)


@router.get("/{product_id}", response_model=ProductResponse)
def read_product(product_id: int, service: ProductBusinessService = Depends(get_product_service)):
    return service.get_product_by_id(product_id)


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
def create_product(request: ProductRequest, service: ProductBusinessService = Depends(get_product_service)):
    return service.create_product(request)
