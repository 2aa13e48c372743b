from typing import List
from fastapi import APIRouter, Depends
from ..schemas.data_schemas import CategoryDTO
from ..services.category_business_service import CategoryBusinessService
from .dependencies import get_category_service

router = APIRouter(prefix="/api/categorias", tags=["categorias"])


@router.get("", response_model=List[CategoryDTO])
def read_categories(service: CategoryBusinessService = Depends(get_category_service)):
    return service.get_all_categories()
