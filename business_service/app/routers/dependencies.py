from fastapi import Depends

from ..client.data_service_client import DataServiceClient, get_data_client
from ..services.category_business_service import CategoryBusinessService
from ..services.inventory_business_service import InventoryBusinessService
from ..services.product_business_service import ProductBusinessService


def get_product_service(client: DataServiceClient = Depends(get_data_client)) -> ProductBusinessService:
    return ProductBusinessService(client)


def get_category_service(client: DataServiceClient = Depends(get_data_client)) -> CategoryBusinessService:
    return CategoryBusinessService(client)


def get_inventory_service(client: DataServiceClient = Depends(get_data_client)) -> InventoryBusinessService:
    return InventoryBusinessService(client)
