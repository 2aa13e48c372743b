import logging
from typing import List

from shared.utils.exceptions import AppException, BusinessValidationError
from ..client.data_service_client import DataServiceClient
from ..schemas.product_schemas import ProductRequest, ProductResponse
from .service_errors import data_service_errors

logger = logging.getLogger(__name__)


def validate_product_request(request: ProductRequest) -> None:
    if request.price is None or request.price <= 0:
        raise BusinessValidationError("price must exceed zero")
    if request.stock is not None and request.stock < 0:
        raise BusinessValidationError("stock cannot be negative")


class ProductBusinessService:

    def __init__(self, client: DataServiceClient):
        self.client = client

    def get_all_products(self) -> List[ProductResponse]:
        with data_service_errors("fetching products"):
            products = self.client.get_products()
        return [ProductResponse.from_dto(p) for p in products]

    def get_product_by_id(self, product_id: int) -> ProductResponse:
        with data_service_errors(
                f"fetching product {product_id}",
                not_found=f"Product not found with ID: {product_id}"):
            product = self.client.get_product(product_id)
        return ProductResponse.from_dto(product)

    def get_products_by_category(self, category_name: str) -> List[ProductResponse]:
        with data_service_errors(f"fetching products of category {category_name!r}"):
            products = self.client.get_products_by_category(category_name)
        return [ProductResponse.from_dto(p) for p in products]

    def create_product(self, request: ProductRequest) -> ProductResponse:
        validate_product_request(request)

        with data_service_errors(
                "creating product",
                not_found=(f"Category not found with ID: {request.category_id}"
                           if request.category_id is not None else None)):
            product = self.client.create_product(
                name=request.name,
                description=request.description,
                price=request.price,
                category_id=request.category_id,
            )

        if request.stock is not None:
            # two separate writes; a failure here leaves the product without stock
            try:
                with data_service_errors(f"creating inventory for product {product.id}"):
                    self.client.create_inventory(product.id, request.stock, request.min_stock)
            except AppException:
                logger.error(
                    "Product %s was created but its initial stock of %d was not; "
                    "the product has no inventory record", product.id, request.stock)
                raise
            logger.info("Created product %s with initial stock %d", product.id, request.stock)

        return ProductResponse.from_dto(product)
