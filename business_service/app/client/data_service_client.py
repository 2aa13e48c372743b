import logging
from decimal import Decimal
from typing import Any, List, Optional
from urllib.parse import quote

import requests

from shared.core.config import settings
from ..schemas.data_schemas import CategoryDTO, InventoryDTO, ProductDTO

logger = logging.getLogger(__name__)


class DataServiceClient:
    """HTTP client for the data service.

    Every call raises ``requests.RequestException`` (``HTTPError`` for
    non-2xx answers) and leaves the translation into domain errors to the
    business services.
    """

    def __init__(self, base_url: str = None, timeout: float = None,
                 session: Optional[requests.Session] = None):
        self.base_url = (base_url or settings.DATA_SERVICE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.DATA_SERVICE_TIMEOUT
        self.session = session or requests.Session()

    def _request(self, method: str, path: str, **kwargs) -> Any:
        url = f"{self.base_url}{path}"
        logger.debug("%s %s", method, url)
        response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        response.raise_for_status()
        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json(parse_float=Decimal)
        except ValueError as e:
            raise requests.RequestException(
                f"Invalid JSON from data service: {e}", response=response)

    # ---------------- Products ----------------

    def get_products(self) -> List[ProductDTO]:
        return [ProductDTO.model_validate(p) for p in self._request("GET", "/data/productos")]

    def get_product(self, product_id: int) -> ProductDTO:
        return ProductDTO.model_validate(self._request("GET", f"/data/productos/{product_id}"))

    def get_products_by_category(self, category_name: str) -> List[ProductDTO]:
        data = self._request("GET", f"/data/productos/categoria/{quote(category_name)}")
        return [ProductDTO.model_validate(p) for p in data]

    def create_product(self, name: str, description: Optional[str], price: Decimal,
                       category_id: Optional[int]) -> ProductDTO:
        payload = {
            "name": name,
            "description": description,
            "price": str(price),
            "category_id": category_id,
        }
        return ProductDTO.model_validate(self._request("POST", "/data/productos", json=payload))

    # ---------------- Categories ----------------

    def get_categories(self) -> List[CategoryDTO]:
        return [CategoryDTO.model_validate(c) for c in self._request("GET", "/data/categorias")]

    # ---------------- Inventory ----------------

    def get_inventories(self) -> List[InventoryDTO]:
        return [InventoryDTO.model_validate(i) for i in self._request("GET", "/data/inventario")]

    def get_low_stock(self) -> List[InventoryDTO]:
        return [InventoryDTO.model_validate(i) for i in self._request("GET", "/data/inventario/stock-bajo")]

    def create_inventory(self, product_id: int, quantity: int,
                         min_stock: Optional[int] = None) -> InventoryDTO:
        payload = {"product_id": product_id, "quantity": quantity, "min_stock": min_stock}
        return InventoryDTO.model_validate(self._request("POST", "/data/inventario", json=payload))

    def close(self):
        self.session.close()


# Dependency


def get_data_client():
    # one client and session per request; requests.Session is not shared across threads
    client = DataServiceClient()
    try:
        yield client
    finally:
        client.close()
