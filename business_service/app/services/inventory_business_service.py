import logging
from decimal import Decimal
from typing import Iterable, List

from ..client.data_service_client import DataServiceClient
from ..schemas.data_schemas import InventoryDTO
from .service_errors import data_service_errors

logger = logging.getLogger(__name__)


def calculate_inventory_value(inventories: Iterable[InventoryDTO]) -> Decimal:
    """Sum ``quantity * price`` over the given inventory records.

    Records without a product, without a positive quantity or without a
    price contribute nothing. The result is exact; an empty input gives
    ``Decimal("0")``.
    """
    total = Decimal("0")
    for inventory in inventories:
        if inventory.product is None:
            continue
        if inventory.quantity is None or inventory.quantity <= 0:
            continue
        price = inventory.product.price
        if price is None:
            logger.warning(
                "Product %s has no price defined, skipping it in the valuation",
                inventory.product.name)
            continue
        total += price * inventory.quantity
    return total


class InventoryBusinessService:

    def __init__(self, client: DataServiceClient):
        self.client = client

    def get_low_stock_products(self) -> List[InventoryDTO]:
        # the data service owns the low-stock predicate
        with data_service_errors("fetching low stock inventory"):
            return self.client.get_low_stock()

    def calculate_total_inventory_value(self) -> Decimal:
        with data_service_errors("fetching inventory for valuation"):
            inventories = self.client.get_inventories()

        logger.info("Calculating total inventory value for %d records", len(inventories))
        total = calculate_inventory_value(inventories)
        logger.info("Total inventory value: %s", total)
        return total
