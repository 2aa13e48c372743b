from .categories import Category
from .products import Product
from .inventory import Inventory

__all__ = ["Category", "Product", "Inventory"]
