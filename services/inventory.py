"""
Inventory Lookup
Capability used by product validation to enforce unique product names
"""

from typing import Dict, List, Optional, Protocol
from loguru import logger

from models.product import Product, ProductCandidate
from utils.exceptions import ExistingProductException


class InventoryLookup(Protocol):
    """Anything that can find a product by its name"""

    def find_product_by_name(self, name: str) -> Optional[Product]:
        ...


class InMemoryInventory:
    """
    Inventory kept in a dict keyed by product name
    """

    def __init__(self, products: Optional[List[Product]] = None):
        self.products: Dict[str, Product] = {}
        for product in products or []:
            self.products[product.name] = product

    def find_product_by_name(self, name: str) -> Optional[Product]:
        """
        Find product by exact name

        Args:
            name: Product name

        Returns:
            Product or None
        """
        return self.products.get(name)

    def add_product(self, candidate: ProductCandidate) -> Product:
        """
        Store a validated candidate as a product

        Args:
            candidate: Candidate that passed validation

        Returns:
            Stored product with a generated id

        Raises:
            ExistingProductException: a product with this name is stored
        """
        if candidate.name in self.products:
            logger.warning(f"Refusing to replace existing product: {candidate.name}")
            raise ExistingProductException(candidate.name)

        product = Product(**candidate.model_dump())
        self.products[product.name] = product
        logger.info(f"Product added to inventory: {product.name}")
        return product

    def list_products(self) -> List[Product]:
        """All products, in insertion order"""
        return list(self.products.values())

    def __len__(self) -> int:
        return len(self.products)
