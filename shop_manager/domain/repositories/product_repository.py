"""
Product Repository Interface.
Defines the catalog lookups the sales features need.
"""

from typing import List

from shop_manager.domain.models.product import Product
from shop_manager.domain.repositories.base import BaseRepository
from shop_manager.domain.schemas.product import ProductFilter


class ProductRepository(BaseRepository[Product]):
    """Interface for Product-specific operations."""

    def list_products(self, filters: ProductFilter) -> List[Product]:
        """Products matching every given filter, ordered by name.

        name is a case-insensitive substring match, type and category are
        exact matches.
        """
        ...

    def count(self) -> int:
        """Number of products in the catalog."""
        ...
