"""
SQLAlchemy Implementation of Product Repository.
"""

from typing import List

from sqlalchemy import func

from shop_manager.domain.models.product import Product
from shop_manager.domain.repositories.product_repository import ProductRepository
from shop_manager.domain.schemas.product import ProductFilter
from shop_manager.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyProductRepository(SQLAlchemyRepository[Product], ProductRepository):
    """Product repository implementation using SQLAlchemy."""

    def list_products(self, filters: ProductFilter) -> List[Product]:
        query = self.db.query(Product)

        if filters.name:
            query = query.filter(Product.name.icontains(filters.name, autoescape=True))
        if filters.type:
            query = query.filter(Product.type == filters.type.value)
        if filters.category:
            query = query.filter(Product.category == filters.category)

        return query.order_by(Product.name.asc(), Product.id.asc()).all()

    def count(self) -> int:
        return self.db.query(func.count(Product.id)).scalar() or 0
