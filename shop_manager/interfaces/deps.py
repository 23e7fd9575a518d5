"""
API Dependencies.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from shop_manager.domain.models.product import Product
from shop_manager.domain.repositories.product_repository import ProductRepository
from shop_manager.infrastructure.database import get_db
from shop_manager.infrastructure.repositories.product_repository import SQLAlchemyProductRepository


def get_product_repository(db: Session = Depends(get_db)) -> ProductRepository:
    """Get product repository instance."""
    return SQLAlchemyProductRepository(db, Product)
