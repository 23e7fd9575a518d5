"""Schema creation and sample catalog data."""

import structlog

from shop_manager.config import get_settings
from shop_manager.domain.models.product import Product
from shop_manager.infrastructure.database import Base, SessionLocal, engine
from shop_manager.infrastructure.repositories.product_repository import SQLAlchemyProductRepository

settings = get_settings()
logger = structlog.get_logger(__name__)

SAMPLE_PRODUCTS = [
    {"name": "Shampoo Pro", "type": "hair", "category": "shampoo", "cost": 12.99, "sales_per_day": 15},
    {"name": "Conditioner Plus", "type": "hair", "category": "conditioner", "cost": 14.99, "sales_per_day": 12},
    {"name": "Gucci Bloom", "type": "perfume", "category": "gucci", "cost": 89.99, "sales_per_day": 8},
    {"name": "Victoria Secret Angel", "type": "perfume", "category": "victoria_secret", "cost": 65.99, "sales_per_day": 10},
    {"name": "Body Lotion Smooth", "type": "skin", "category": "body_lotion", "cost": 18.99, "sales_per_day": 20},
    {"name": "Moisturizer Daily", "type": "skin", "category": "moisturizer", "cost": 24.99, "sales_per_day": 18},
]


def seed_sample_products(repo: SQLAlchemyProductRepository) -> int:
    """Insert the sample products into an empty catalog. Returns how many were added."""
    if repo.count() > 0:
        return 0
    for product in SAMPLE_PRODUCTS:
        repo.create(product)
    logger.info("Sample products added to database", count=len(SAMPLE_PRODUCTS))
    return len(SAMPLE_PRODUCTS)


def init_db() -> None:
    """Create tables and, if enabled, seed an empty catalog."""
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created/verified", url=engine.url.render_as_string(hide_password=True))

    if not settings.SEED_SAMPLE_DATA:
        return

    db = SessionLocal()
    try:
        seed_sample_products(SQLAlchemyProductRepository(db, Product))
    finally:
        db.close()
