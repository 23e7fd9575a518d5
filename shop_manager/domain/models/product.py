"""Product domain model — maps to the 'products' table."""

from sqlalchemy import Column, DateTime, Float, Integer, String, Text
from sqlalchemy.sql import func

from shop_manager.infrastructure.database import Base


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)

    name = Column(Text, nullable=False)
    type = Column(String(20), nullable=False, index=True)  # hair / perfume / skin
    category = Column(String(100), nullable=False, index=True)  # snake_case, not checked against type
    cost = Column(Float, nullable=False)
    sales_per_day = Column(Float, nullable=False, default=0, server_default="0")

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<Product {self.id} - {self.name}>"
