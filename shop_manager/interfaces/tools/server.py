"""Stdio tool server exposing the catalog to AI assistants.

Run with:
    shop-manager-mcp
"""

import sys
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Literal, Optional

import structlog
from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError

from shop_manager.application.services import product_service
from shop_manager.core.exceptions import AppError
from shop_manager.core.logging import configure_logging
from shop_manager.domain.models.product import Product
from shop_manager.domain.schemas.product import (
    ProductCreate,
    ProductFilter,
    ProductRead,
    ProductType,
    ProductUpdate,
)
from shop_manager.infrastructure.database import SessionLocal
from shop_manager.infrastructure.repositories.product_repository import SQLAlchemyProductRepository
from shop_manager.infrastructure.seed import init_db

logger = structlog.get_logger(__name__)

mcp = FastMCP(name="shop-manager")

TypeName = Literal["hair", "perfume", "skin"]


@contextmanager
def product_repository() -> Iterator[SQLAlchemyProductRepository]:
    """One session per tool call; domain errors become tool errors."""
    db = SessionLocal()
    try:
        yield SQLAlchemyProductRepository(db, Product)
    except AppError as error:
        logger.warning("Tool call rejected", error=error.message, details=error.details)
        raise ToolError(error.message) from error
    finally:
        db.close()


def _dump(product: Product) -> Dict[str, Any]:
    return ProductRead.model_validate(product).model_dump(mode="json")


@mcp.tool()
def get_products(
    name: Optional[str] = None,
    type: Optional[TypeName] = None,
    category: Optional[str] = None,
) -> Dict[str, Any]:
    """Fetch products from the database. Can filter by name (partial match), type, or category."""
    filters = ProductFilter(name=name, type=type, category=category)
    with product_repository() as repo:
        products = [_dump(p) for p in product_service.list_products(repo, filters)]
    return {"count": len(products), "products": products}


@mcp.tool()
def get_weekly_sales(
    type: Optional[Literal["hair", "perfume", "skin", ""]] = None,
    product_id: Optional[int] = None,
) -> Dict[str, Any]:
    """Get weekly sales data. Filter by product type or a product id, or leave empty for all products."""
    product_type = ProductType(type) if type else None
    with product_repository() as repo:
        report = product_service.get_weekly_sales(repo, product_type=product_type, product_id=product_id)
    return report.model_dump()


@mcp.tool()
def get_avg_cost_by_type() -> Dict[str, Any]:
    """Get average cost grouped by product type."""
    with product_repository() as repo:
        stats = product_service.get_average_cost_by_type(repo)
    return {"average_costs_by_type": [s.model_dump() for s in stats]}


@mcp.tool()
def add_product(
    name: str,
    type: TypeName,
    category: str,
    cost: float,
    sales_per_day: float,
) -> Dict[str, Any]:
    """Add a new product to the database."""
    data = ProductCreate(name=name, type=type, category=category, cost=cost, sales_per_day=sales_per_day)
    with product_repository() as repo:
        product = _dump(product_service.add_product(repo, data))
    return {"message": "Product added successfully", "product": product}


@mcp.tool()
def update_product(
    id: int,
    name: Optional[str] = None,
    type: Optional[TypeName] = None,
    category: Optional[str] = None,
    cost: Optional[float] = None,
    sales_per_day: Optional[float] = None,
) -> Dict[str, Any]:
    """Update an existing product. Only provide fields you want to update."""
    changes = {
        field: value
        for field, value in {
            "name": name,
            "type": type,
            "category": category,
            "cost": cost,
            "sales_per_day": sales_per_day,
        }.items()
        if value is not None
    }
    data = ProductUpdate(**changes)
    with product_repository() as repo:
        product = _dump(product_service.update_product(repo, id, data))
    return {"message": "Product updated successfully", "product": product}


@mcp.tool()
def delete_product(id: int) -> Dict[str, Any]:
    """Delete a product from the database."""
    with product_repository() as repo:
        product = _dump(product_service.delete_product(repo, id))
    return {"message": "Product deleted successfully", "deleted_product": product}


@mcp.tool()
def query_sales(question: str) -> Dict[str, Any]:
    """Answer a sales question in plain words, e.g. "weekly sales for perfume"."""
    with product_repository() as repo:
        answer = product_service.answer_sales_question(repo, question)
    return answer.model_dump()


def main() -> None:
    configure_logging(stream=sys.stderr)
    init_db()
    logger.info("Shop Manager tool server running on stdio")
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
