"""Catalog operations shared by the REST API and the tool server."""

from typing import List, Optional

import structlog

from shop_manager.application.services.aggregation import (
    compute_line_items,
    compute_type_statistics,
    order_by_weekly_sales,
)
from shop_manager.core.exceptions import EntityNotFoundException, NoFieldsToUpdateError
from shop_manager.domain.models.product import Product
from shop_manager.domain.repositories.product_repository import ProductRepository
from shop_manager.domain.schemas.product import (
    ProductCreate,
    ProductFilter,
    ProductType,
    ProductUpdate,
    QueryResponse,
    QueryTotals,
    TypeStat,
    WeeklySalesReport,
)
from shop_manager.nlq.interpreter import Period, interpret

logger = structlog.get_logger(__name__)


def list_products(repo: ProductRepository, filters: ProductFilter) -> List[Product]:
    """Products matching all given filters, ordered by name."""
    return repo.list_products(filters)


def add_product(repo: ProductRepository, data: ProductCreate) -> Product:
    product = repo.create(data)
    logger.info("Product added", product_id=product.id, name=product.name)
    return product


def update_product(repo: ProductRepository, product_id: int, data: ProductUpdate) -> Product:
    """Apply the fields present in ``data``.

    Raises:
        NoFieldsToUpdateError: ``data`` carries no field (checked before the lookup).
        EntityNotFoundException: no product has ``product_id``.
    """
    changes = data.model_dump(exclude_unset=True, exclude_none=True, mode="json")
    if not changes:
        raise NoFieldsToUpdateError()

    product = repo.get_by_id(product_id)
    if product is None:
        raise EntityNotFoundException("Product not found", {"id": product_id})

    product = repo.update(product, changes)
    logger.info("Product updated", product_id=product_id, fields=sorted(changes))
    return product


def delete_product(repo: ProductRepository, product_id: int) -> Product:
    """Delete a product and return it as it was."""
    product = repo.delete(product_id)
    if product is None:
        raise EntityNotFoundException("Product not found", {"id": product_id})
    logger.info("Product deleted", product_id=product_id)
    return product


def get_weekly_sales(
    repo: ProductRepository,
    product_type: Optional[ProductType] = None,
    product_id: Optional[int] = None,
) -> WeeklySalesReport:
    """Weekly sales and revenue, highest seller first.

    ``product_id`` wins over ``product_type``; with neither, the whole catalog.
    An unknown ``product_id`` gives an empty report, not an error.
    """
    if product_id:
        product = repo.get_by_id(product_id)
        products = [product] if product is not None else []
    else:
        products = repo.list_products(ProductFilter(type=product_type))

    summary = compute_line_items(products, Period.WEEK)
    return WeeklySalesReport(
        total_weekly_sales=summary.total_sales,
        total_weekly_revenue=summary.total_revenue,
        products=order_by_weekly_sales(summary.items),
    )


def get_average_cost_by_type(repo: ProductRepository) -> List[TypeStat]:
    return compute_type_statistics(repo.list_products(ProductFilter()))


def answer_sales_question(repo: ProductRepository, question: Optional[str]) -> QueryResponse:
    """Interpret a free-text sales question and compute its figures.

    Raises:
        EmptyQueryError: the question has no content.
    """
    request = interpret(question)
    products = repo.list_products(request.scope.to_filter())
    summary = compute_line_items(products, request.period)

    logger.info(
        "Sales question answered",
        question=question,
        interpreted=request.to_payload(),
        matched=len(summary.items),
    )
    return QueryResponse(
        interpreted=request.to_payload(),
        totals=QueryTotals(sales=summary.total_sales, revenue=summary.total_revenue),
        items=summary.items,
    )
