"""Sales and cost reporting routes."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from shop_manager.application.services import product_service
from shop_manager.domain.repositories.product_repository import ProductRepository
from shop_manager.domain.schemas.product import ProductType
from shop_manager.interfaces.deps import get_product_repository

router = APIRouter(prefix="/api", tags=["Sales"])


@router.get("/sales/weekly")
def weekly_sales(
    product_type: Optional[ProductType] = Query(None, alias="type"),
    product_id: Optional[int] = None,
    repo: ProductRepository = Depends(get_product_repository),
):
    report = product_service.get_weekly_sales(repo, product_type=product_type, product_id=product_id)
    return {"success": True, **report.model_dump()}


@router.get("/costs/average")
def average_costs(repo: ProductRepository = Depends(get_product_repository)):
    """Cost statistics and total daily sales per product type."""
    stats = product_service.get_average_cost_by_type(repo)
    return {"success": True, "average_costs_by_type": stats}
