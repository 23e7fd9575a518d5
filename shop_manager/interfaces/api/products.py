"""Products API routes: list, filter, add, update, delete."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from shop_manager.application.services import product_service
from shop_manager.domain.repositories.product_repository import ProductRepository
from shop_manager.domain.schemas.product import (
    ProductCreate,
    ProductFilter,
    ProductRead,
    ProductType,
    ProductUpdate,
)
from shop_manager.interfaces.deps import get_product_repository

router = APIRouter(prefix="/api/products", tags=["Products"])


@router.get("")
def list_products(
    name: Optional[str] = None,
    product_type: Optional[ProductType] = Query(None, alias="type"),
    category: Optional[str] = None,
    repo: ProductRepository = Depends(get_product_repository),
):
    filters = ProductFilter(name=name, type=product_type, category=category)
    products = [ProductRead.model_validate(p) for p in product_service.list_products(repo, filters)]
    return {"success": True, "count": len(products), "products": products}


@router.post("", status_code=status.HTTP_201_CREATED)
def add_product(
    body: ProductCreate,
    repo: ProductRepository = Depends(get_product_repository),
):
    product = product_service.add_product(repo, body)
    return {
        "success": True,
        "message": "Product added successfully",
        "product": ProductRead.model_validate(product),
    }


@router.put("/{product_id}")
def update_product(
    product_id: int,
    body: ProductUpdate,
    repo: ProductRepository = Depends(get_product_repository),
):
    """Partial update; only the fields sent are changed."""
    product = product_service.update_product(repo, product_id, body)
    return {
        "success": True,
        "message": "Product updated successfully",
        "product": ProductRead.model_validate(product),
    }


@router.delete("/{product_id}")
def delete_product(
    product_id: int,
    repo: ProductRepository = Depends(get_product_repository),
):
    product = product_service.delete_product(repo, product_id)
    return {
        "success": True,
        "message": "Product deleted successfully",
        "deleted_product": ProductRead.model_validate(product),
    }
