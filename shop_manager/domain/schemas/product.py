"""Pydantic schemas for the Product domain."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class ProductType(str, Enum):
    HAIR = "hair"
    PERFUME = "perfume"
    SKIN = "skin"


class ProductBase(BaseModel):
    name: str = Field(min_length=1)
    type: ProductType
    category: str = Field(min_length=1)
    cost: float = Field(ge=0, allow_inf_nan=False)
    sales_per_day: float = Field(ge=0, allow_inf_nan=False)


class ProductCreate(ProductBase):
    pass


class ProductUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    type: Optional[ProductType] = None
    category: Optional[str] = Field(default=None, min_length=1)
    cost: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)
    sales_per_day: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)


class ProductRead(ProductBase):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class ProductFilter(BaseModel):
    name: Optional[str] = None
    type: Optional[ProductType] = None
    category: Optional[str] = None


# =========================
# Sales / aggregation
# =========================
class LineItem(BaseModel):
    """One product's sales figures for a period."""
    id: Optional[int] = None
    name: str
    type: str
    category: str
    cost: float
    sales_per_day: float
    weekly_sales: float
    weekly_revenue: float
    period: str
    sales: float
    revenue: float


class SalesSummary(BaseModel):
    items: list[LineItem]
    total_sales: float
    total_revenue: float


class TypeStat(BaseModel):
    type: str
    product_count: int
    avg_cost: float
    min_cost: float
    max_cost: float
    total_daily_sales: float


class WeeklySalesReport(BaseModel):
    total_weekly_sales: float
    total_weekly_revenue: float
    products: list[LineItem]


# =========================
# Natural-language query
# =========================
class QueryRequest(BaseModel):
    question: Optional[str] = None


class QueryTotals(BaseModel):
    sales: float
    revenue: float


class QueryResponse(BaseModel):
    success: bool = True
    interpreted: dict
    totals: QueryTotals
    items: list[LineItem]
