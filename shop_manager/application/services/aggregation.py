"""Sales and cost aggregation over catalog rows.

Pure functions: rows come in already fetched (ORM objects or anything with
the same attributes), nothing here touches the database.
"""

import math
from itertools import groupby
from typing import Iterable, Sequence

from shop_manager.domain.schemas.product import LineItem, SalesSummary, TypeStat
from shop_manager.nlq.interpreter import Period

DAYS_PER_WEEK = 7


def _type_of(product) -> str:
    # ORM rows carry a plain string, schemas carry a ProductType
    return getattr(product.type, "value", product.type)


def compute_line_item(product, period: Period) -> LineItem:
    weekly_sales = product.sales_per_day * DAYS_PER_WEEK
    sales = weekly_sales if period is Period.WEEK else product.sales_per_day
    return LineItem(
        id=getattr(product, "id", None),
        name=product.name,
        type=_type_of(product),
        category=product.category,
        cost=product.cost,
        sales_per_day=product.sales_per_day,
        weekly_sales=weekly_sales,
        weekly_revenue=weekly_sales * product.cost,
        period=period.value,
        sales=sales,
        revenue=sales * product.cost,
    )


def compute_line_items(products: Iterable, period: Period) -> SalesSummary:
    """Scoped sales and revenue per product, plus totals.

    Items keep the input order. Totals use ``math.fsum`` so the result does
    not drift with the number of rows.
    """
    items = [compute_line_item(p, period) for p in products]
    return SalesSummary(
        items=items,
        total_sales=math.fsum(item.sales for item in items),
        total_revenue=math.fsum(item.revenue for item in items),
    )


def order_by_weekly_sales(items: Sequence[LineItem]) -> list[LineItem]:
    """Highest weekly seller first; ties keep their incoming order."""
    return sorted(items, key=lambda item: item.weekly_sales, reverse=True)


def compute_type_statistics(products: Iterable) -> list[TypeStat]:
    """Cost and sales-volume statistics per product type, ordered by type.

    Only types that actually occur in ``products`` are reported.
    """
    stats = []
    for product_type, group in groupby(sorted(products, key=_type_of), key=_type_of):
        rows = list(group)
        costs = [r.cost for r in rows]
        stats.append(
            TypeStat(
                type=product_type,
                product_count=len(rows),
                avg_cost=math.fsum(costs) / len(costs),
                min_cost=min(costs),
                max_cost=max(costs),
                total_daily_sales=math.fsum(r.sales_per_day for r in rows),
            )
        )
    return stats
