import pytest
from mcp.server.fastmcp.exceptions import ToolError
from pydantic import ValidationError

from shop_manager.interfaces.tools import server


@pytest.fixture
def tools(monkeypatch, session_factory, seeded_repo):
    """Tool functions bound to the seeded test database."""
    monkeypatch.setattr(server, "SessionLocal", session_factory)
    return server


def test_get_products_filters(tools):
    data = tools.get_products(type="skin")
    assert data["count"] == 2
    assert [p["name"] for p in data["products"]] == ["Body Lotion Smooth", "Moisturizer Daily"]

    assert tools.get_products(name="angel")["products"][0]["category"] == "victoria_secret"


def test_get_weekly_sales_empty_type_means_all(tools):
    everything = tools.get_weekly_sales(type="")
    assert len(everything["products"]) == 6

    perfume = tools.get_weekly_sales(type="perfume")
    assert [p["name"] for p in perfume["products"]] == ["Victoria Secret Angel", "Gucci Bloom"]
    assert perfume["total_weekly_sales"] == pytest.approx(126)


def test_get_avg_cost_by_type(tools):
    stats = tools.get_avg_cost_by_type()["average_costs_by_type"]
    assert [s["type"] for s in stats] == ["hair", "perfume", "skin"]
    assert stats[0]["avg_cost"] == pytest.approx((12.99 + 14.99) / 2)


def test_add_update_delete_roundtrip(tools):
    added = tools.add_product(name="Rose Water", type="skin", category="toner", cost=9.5, sales_per_day=6)
    assert added["message"] == "Product added successfully"
    product_id = added["product"]["id"]

    updated = tools.update_product(id=product_id, cost=11.0)
    assert updated["product"]["cost"] == 11.0
    assert updated["product"]["category"] == "toner"

    deleted = tools.delete_product(id=product_id)
    assert deleted["deleted_product"]["name"] == "Rose Water"
    assert tools.get_products(name="rose")["count"] == 0


def test_add_product_rejects_infinite_cost(tools):
    with pytest.raises(ValidationError):
        tools.add_product(name="Huge", type="hair", category="x", cost=float("inf"), sales_per_day=1)
    assert tools.get_products(name="huge")["count"] == 0


def test_update_without_fields_is_a_tool_error(tools):
    with pytest.raises(ToolError, match="No fields to update"):
        tools.update_product(id=1)


def test_missing_product_is_a_tool_error(tools):
    with pytest.raises(ToolError, match="Product not found"):
        tools.delete_product(id=999)
    with pytest.raises(ToolError, match="Product not found"):
        tools.update_product(id=999, name="Ghost")


def test_query_sales(tools):
    answer = tools.query_sales("weekly sales for hair")
    assert answer["interpreted"] == {"period": "week", "scope": {"type": "hair"}}
    assert answer["totals"]["sales"] == pytest.approx(189)


def test_query_sales_empty_question(tools):
    with pytest.raises(ToolError, match="Empty query"):
        tools.query_sales("  ")
