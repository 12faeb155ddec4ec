"""Integration tests for the seller dashboard and analytics views."""

from datetime import date

from marketplace.application.seller_dashboard import (
    SellerAnalyticsHandler,
    SellerDashboardHandler,
)
from tests.builders import at, make_order, make_product
from tests.fakes import FakeOrderRepository, FakeProductRepository


def _products() -> FakeProductRepository:
    return FakeProductRepository([
        make_product("1", price="20.00", title="Kettle", stock=2, created_at=at(2024, 3, 1)),
        make_product("2", price="5.00", title="Cup", stock=50, created_at=at(2024, 3, 5)),
        make_product("3", price="9.00", title="Tray", stock=7, is_available=False,
                     created_at=at(2024, 3, 3)),
        make_product("4", price="99.00", title="Rival", seller_id="s2"),
    ])


def _orders(products: FakeProductRepository) -> FakeOrderRepository:
    kettle, cup, rival = (products.get_by_id(pid) for pid in ("1", "2", "4"))
    delivered = make_order("b1", [(kettle, 1), (rival, 1)], created_at=at(2024, 3, 8))
    delivered.mark_delivered()
    pending = make_order("b2", [(cup, 3)], created_at=at(2024, 3, 9))
    cancelled = make_order("b3", [(kettle, 4)], created_at=at(2024, 3, 9))
    cancelled.cancel()
    unrelated = make_order("b4", [(rival, 1)], created_at=at(2024, 3, 9))
    return FakeOrderRepository([delivered, pending, cancelled, unrelated])


class TestSellerDashboard:

    def test_stats(self):
        products = _products()
        dto = SellerDashboardHandler(products, _orders(products)).handle("s1")

        assert dto.stats.total_products == 3
        assert dto.stats.active_products == 2
        assert dto.stats.total_revenue == "$35.00"
        assert dto.stats.pending_orders == 1
        assert dto.stats.delivered_orders == 1

    def test_lists(self):
        products = _products()
        dto = SellerDashboardHandler(products, _orders(products)).handle("s1")

        assert [o.id for o in dto.recent_orders] == [3, 2, 1]
        assert [p.title for p in dto.low_stock_products] == ["Kettle", "Tray"]
        assert [p.title for p in dto.recent_products] == ["Cup", "Tray", "Kettle"]

    def test_new_seller_sees_zeroes(self):
        dto = SellerDashboardHandler(FakeProductRepository(), FakeOrderRepository()).handle("s9")
        assert dto.stats.total_revenue == "$0.00"
        assert dto.recent_orders == []


class TestSellerAnalytics:

    def test_last_seven_days(self):
        products = _products()
        dto = SellerAnalyticsHandler(_orders(products)).handle("s1", today=date(2024, 3, 10))

        assert len(dto.daily_sales) == 7
        assert dto.daily_sales[0].day == "2024-03-04"
        assert dto.daily_sales[-1].day == "2024-03-10"
        by_day = {d.day: d for d in dto.daily_sales}
        assert by_day["2024-03-08"].revenue == "$20.00"
        assert by_day["2024-03-09"].revenue == "$15.00"
        assert by_day["2024-03-09"].orders == 1

    def test_top_products(self):
        products = _products()
        dto = SellerAnalyticsHandler(_orders(products)).handle("s1", today=date(2024, 3, 10))

        assert [(p.title, p.units, p.revenue) for p in dto.top_products] == [
            ("Cup", 3, "$15.00"),
            ("Kettle", 1, "$20.00"),
        ]
