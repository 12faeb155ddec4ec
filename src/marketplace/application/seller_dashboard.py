"""Application service: Seller Dashboard and Analytics use cases (queries).

Both views are built from a SellerSalesReport, so revenue is always
attributed per line item to the seller who sold it.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timezone

from marketplace.application.dto import OrderDTO, ProductDTO, order_to_dto, product_to_dto
from marketplace.domain.model.order import OrderStatus
from marketplace.domain.repository.order_repository import OrderRepository
from marketplace.domain.repository.product_repository import ProductRepository
from marketplace.domain.service.seller_sales_report import SellerSalesReport

RECENT_ORDERS = 10
LOW_STOCK_PRODUCTS = 5
RECENT_PRODUCTS = 5
ANALYTICS_DAYS = 7
TOP_PRODUCTS = 5


@dataclass(frozen=True)
class SellerStatsDTO:
    total_products: int
    active_products: int
    total_revenue: str
    pending_orders: int
    delivered_orders: int


@dataclass(frozen=True)
class SellerDashboardDTO:
    stats: SellerStatsDTO
    recent_orders: list[OrderDTO]
    low_stock_products: list[ProductDTO]
    recent_products: list[ProductDTO]


@dataclass(frozen=True)
class DailySalesDTO:
    day: str  # ISO date
    revenue: str
    orders: int


@dataclass(frozen=True)
class TopProductDTO:
    product_id: str
    title: str
    units: int
    revenue: str


@dataclass(frozen=True)
class SellerAnalyticsDTO:
    daily_sales: list[DailySalesDTO]
    top_products: list[TopProductDTO]


class SellerDashboardHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        order_repo: OrderRepository,
    ) -> None:
        self._product_repo = product_repo
        self._order_repo = order_repo

    def handle(self, seller_id: str) -> SellerDashboardDTO:
        products = self._product_repo.list_by_seller(seller_id)
        report = SellerSalesReport(seller_id, self._order_repo.list_by_seller(seller_id))

        low_stock = sorted(
            (p for p in products if p.is_low_stock), key=lambda p: p.stock
        )
        newest = sorted(products, key=lambda p: p.created_at, reverse=True)

        return SellerDashboardDTO(
            stats=SellerStatsDTO(
                total_products=len(products),
                active_products=sum(1 for p in products if p.is_available),
                total_revenue=str(report.total_revenue),
                pending_orders=report.count_by_status(OrderStatus.PENDING),
                delivered_orders=report.count_by_status(OrderStatus.DELIVERED),
            ),
            recent_orders=[order_to_dto(o) for o in report.orders[:RECENT_ORDERS]],
            low_stock_products=[product_to_dto(p) for p in low_stock[:LOW_STOCK_PRODUCTS]],
            recent_products=[product_to_dto(p) for p in newest[:RECENT_PRODUCTS]],
        )


class SellerAnalyticsHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, seller_id: str, today: date | None = None) -> SellerAnalyticsDTO:
        """Sales for the last seven days (today included) and best sellers."""
        today = today or datetime.now(timezone.utc).date()
        report = SellerSalesReport(seller_id, self._order_repo.list_by_seller(seller_id))

        return SellerAnalyticsDTO(
            daily_sales=[
                DailySalesDTO(day=d.day.isoformat(), revenue=str(d.revenue), orders=d.orders)
                for d in report.daily_sales(today, days=ANALYTICS_DAYS)
            ],
            top_products=[
                TopProductDTO(
                    product_id=p.product_id,
                    title=p.title,
                    units=p.units,
                    revenue=str(p.revenue),
                )
                for p in report.top_products(limit=TOP_PRODUCTS)
            ],
        )
