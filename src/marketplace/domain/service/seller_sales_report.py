"""Domain service: Seller Sales Report.

Orders may contain products of several sellers.  Every figure produced
here is attributed per line item: a seller earns only the lines whose
``seller_id`` is theirs, never the whole order total.  Cancelled orders
are visible in status counts but earn nothing.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable

from marketplace.domain.model.order import Order, OrderStatus
from marketplace.domain.model.value_objects import Money


@dataclass(frozen=True)
class DailySales:
    day: date
    revenue: Money
    orders: int


@dataclass(frozen=True)
class ProductSales:
    product_id: str
    title: str
    units: int
    revenue: Money


class SellerSalesReport:

    def __init__(self, seller_id: str, orders: Iterable[Order]) -> None:
        self._seller_id = seller_id
        self._orders = [o for o in orders if o.involves_seller(seller_id)]

    @property
    def orders(self) -> list[Order]:
        return list(self._orders)

    @property
    def total_revenue(self) -> Money:
        return Money.total(
            order.revenue_for_seller(self._seller_id)
            for order in self._earning_orders()
        )

    def count_by_status(self, status: OrderStatus) -> int:
        """Number of orders (not lines) in *status* that include the seller."""
        return sum(1 for order in self._orders if order.status is status)

    def daily_sales(self, today: date, days: int = 7) -> list[DailySales]:
        """Revenue and order count per day for the *days* ending on *today*.

        Every day in the window is present, oldest first, even with no sales.
        """
        first_day = today - timedelta(days=days - 1)
        buckets: dict[date, list[Order]] = {
            first_day + timedelta(days=offset): [] for offset in range(days)
        }
        for order in self._earning_orders():
            day = order.created_at.date()
            if day in buckets:
                buckets[day].append(order)

        return [
            DailySales(
                day=day,
                revenue=Money.total(
                    o.revenue_for_seller(self._seller_id) for o in day_orders
                ),
                orders=len(day_orders),
            )
            for day, day_orders in buckets.items()
        ]

    def top_products(self, limit: int = 5) -> list[ProductSales]:
        """Best sellers by units sold, ties broken by revenue then title."""
        units: dict[str, int] = {}
        revenue: dict[str, Money] = {}
        titles: dict[str, str] = {}

        for order in self._earning_orders():
            for item in order.items_for_seller(self._seller_id):
                units[item.product_id] = units.get(item.product_id, 0) + item.quantity.value
                revenue[item.product_id] = (
                    revenue.get(item.product_id, Money.zero()) + item.line_total
                )
                titles.setdefault(item.product_id, item.title)

        ranked = sorted(
            units,
            key=lambda pid: (-units[pid], -revenue[pid].amount, titles[pid]),
        )
        return [
            ProductSales(
                product_id=pid,
                title=titles[pid],
                units=units[pid],
                revenue=revenue[pid],
            )
            for pid in ranked[:limit]
        ]

    def _earning_orders(self) -> list[Order]:
        return [o for o in self._orders if o.status is not OrderStatus.CANCELLED]
