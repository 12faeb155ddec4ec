"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

from marketplace.domain.model.order import Order, OrderLineItem, OrderStatus
from marketplace.domain.model.value_objects import Money, Quantity, to_entity_id
from marketplace.domain.repository.order_repository import OrderRepository
from marketplace.infrastructure.persistence.json_document import JsonDocument


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._document = JsonDocument(file_path, empty=[])

    # --- OrderRepository interface --------------------------------------------

    def next_id(self) -> int:
        orders = self._load_raw()
        if not orders:
            return 1
        return max(o["id"] for o in orders) + 1

    def get_by_id(self, order_id: int) -> Order | None:
        for raw in self._load_raw():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def list_by_buyer(self, buyer_id: str) -> list[Order]:
        return self._newest_first(
            o for o in self._all() if o.buyer_id == buyer_id
        )

    def list_by_seller(self, seller_id: str) -> list[Order]:
        return self._newest_first(
            o for o in self._all() if o.involves_seller(seller_id)
        )

    def save(self, order: Order) -> None:
        orders = self._load_raw()

        is_new = order.id is None
        order_id = self.next_id() if is_new else order.id
        record = self._to_raw(order, order_id)

        # Upsert: replace if exists, otherwise append
        replaced = False
        for i, raw in enumerate(orders):
            if raw["id"] == order_id:
                orders[i] = record
                replaced = True
                break
        if not replaced:
            orders.append(record)

        self._document.persist(orders)
        # Only a stored order gets an id.
        if is_new:
            order.id = order_id

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order, order_id: int) -> dict:
        return {
            "id": order_id,
            "buyer_id": order.buyer_id,
            "status": order.status.value,
            "total_amount": str(order.total_amount.amount),
            "currency": order.total_amount.currency,
            "created_at": order.created_at.isoformat(),
            "items": [
                {
                    "product_id": item.product_id,
                    "seller_id": item.seller_id,
                    "title": item.title,
                    "quantity": item.quantity.value,
                    "price_at_purchase": str(item.price_at_purchase.amount),
                    "currency": item.price_at_purchase.currency,
                }
                for item in order.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        items = tuple(
            OrderLineItem(
                product_id=to_entity_id(i["product_id"]),
                seller_id=to_entity_id(i["seller_id"]),
                title=i.get("title", ""),
                quantity=Quantity(i["quantity"]),
                price_at_purchase=Money(
                    Decimal(i["price_at_purchase"]), i.get("currency", "USD")
                ),
            )
            for i in raw["items"]
        )
        return Order(
            id=raw["id"],
            buyer_id=to_entity_id(raw["buyer_id"]),
            items=items,
            total_amount=Money(Decimal(raw["total_amount"]), raw.get("currency", "USD")),
            status=OrderStatus.parse(raw["status"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )

    # --- Helpers --------------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return self._document.load()

    def _all(self) -> list[Order]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    @staticmethod
    def _newest_first(orders) -> list[Order]:
        return sorted(orders, key=lambda o: (o.created_at, o.id), reverse=True)
