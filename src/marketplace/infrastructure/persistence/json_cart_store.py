"""JSON-file-backed implementation of CartStore.

Only the lines are stored.  Totals are recomputed by ``Cart`` on load,
so a hand-edited document can never yield inconsistent totals.
"""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from marketplace.domain.model.cart import Cart, CartLineItem
from marketplace.domain.model.value_objects import Money, Quantity, to_entity_id
from marketplace.domain.repository.cart_store import CartStore
from marketplace.infrastructure.persistence.json_document import JsonDocument


class JsonCartStore(CartStore):

    def __init__(self, file_path: Path) -> None:
        self._document = JsonDocument(file_path, empty={})

    # --- CartStore interface --------------------------------------------------

    def get(self, session_id: str) -> Cart:
        raw = self._load_raw().get(session_id)
        if raw is None:
            return Cart.empty()
        return self._to_domain(raw)

    def set(self, session_id: str, cart: Cart) -> None:
        carts = self._load_raw()
        carts[session_id] = self._to_raw(cart)
        self._document.persist(carts)

    def clear(self, session_id: str) -> None:
        carts = self._load_raw()
        if carts.pop(session_id, None) is not None:
            self._document.persist(carts)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(cart: Cart) -> dict:
        return {
            "items": [
                {
                    "product_id": line.product_id,
                    "seller_id": line.seller_id,
                    "title": line.title,
                    "unit_price": str(line.unit_price.amount),
                    "currency": line.unit_price.currency,
                    "quantity": line.quantity.value,
                }
                for line in cart.lines
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Cart:
        return Cart.from_lines(
            CartLineItem(
                product_id=to_entity_id(i["product_id"]),
                seller_id=to_entity_id(i["seller_id"]),
                title=i["title"],
                unit_price=Money(Decimal(i["unit_price"]), i.get("currency", "USD")),
                quantity=Quantity(i["quantity"]),
            )
            for i in raw.get("items", [])
        )

    def _load_raw(self) -> dict[str, dict]:
        return self._document.load()
