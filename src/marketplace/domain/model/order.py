"""Order aggregate: the immutable record of a checkout.

An Order is created exactly once from a non-empty cart.  After that the
only legal mutation is a status transition made by a seller whose
products appear in the order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from marketplace.domain.exceptions import (
    AuthorizationError,
    EmptyCartError,
    ValidationError,
)
from marketplace.domain.model.cart import Cart
from marketplace.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    PENDING = "pending"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self is not OrderStatus.PENDING

    @staticmethod
    def parse(raw: str) -> OrderStatus:
        """Read a status from user input or an older stored document.

        ``completed`` is the legacy name for ``delivered``.
        """
        value = (raw or "").strip().lower()
        value = _STATUS_ALIASES.get(value, value)
        try:
            return OrderStatus(value)
        except ValueError as exc:
            choices = ", ".join(s.value for s in OrderStatus)
            raise ValidationError(
                f"Unknown order status {raw!r} (expected one of: {choices})"
            ) from exc


_STATUS_ALIASES = {"completed": "delivered", "canceled": "cancelled"}


@dataclass(frozen=True)
class OrderLineItem:
    """What was bought, from whom, and at which price."""

    product_id: str
    seller_id: str
    title: str
    quantity: Quantity
    price_at_purchase: Money

    @property
    def line_total(self) -> Money:
        return self.price_at_purchase * self.quantity.value


@dataclass
class Order:
    """Aggregate root for placed orders.

    Use the ``Order.place()`` factory for new orders.  The ``__init__`` is
    intentionally simple so the repository can reconstitute persisted
    orders without re-validating.
    """

    id: int | None
    buyer_id: str
    items: tuple[OrderLineItem, ...]
    total_amount: Money
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def place(buyer_id: str, cart: Cart) -> Order:
        """Snapshot *cart* into a pending order for *buyer_id*."""
        if cart.is_empty:
            raise EmptyCartError("Cannot check out an empty cart")
        if not buyer_id:
            raise ValidationError("Buyer is required")

        items = tuple(
            OrderLineItem(
                product_id=line.product_id,
                seller_id=line.seller_id,
                title=line.title,
                quantity=line.quantity,
                price_at_purchase=line.unit_price,
            )
            for line in cart.lines
        )
        return Order(
            id=None,
            buyer_id=buyer_id,
            items=items,
            total_amount=cart.total_price,
        )

    # --- State transitions ----------------------------------------------------

    def transition_to(self, status: OrderStatus) -> None:
        """Move a pending order to a terminal status.

        Terminal statuses are final: nothing moves back to pending and a
        delivered order cannot later be cancelled (or vice versa).
        """
        if status is OrderStatus.PENDING:
            raise ValidationError("An order cannot be moved back to pending")
        if self.status.is_terminal:
            raise ValidationError(
                f"Cannot change status of order #{self.id}: it is already "
                f"{self.status.value}"
            )
        self.status = status

    def mark_delivered(self) -> None:
        self.transition_to(OrderStatus.DELIVERED)

    def cancel(self) -> None:
        self.transition_to(OrderStatus.CANCELLED)

    # --- Seller attribution ---------------------------------------------------

    def items_for_seller(self, seller_id: str) -> list[OrderLineItem]:
        return [item for item in self.items if item.seller_id == seller_id]

    def involves_seller(self, seller_id: str) -> bool:
        return any(item.seller_id == seller_id for item in self.items)

    def revenue_for_seller(self, seller_id: str) -> Money:
        """The part of the order total earned by *seller_id*."""
        return Money.total(
            item.line_total for item in self.items_for_seller(seller_id)
        )

    def ensure_fulfilled_by(self, seller_id: str) -> None:
        if not self.involves_seller(seller_id):
            raise AuthorizationError(
                f"Order #{self.id} contains none of your products"
            )

    def ensure_placed_by(self, buyer_id: str) -> None:
        if self.buyer_id != buyer_id:
            raise AuthorizationError(f"Order #{self.id} belongs to another buyer")

    # --- Computed properties --------------------------------------------------

    @property
    def item_count(self) -> int:
        return sum(item.quantity.value for item in self.items)
