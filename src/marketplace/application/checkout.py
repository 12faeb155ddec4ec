"""Application service: Checkout use case.

Turns the session's cart into a pending Order.  The order is written
first and the cart is cleared only once the write succeeded:

- empty cart      -> EmptyCartError, nothing written
- failed write    -> CheckoutFailedError, cart kept for a retry
- success         -> cart cleared, order returned

A crash between the two writes leaves the cart in place next to a
placed order; callers must not offer checkout again once an order id
has been shown.
"""

from __future__ import annotations

import structlog

from marketplace.application.dto import OrderDTO, order_to_dto
from marketplace.domain.exceptions import CheckoutFailedError, RepositoryError
from marketplace.domain.model.order import Order
from marketplace.domain.repository.cart_store import CartStore
from marketplace.domain.repository.order_repository import OrderRepository

logger = structlog.get_logger(__name__)


class CheckoutHandler:

    def __init__(self, cart_store: CartStore, order_repo: OrderRepository) -> None:
        self._cart_store = cart_store
        self._order_repo = order_repo

    def handle(self, session_id: str, buyer_id: str) -> OrderDTO:
        cart = self._cart_store.get(session_id)
        order = Order.place(buyer_id=buyer_id, cart=cart)

        try:
            self._order_repo.save(order)
        except RepositoryError as exc:
            logger.error(
                "checkout_failed",
                session_id=session_id,
                buyer_id=buyer_id,
                error=str(exc),
            )
            raise CheckoutFailedError(
                "Your order could not be placed. Your cart has been kept, "
                "please try again."
            ) from exc

        self._cart_store.clear(session_id)

        logger.info(
            "order_placed",
            order_id=order.id,
            buyer_id=buyer_id,
            line_count=len(order.items),
            total_amount=str(order.total_amount),
        )
        return order_to_dto(order)
