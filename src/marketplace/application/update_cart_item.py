"""Application service: Update Cart Item use case.

A product that is no longer in the cart (e.g. removed from another tab)
is ignored rather than reported, so replaying a stale form is harmless.
"""

from __future__ import annotations

import structlog

from marketplace.application.dto import CartDTO, cart_to_dto
from marketplace.domain.model.value_objects import Quantity
from marketplace.domain.repository.cart_store import CartStore

logger = structlog.get_logger(__name__)


class UpdateCartItemHandler:

    def __init__(self, cart_store: CartStore) -> None:
        self._cart_store = cart_store

    def handle(self, session_id: str, product_id: str, quantity: object = None) -> CartDTO:
        current = self._cart_store.get(session_id)
        cart = current.update_item(product_id, Quantity.coerce(quantity))

        if cart is current:
            logger.debug("cart_item_missing", session_id=session_id, product_id=product_id)
        else:
            self._cart_store.set(session_id, cart)
            logger.info(
                "cart_item_updated",
                session_id=session_id,
                product_id=product_id,
                total_quantity=cart.total_quantity,
            )
        return cart_to_dto(cart)
