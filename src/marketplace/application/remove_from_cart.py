"""Application service: Remove From Cart use case."""

from __future__ import annotations

import structlog

from marketplace.application.dto import CartDTO, cart_to_dto
from marketplace.domain.repository.cart_store import CartStore

logger = structlog.get_logger(__name__)


class RemoveFromCartHandler:

    def __init__(self, cart_store: CartStore) -> None:
        self._cart_store = cart_store

    def handle(self, session_id: str, product_id: str) -> CartDTO:
        current = self._cart_store.get(session_id)
        cart = current.remove_item(product_id)

        if cart is not current:
            self._cart_store.set(session_id, cart)
            logger.info("cart_item_removed", session_id=session_id, product_id=product_id)
        return cart_to_dto(cart)
