"""Application service: Add To Cart use case.

Resolves the product in the catalog, then lets the Cart aggregate merge
it into the session's cart.  Nothing is written if the product is
missing or unavailable.
"""

from __future__ import annotations

import structlog

from marketplace.application.dto import CartDTO, cart_to_dto
from marketplace.domain.exceptions import EntityNotFoundError
from marketplace.domain.model.value_objects import Quantity
from marketplace.domain.repository.cart_store import CartStore
from marketplace.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class AddToCartHandler:

    def __init__(self, cart_store: CartStore, product_repo: ProductRepository) -> None:
        self._cart_store = cart_store
        self._product_repo = product_repo

    def handle(self, session_id: str, product_id: str, quantity: object = None) -> CartDTO:
        """Add a product to the cart.

        *quantity* is taken as typed by the user; anything that is not a
        positive integer counts as 1.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        qty = Quantity.coerce(quantity)
        cart = self._cart_store.get(session_id).add_item(product, qty)
        self._cart_store.set(session_id, cart)

        logger.info(
            "cart_item_added",
            session_id=session_id,
            product_id=product.id,
            quantity=qty.value,
            total_quantity=cart.total_quantity,
        )
        return cart_to_dto(cart)
