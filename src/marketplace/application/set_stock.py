"""Application service: Set Stock use case."""

from __future__ import annotations

import structlog

from marketplace.domain.exceptions import EntityNotFoundError
from marketplace.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class SetStockHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str, seller_id: str, quantity: int) -> int:
        """Set the quantity in stock for one of the seller's products."""
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        product.ensure_owned_by(seller_id)

        product.set_stock(quantity)
        self._product_repo.save(product)

        if product.is_low_stock:
            logger.warning("product_low_stock", product_id=product_id, stock=quantity)
        return product.stock
