"""Application service: Delete Product use case.

Orders keep their own copy of title and price, so deleting a listing
never alters order history.
"""

from __future__ import annotations

import structlog

from marketplace.domain.exceptions import EntityNotFoundError
from marketplace.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str, seller_id: str) -> None:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        product.ensure_owned_by(seller_id)

        self._product_repo.delete(product_id)
        logger.info("product_deleted", product_id=product_id, seller_id=seller_id)
