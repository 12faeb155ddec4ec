"""Application service: Update Product use case."""

from __future__ import annotations

import structlog

from marketplace.application.dto import ProductDTO, product_to_dto
from marketplace.domain.exceptions import EntityNotFoundError
from marketplace.domain.model.product import Category
from marketplace.domain.model.value_objects import Money
from marketplace.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        seller_id: str,
        title: str,
        description: str,
        price: str,
        category: str,
        is_available: bool | None = None,
    ) -> ProductDTO:
        """Edit a listing owned by *seller_id*.

        This does NOT affect open carts or existing orders; they captured
        a price snapshot when the product was added.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        product.ensure_owned_by(seller_id)

        product.update_details(
            title=title,
            description=description,
            price=Money.of(price),
            category=Category.parse(category),
            is_available=is_available,
        )
        self._product_repo.save(product)

        logger.info("product_updated", product_id=product_id, seller_id=seller_id)
        return product_to_dto(product)
