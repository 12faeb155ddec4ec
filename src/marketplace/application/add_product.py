"""Application service: Add Product use case."""

from __future__ import annotations

import structlog

from marketplace.application.dto import ProductDTO, product_to_dto
from marketplace.domain.model.product import Category, Product
from marketplace.domain.model.value_objects import Money
from marketplace.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        seller_id: str,
        title: str,
        description: str,
        price: str,
        category: str,
        stock: int = 0,
        image: str | None = None,
    ) -> ProductDTO:
        """List a new product under *seller_id*."""
        product = Product.create(
            id=self._product_repo.next_id(),
            seller_id=seller_id,
            title=title,
            description=description,
            price=Money.of(price),
            category=Category.parse(category),
            stock=stock,
            image=image,
        )
        self._product_repo.save(product)

        logger.info("product_added", product_id=product.id, seller_id=seller_id)
        return product_to_dto(product)
