"""Application service: Toggle Product Status use case."""

from __future__ import annotations

from marketplace.application.dto import ProductDTO, product_to_dto
from marketplace.domain.exceptions import EntityNotFoundError
from marketplace.domain.repository.product_repository import ProductRepository


class ToggleProductStatusHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str, seller_id: str) -> ProductDTO:
        """Switch a listing between active and inactive."""
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        product.ensure_owned_by(seller_id)

        product.toggle_availability()
        self._product_repo.save(product)
        return product_to_dto(product)
