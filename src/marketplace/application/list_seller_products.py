"""Application service: List Seller Products use case (query)."""

from __future__ import annotations

import math

from marketplace.application.dto import ProductPageDTO, product_to_dto
from marketplace.domain.exceptions import ValidationError
from marketplace.domain.repository.product_repository import ProductRepository

PAGE_SIZE = 10


class ListSellerProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, seller_id: str, page: int = 1) -> ProductPageDTO:
        """One page of the seller's listings, newest first."""
        if page < 1:
            raise ValidationError("Page must be 1 or greater")

        products = sorted(
            self._product_repo.list_by_seller(seller_id),
            key=lambda p: p.created_at,
            reverse=True,
        )
        start = (page - 1) * PAGE_SIZE
        return ProductPageDTO(
            products=[product_to_dto(p) for p in products[start:start + PAGE_SIZE]],
            page=page,
            total_pages=math.ceil(len(products) / PAGE_SIZE),
            total_products=len(products),
        )
