"""Application service: catalog browsing (queries)."""

from __future__ import annotations

from marketplace.application.dto import ProductDTO, product_to_dto
from marketplace.domain.exceptions import EntityNotFoundError, ValidationError
from marketplace.domain.model.product import Category
from marketplace.domain.model.value_objects import Money
from marketplace.domain.repository.product_repository import ProductRepository


class BrowseProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        query: str | None = None,
        category: str | None = None,
        min_price: str | None = None,
        max_price: str | None = None,
    ) -> list[ProductDTO]:
        """Return available products matching every given filter.

        ``query`` matches a case-insensitive substring of the title; price
        bounds are inclusive.
        """
        wanted_category = Category.parse(category) if category else None
        low = Money.of(min_price) if min_price else None
        high = Money.of(max_price) if max_price else None
        if low is not None and high is not None and low > high:
            raise ValidationError(f"Minimum price {low} is above maximum price {high}")
        needle = query.strip().lower() if query else ""

        matches = []
        for product in self._product_repo.list_all():
            if not product.is_available:
                continue
            if needle and needle not in product.title.lower():
                continue
            if wanted_category is not None and product.category is not wanted_category:
                continue
            if low is not None and product.price < low:
                continue
            if high is not None and product.price > high:
                continue
            matches.append(product_to_dto(product))
        return matches


class ShowProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> ProductDTO:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        return product_to_dto(product)
