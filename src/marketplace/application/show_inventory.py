"""Application service: Show Inventory use case (query)."""

from __future__ import annotations

from dataclasses import dataclass

from marketplace.domain.repository.product_repository import ProductRepository


@dataclass(frozen=True)
class InventoryLineDTO:
    product_id: str
    title: str
    stock: int
    status: str
    low_stock: bool


class ShowInventoryHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, seller_id: str) -> list[InventoryLineDTO]:
        """The seller's products, emptiest shelves first."""
        products = sorted(
            self._product_repo.list_by_seller(seller_id),
            key=lambda p: (p.stock, p.title.lower()),
        )
        return [
            InventoryLineDTO(
                product_id=p.id,
                title=p.title,
                stock=p.stock,
                status=p.status,
                low_stock=p.is_low_stock,
            )
            for p in products
        ]
