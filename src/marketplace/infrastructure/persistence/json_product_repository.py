"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

from marketplace.domain.model.product import DEFAULT_IMAGE, Category, Product
from marketplace.domain.model.value_objects import Money, to_entity_id
from marketplace.domain.repository.product_repository import ProductRepository
from marketplace.infrastructure.persistence.json_document import JsonDocument


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._document = JsonDocument(file_path, empty=[])

    # --- ProductRepository interface ------------------------------------------

    def next_id(self) -> str:
        numeric = [int(raw["id"]) for raw in self._load_raw() if str(raw["id"]).isdigit()]
        return str(max(numeric, default=0) + 1)

    def get_by_id(self, product_id: str) -> Product | None:
        for raw in self._load_raw():
            if str(raw["id"]) == product_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def list_by_seller(self, seller_id: str) -> list[Product]:
        return [p for p in self.list_all() if p.seller_id == seller_id]

    def save(self, product: Product) -> None:
        records = self._load_raw()
        replaced = False
        for i, raw in enumerate(records):
            if str(raw["id"]) == product.id:
                records[i] = self._to_raw(product)
                replaced = True
                break
        if not replaced:
            records.append(self._to_raw(product))
        self._document.persist(records)

    def delete(self, product_id: str) -> None:
        records = self._load_raw()
        remaining = [raw for raw in records if str(raw["id"]) != product_id]
        if len(remaining) != len(records):
            self._document.persist(remaining)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "seller_id": product.seller_id,
            "title": product.title,
            "description": product.description,
            "price": str(product.price.amount),
            "currency": product.price.currency,
            "category": product.category.value,
            "stock": product.stock,
            "image": product.image,
            "is_available": product.is_available,
            "created_at": product.created_at.isoformat(),
            "updated_at": product.updated_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=to_entity_id(raw["id"]),
            seller_id=to_entity_id(raw["seller_id"]),
            title=raw["title"],
            description=raw.get("description", ""),
            price=Money(Decimal(raw["price"]), raw.get("currency", "USD")),
            category=Category.parse(raw["category"]),
            stock=raw.get("stock", 0),
            image=raw.get("image") or DEFAULT_IMAGE,
            is_available=raw.get("is_available", True),
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw.get("updated_at", raw["created_at"])),
        )

    def _load_raw(self) -> list[dict]:
        return self._document.load()
