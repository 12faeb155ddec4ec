"""Product aggregate.

Products live independently of carts and orders. They have their own
lifecycle: sellers list them, reprice them, restock them and take them
off sale.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from marketplace.domain.exceptions import AuthorizationError, ValidationError
from marketplace.domain.model.value_objects import Money

DEFAULT_IMAGE = "https://images.unsplash.com/photo-1505740420928-5e560c06d30e?w=400"
LOW_STOCK_THRESHOLD = 10


class Category(Enum):
    ELECTRONICS = "electronics"
    FASHION = "fashion"
    HOME = "home"
    SPORTS = "sports"
    BOOKS = "books"

    @staticmethod
    def parse(raw: str) -> Category:
        try:
            return Category((raw or "").strip().lower())
        except ValueError as exc:
            choices = ", ".join(c.value for c in Category)
            raise ValidationError(
                f"Unknown category {raw!r} (expected one of: {choices})"
            ) from exc


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Product:
    """A product in the catalog, owned by exactly one seller.

    Carts and orders copy ``title``, ``price`` and ``seller_id`` when they
    reference a product, so every mutation here is safe with respect to
    open carts and placed orders.
    """

    id: str
    seller_id: str
    title: str
    description: str
    price: Money
    category: Category
    stock: int = 0
    image: str = DEFAULT_IMAGE
    is_available: bool = True
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    # --- Factory (used for NEW products only) ---------------------------------

    @staticmethod
    def create(
        id: str,
        seller_id: str,
        title: str,
        description: str,
        price: Money,
        category: Category,
        stock: int = 0,
        image: str | None = None,
    ) -> Product:
        """Create a new listing, enforcing all invariants."""
        title, description = _validate_details(title, description)
        _validate_stock(stock)
        return Product(
            id=id,
            seller_id=seller_id,
            title=title,
            description=description,
            price=price,
            category=category,
            stock=stock,
            image=(image or "").strip() or DEFAULT_IMAGE,
        )

    # --- Mutations ------------------------------------------------------------

    def update_details(
        self,
        title: str,
        description: str,
        price: Money,
        category: Category,
        is_available: bool | None = None,
    ) -> None:
        """Replace the editable attributes of the listing."""
        self.title, self.description = _validate_details(title, description)
        self.price = price
        self.category = category
        if is_available is not None:
            self.is_available = is_available
        self._touch()

    def set_stock(self, stock: int) -> None:
        _validate_stock(stock)
        self.stock = stock
        self._touch()

    def toggle_availability(self) -> bool:
        """Flip between active and inactive; returns the new state."""
        self.is_available = not self.is_available
        self._touch()
        return self.is_available

    def ensure_owned_by(self, seller_id: str) -> None:
        if self.seller_id != seller_id:
            raise AuthorizationError("Forbidden")

    # --- Computed properties --------------------------------------------------

    @property
    def is_low_stock(self) -> bool:
        return self.stock < LOW_STOCK_THRESHOLD

    @property
    def status(self) -> str:
        return "active" if self.is_available else "inactive"

    def _touch(self) -> None:
        self.updated_at = _now()


def _validate_details(title: str, description: str) -> tuple[str, str]:
    if not title or not title.strip():
        raise ValidationError("Product title is required")
    if not description or not description.strip():
        raise ValidationError("Product description is required")
    return title.strip(), description.strip()


def _validate_stock(stock: int) -> None:
    if isinstance(stock, bool) or not isinstance(stock, int):
        raise ValidationError(f"Stock must be an integer, got {type(stock).__name__}")
    if stock < 0:
        raise ValidationError("Stock cannot be negative")
