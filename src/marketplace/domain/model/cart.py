"""Cart aggregate: the buyer's session-scoped selection of products.

The cart is a value: every mutation returns a new ``Cart`` and leaves the
receiver untouched, so a handler can compute the next cart, persist it,
and only then replace the old one in the session store.

``total_quantity`` and ``total_price`` are not constructor arguments.
They are derived from ``items`` whenever a cart is built, so no sequence
of mutations (or a tampered session document) can make them drift.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, Mapping

from marketplace.domain.exceptions import ValidationError
from marketplace.domain.model.product import Product
from marketplace.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class CartLineItem:
    """A product in the cart with the title and price it had when added."""

    product_id: str
    seller_id: str
    title: str
    unit_price: Money  # snapshot, later catalog changes do not apply
    quantity: Quantity

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value

    def with_quantity(self, quantity: Quantity) -> CartLineItem:
        return replace(self, quantity=quantity)


@dataclass(frozen=True)
class Cart:
    items: Mapping[str, CartLineItem] = field(default_factory=dict)
    total_quantity: int = field(init=False)
    total_price: Money = field(init=False)

    def __post_init__(self) -> None:
        items = dict(self.items)
        for product_id, line in items.items():
            if product_id != line.product_id:
                raise ValidationError(
                    f"Cart key '{product_id}' does not match line item "
                    f"'{line.product_id}'"
                )
        object.__setattr__(self, "items", items)
        object.__setattr__(
            self, "total_quantity", sum(line.quantity.value for line in items.values())
        )
        object.__setattr__(
            self, "total_price", Money.total(line.line_total for line in items.values())
        )

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def empty() -> Cart:
        return Cart()

    @staticmethod
    def from_lines(lines: Iterable[CartLineItem]) -> Cart:
        """Rebuild a cart from stored lines; repeated products are merged."""
        items: dict[str, CartLineItem] = {}
        for line in lines:
            existing = items.get(line.product_id)
            if existing is not None:
                line = existing.with_quantity(existing.quantity + line.quantity)
            items[line.product_id] = line
        return Cart(items)

    # --- Mutations (each returns a new cart) ----------------------------------

    def add_item(self, product: Product, quantity: Quantity) -> Cart:
        """Add *quantity* units of *product*, merging with an existing line.

        A new line snapshots the product's current title, price and seller.
        An existing line keeps its original snapshot and only grows.
        """
        if not product.is_available:
            raise ValidationError(f"Product '{product.title}' is not available")

        existing = self.items.get(product.id)
        if existing is None:
            line = CartLineItem(
                product_id=product.id,
                seller_id=product.seller_id,
                title=product.title,
                unit_price=product.price,
                quantity=quantity,
            )
        else:
            line = existing.with_quantity(existing.quantity + quantity)
        return self._with_line(line)

    def update_item(self, product_id: str, quantity: Quantity) -> Cart:
        """Set the quantity of a line. Unknown products are ignored."""
        existing = self.items.get(product_id)
        if existing is None:
            return self
        return self._with_line(existing.with_quantity(quantity))

    def remove_item(self, product_id: str) -> Cart:
        """Drop a line. Unknown products are ignored."""
        if product_id not in self.items:
            return self
        items = {pid: line for pid, line in self.items.items() if pid != product_id}
        return Cart(items)

    # --- Computed properties --------------------------------------------------

    @property
    def lines(self) -> list[CartLineItem]:
        """Line items in the order they were first added."""
        return list(self.items.values())

    @property
    def is_empty(self) -> bool:
        return self.total_quantity == 0

    def _with_line(self, line: CartLineItem) -> Cart:
        items = dict(self.items)
        items[line.product_id] = line
        return Cart(items)
