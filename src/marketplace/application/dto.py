"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from marketplace.domain.model.cart import Cart
from marketplace.domain.model.order import Order
from marketplace.domain.model.product import Product


@dataclass(frozen=True)
class CartLineDTO:
    product_id: str
    title: str
    quantity: int
    unit_price: str  # formatted, e.g. "$15.00"
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    items: list[CartLineDTO]
    total_quantity: int
    total_price: str

    @property
    def is_empty(self) -> bool:
        return self.total_quantity == 0


@dataclass(frozen=True)
class OrderLineItemDTO:
    product_id: str
    title: str
    quantity: int
    price_at_purchase: str
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    id: int
    buyer_id: str
    status: str
    items: list[OrderLineItemDTO]
    total: str
    created_at: str


@dataclass(frozen=True)
class ProductDTO:
    id: str
    seller_id: str
    title: str
    description: str
    price: str
    category: str
    stock: int
    image: str
    status: str


@dataclass(frozen=True)
class ProductPageDTO:
    products: list[ProductDTO]
    page: int
    total_pages: int
    total_products: int


@dataclass(frozen=True)
class UserSessionDTO:
    """Output: who is logged in on a session."""

    session_id: str
    user_id: str
    name: str
    role: str


# --- Mapping ------------------------------------------------------------------


def cart_to_dto(cart: Cart) -> CartDTO:
    return CartDTO(
        items=[
            CartLineDTO(
                product_id=line.product_id,
                title=line.title,
                quantity=line.quantity.value,
                unit_price=str(line.unit_price),
                line_total=str(line.line_total),
            )
            for line in cart.lines
        ],
        total_quantity=cart.total_quantity,
        total_price=str(cart.total_price),
    )


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        buyer_id=order.buyer_id,
        status=order.status.value,
        items=[
            OrderLineItemDTO(
                product_id=item.product_id,
                title=item.title,
                quantity=item.quantity.value,
                price_at_purchase=str(item.price_at_purchase),
                line_total=str(item.line_total),
            )
            for item in order.items
        ],
        total=str(order.total_amount),
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
    )


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        seller_id=product.seller_id,
        title=product.title,
        description=product.description,
        price=str(product.price),
        category=product.category.value,
        stock=product.stock,
        image=product.image,
        status=product.status,
    )
