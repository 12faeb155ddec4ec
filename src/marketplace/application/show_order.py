"""Application service: Show Order use cases (queries).

Buyers may view their own orders; sellers may view orders that contain
at least one of their products.
"""

from __future__ import annotations

from marketplace.application.dto import OrderDTO, order_to_dto
from marketplace.domain.exceptions import EntityNotFoundError
from marketplace.domain.model.order import Order
from marketplace.domain.repository.order_repository import OrderRepository


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int, buyer_id: str) -> OrderDTO:
        order = _load(self._order_repo, order_id)
        order.ensure_placed_by(buyer_id)
        return order_to_dto(order)


class ShowSellerOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int, seller_id: str) -> OrderDTO:
        order = _load(self._order_repo, order_id)
        order.ensure_fulfilled_by(seller_id)
        return order_to_dto(order)


def _load(order_repo: OrderRepository, order_id: int) -> Order:
    order = order_repo.get_by_id(order_id)
    if order is None:
        raise EntityNotFoundError(f"Order #{order_id} not found")
    return order
