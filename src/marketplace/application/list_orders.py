"""Application service: order history queries for buyers and sellers."""

from __future__ import annotations

from marketplace.application.dto import OrderDTO, order_to_dto
from marketplace.domain.repository.order_repository import OrderRepository


class ListBuyerOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, buyer_id: str) -> list[OrderDTO]:
        return [order_to_dto(o) for o in self._order_repo.list_by_buyer(buyer_id)]


class ListSellerOrdersHandler:
    """Orders that contain the seller's products.

    The whole order is returned (other sellers' lines included) so the
    seller sees what the buyer bought in one shipment.
    """

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, seller_id: str) -> list[OrderDTO]:
        return [order_to_dto(o) for o in self._order_repo.list_by_seller(seller_id)]
