"""Application service: Update Order Status use case.

Only a seller with products in the order may move it out of
``pending``.  The Order aggregate rejects every other transition.
"""

from __future__ import annotations

import structlog

from marketplace.application.dto import OrderDTO, order_to_dto
from marketplace.domain.exceptions import EntityNotFoundError
from marketplace.domain.model.order import OrderStatus
from marketplace.domain.repository.order_repository import OrderRepository

logger = structlog.get_logger(__name__)


class UpdateOrderStatusHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int, seller_id: str, status: str) -> OrderDTO:
        new_status = OrderStatus.parse(status)

        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        order.ensure_fulfilled_by(seller_id)
        previous = order.status
        order.transition_to(new_status)
        self._order_repo.save(order)

        logger.info(
            "order_status_changed",
            order_id=order_id,
            seller_id=seller_id,
            from_status=previous.value,
            to_status=new_status.value,
        )
        return order_to_dto(order)
