"""Integration tests for order queries and status updates."""

import pytest

from marketplace.application.list_orders import ListBuyerOrdersHandler, ListSellerOrdersHandler
from marketplace.application.show_order import ShowOrderHandler, ShowSellerOrderHandler
from marketplace.application.update_order_status import UpdateOrderStatusHandler
from marketplace.domain.exceptions import (
    AuthorizationError,
    EntityNotFoundError,
    ValidationError,
)
from marketplace.domain.model.order import OrderStatus
from tests.builders import at, make_order, make_product
from tests.fakes import FakeOrderRepository

LAMP = make_product("1", seller_id="s1")
BOOK = make_product("2", seller_id="s2")


def _setup() -> FakeOrderRepository:
    return FakeOrderRepository([
        make_order("b1", [(LAMP, 1)], created_at=at(2024, 1, 1)),
        make_order("b1", [(LAMP, 1), (BOOK, 1)], created_at=at(2024, 1, 3)),
        make_order("b2", [(BOOK, 2)], created_at=at(2024, 1, 2)),
    ])


class TestOrderQueries:

    def test_buyer_history_newest_first(self):
        orders = ListBuyerOrdersHandler(_setup()).handle("b1")
        assert [o.id for o in orders] == [2, 1]

    def test_seller_sees_orders_with_their_lines(self):
        orders = ListSellerOrdersHandler(_setup()).handle("s2")
        assert [o.id for o in orders] == [2, 3]

    def test_buyer_views_own_order(self):
        dto = ShowOrderHandler(_setup()).handle(1, buyer_id="b1")
        assert dto.id == 1

    def test_buyer_cannot_view_someone_elses_order(self):
        with pytest.raises(AuthorizationError):
            ShowOrderHandler(_setup()).handle(3, buyer_id="b1")

    def test_seller_cannot_view_unrelated_order(self):
        with pytest.raises(AuthorizationError):
            ShowSellerOrderHandler(_setup()).handle(1, seller_id="s2")

    def test_missing_order(self):
        with pytest.raises(EntityNotFoundError, match="#99"):
            ShowOrderHandler(_setup()).handle(99, buyer_id="b1")


class TestUpdateOrderStatus:

    def test_seller_marks_delivered(self):
        repo = _setup()
        dto = UpdateOrderStatusHandler(repo).handle(2, seller_id="s1", status="delivered")

        assert dto.status == "delivered"
        assert repo.get_by_id(2).status == OrderStatus.DELIVERED

    def test_completed_is_accepted_as_delivered(self):
        repo = _setup()
        dto = UpdateOrderStatusHandler(repo).handle(1, seller_id="s1", status="completed")
        assert dto.status == "delivered"

    def test_unrelated_seller_rejected(self):
        repo = _setup()
        with pytest.raises(AuthorizationError):
            UpdateOrderStatusHandler(repo).handle(1, seller_id="s2", status="cancelled")
        assert repo.get_by_id(1).status == OrderStatus.PENDING

    def test_terminal_status_cannot_change(self):
        repo = _setup()
        handler = UpdateOrderStatusHandler(repo)
        handler.handle(3, seller_id="s2", status="cancelled")

        with pytest.raises(ValidationError):
            handler.handle(3, seller_id="s2", status="delivered")
        with pytest.raises(ValidationError):
            handler.handle(3, seller_id="s2", status="pending")
        assert repo.get_by_id(3).status == OrderStatus.CANCELLED

    def test_unknown_status_rejected(self):
        with pytest.raises(ValidationError, match="Unknown order status"):
            UpdateOrderStatusHandler(_setup()).handle(1, seller_id="s1", status="lost")
