"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from marketplace.application.dto import CartDTO, cart_to_dto
from marketplace.domain.repository.cart_store import CartStore


class ShowCartHandler:

    def __init__(self, cart_store: CartStore) -> None:
        self._cart_store = cart_store

    def handle(self, session_id: str) -> CartDTO:
        return cart_to_dto(self._cart_store.get(session_id))
