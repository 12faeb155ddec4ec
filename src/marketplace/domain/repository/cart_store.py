"""Abstract session store holding one Cart per session.

A missing cart reads as an empty one, so handlers never need to
create carts explicitly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from marketplace.domain.model.cart import Cart


class CartStore(ABC):

    @abstractmethod
    def get(self, session_id: str) -> Cart:
        """Return the session's cart (empty if none was stored yet)."""

    @abstractmethod
    def set(self, session_id: str, cart: Cart) -> None:
        """Replace the session's cart."""

    @abstractmethod
    def clear(self, session_id: str) -> None:
        """Forget the session's cart."""
