"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path

from marketplace.infrastructure.config import Settings
from marketplace.infrastructure.persistence.json_cart_store import JsonCartStore
from marketplace.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from marketplace.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from marketplace.infrastructure.persistence.json_user_repository import (
    JsonUserRepository,
)
from marketplace.infrastructure.security.bcrypt_hasher import BcryptPasswordHasher


def _data_dir() -> Path:
    return Settings.from_env().data_dir


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(_data_dir() / "products.json")


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(_data_dir() / "orders.json")


def user_repository() -> JsonUserRepository:
    return JsonUserRepository(_data_dir() / "users.json")


def cart_store() -> JsonCartStore:
    return JsonCartStore(_data_dir() / "carts.json")


def password_hasher() -> BcryptPasswordHasher:
    return BcryptPasswordHasher()


def session_file() -> Path:
    return _data_dir() / "session.json"
