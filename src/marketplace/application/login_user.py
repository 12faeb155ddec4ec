"""Application service: Login and Logout use cases."""

from __future__ import annotations

import uuid

import structlog

from marketplace.application.dto import UserSessionDTO
from marketplace.domain.exceptions import AuthenticationError
from marketplace.domain.repository.cart_store import CartStore
from marketplace.domain.repository.user_repository import UserRepository
from marketplace.domain.service.password_hasher import PasswordHasher

logger = structlog.get_logger(__name__)


class LoginUserHandler:

    def __init__(self, user_repo: UserRepository, hasher: PasswordHasher) -> None:
        self._user_repo = user_repo
        self._hasher = hasher

    def handle(
        self,
        email: str,
        password: str,
        current: UserSessionDTO | None = None,
    ) -> UserSessionDTO:
        """Open a session; the same error covers every kind of mismatch.

        Logging in again as the user who already holds *current* keeps that
        session, and with it the cart.
        """
        user = self._user_repo.get_by_email((email or "").strip())
        if (
            user is None
            or not user.is_active
            or not self._hasher.verify(password or "", user.password_hash)
        ):
            logger.warning("login_rejected", email=email)
            raise AuthenticationError("Invalid email or password")

        if current is not None and current.user_id == user.id:
            session_id = current.session_id
        else:
            session_id = uuid.uuid4().hex
        logger.info("user_logged_in", user_id=user.id, session_id=session_id)
        return UserSessionDTO(
            session_id=session_id,
            user_id=user.id,
            name=user.name,
            role=user.role.value,
        )


class LogoutUserHandler:

    def __init__(self, cart_store: CartStore) -> None:
        self._cart_store = cart_store

    def handle(self, session_id: str) -> None:
        """End a session; its cart goes with it."""
        self._cart_store.clear(session_id)
        logger.info("user_logged_out", session_id=session_id)
