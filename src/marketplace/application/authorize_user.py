"""Application service: resolve the user behind a session.

Equivalent of the "logged in" and "has role" guards that every
protected command runs before its own handler.
"""

from __future__ import annotations

from marketplace.domain.exceptions import AuthenticationError
from marketplace.domain.model.user import Role, User
from marketplace.domain.repository.user_repository import UserRepository


class AuthorizeUserHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(self, user_id: str, role: Role | None = None) -> User:
        user = self._user_repo.get_by_id(user_id)
        if user is None or not user.is_active:
            raise AuthenticationError("Please log in first")
        if role is not None:
            user.ensure_role(role)
        return user
