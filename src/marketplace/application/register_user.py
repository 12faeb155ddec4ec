"""Application service: Register User use case.

A successful registration also opens a session, like logging in.
"""

from __future__ import annotations

import uuid

import structlog

from marketplace.application.dto import UserSessionDTO
from marketplace.domain.exceptions import ValidationError
from marketplace.domain.model.user import Role, User, normalize_email
from marketplace.domain.repository.user_repository import UserRepository
from marketplace.domain.service.password_hasher import PasswordHasher

logger = structlog.get_logger(__name__)

MIN_PASSWORD_LENGTH = 6


def ensure_email_available(
    user_repo: UserRepository, email: str, owner_id: str | None = None
) -> str:
    """Normalise *email* and check no other account uses it.

    *owner_id* is the account that may already hold the address.
    """
    email = normalize_email(email)
    holder = user_repo.get_by_email(email)
    if holder is not None and holder.id != owner_id:
        raise ValidationError(f"Email '{email}' is already registered")
    return email


class RegisterUserHandler:

    def __init__(self, user_repo: UserRepository, hasher: PasswordHasher) -> None:
        self._user_repo = user_repo
        self._hasher = hasher

    def handle(
        self,
        email: str,
        password: str,
        name: str | None = None,
        role: str | None = None,
    ) -> UserSessionDTO:
        email = ensure_email_available(self._user_repo, email)
        if not password or len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            )

        user = User.register(
            id=self._user_repo.next_id(),
            email=email,
            password_hash=self._hasher.hash(password),
            name=name,
            role=Role.parse(role),
        )
        self._user_repo.save(user)

        logger.info("user_registered", user_id=user.id, role=user.role.value)
        return UserSessionDTO(
            session_id=uuid.uuid4().hex,
            user_id=user.id,
            name=user.name,
            role=user.role.value,
        )
