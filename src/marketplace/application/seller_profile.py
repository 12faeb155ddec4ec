"""Application service: Show and Update Profile use cases."""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from marketplace.application.register_user import ensure_email_available
from marketplace.domain.exceptions import EntityNotFoundError
from marketplace.domain.model.user import User
from marketplace.domain.repository.user_repository import UserRepository

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ProfileDTO:
    user_id: str
    name: str
    email: str
    role: str
    member_since: str


def profile_to_dto(user: User) -> ProfileDTO:
    return ProfileDTO(
        user_id=user.id,
        name=user.name,
        email=user.email,
        role=user.role.value,
        member_since=user.created_at.strftime("%Y-%m-%d"),
    )


class ShowProfileHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(self, user_id: str) -> ProfileDTO:
        return profile_to_dto(_get_user(self._user_repo, user_id))


class UpdateProfileHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(
        self,
        user_id: str,
        name: str | None = None,
        email: str | None = None,
    ) -> ProfileDTO:
        """Change the name and/or email; the email stays unique across accounts."""
        user = _get_user(self._user_repo, user_id)
        if email is not None:
            email = ensure_email_available(self._user_repo, email, owner_id=user.id)

        user.update_profile(name=name, email=email)
        self._user_repo.save(user)

        logger.info("profile_updated", user_id=user.id)
        return profile_to_dto(user)


def _get_user(user_repo: UserRepository, user_id: str) -> User:
    user = user_repo.get_by_id(user_id)
    if user is None:
        raise EntityNotFoundError(f"User with ID '{user_id}' not found")
    return user
