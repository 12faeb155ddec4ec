"""The CLI's login state, standing in for a browser session cookie.

One login at a time is remembered in ``session.json`` next to the data.
"""

from __future__ import annotations

import click

from marketplace.application.authorize_user import AuthorizeUserHandler
from marketplace.application.dto import UserSessionDTO
from marketplace.domain.exceptions import DomainException
from marketplace.domain.model.user import Role, User
from marketplace.infrastructure.bootstrap import session_file, user_repository
from marketplace.infrastructure.persistence.json_document import JsonDocument


def _document() -> JsonDocument:
    return JsonDocument(session_file(), empty={})


def save_session(session: UserSessionDTO) -> None:
    _document().persist(
        {
            "session_id": session.session_id,
            "user_id": session.user_id,
            "name": session.name,
            "role": session.role,
        }
    )


def load_session() -> UserSessionDTO | None:
    raw = _document().load()
    if not raw:
        return None
    return UserSessionDTO(
        session_id=raw["session_id"],
        user_id=raw["user_id"],
        name=raw["name"],
        role=raw["role"],
    )


def end_session() -> None:
    _document().persist({})


def require_user(role: Role | None = None) -> tuple[UserSessionDTO, User]:
    """Return the logged-in session and user, or abort the command."""
    try:
        session = load_session()
        if session is None:
            raise click.ClickException("Please log in first")
        user = AuthorizeUserHandler(user_repository()).handle(session.user_id, role)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    return session, user
