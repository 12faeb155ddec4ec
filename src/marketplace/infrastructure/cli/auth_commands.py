"""CLI commands for accounts and sessions."""

from __future__ import annotations

import click

from marketplace.application.dto import UserSessionDTO
from marketplace.application.login_user import LoginUserHandler, LogoutUserHandler
from marketplace.application.register_user import RegisterUserHandler
from marketplace.domain.exceptions import DomainException
from marketplace.domain.model.user import Role
from marketplace.infrastructure.bootstrap import (
    cart_store,
    password_hasher,
    user_repository,
)
from marketplace.infrastructure.cli.session import (
    end_session,
    load_session,
    require_user,
    save_session,
)


def _switch_session(previous: UserSessionDTO | None, session: UserSessionDTO) -> None:
    """End the session being replaced so its cart is not left behind."""
    if previous is not None and previous.session_id != session.session_id:
        LogoutUserHandler(cart_store=cart_store()).handle(previous.session_id)


@click.command("register")
@click.option("--name", default=None, help="Display name.")
@click.option("--email", required=True, help="Email address (login).")
@click.option("--password", required=True, prompt=True, hide_input=True, help="Password.")
@click.option(
    "--role",
    type=click.Choice([r.value for r in Role], case_sensitive=False),
    default=Role.BUYER.value,
    show_default=True,
    help="Account type.",
)
def auth_register(name: str | None, email: str, password: str, role: str) -> None:
    """Create an account and log in."""
    handler = RegisterUserHandler(user_repo=user_repository(), hasher=password_hasher())

    try:
        previous = load_session()
        session = handler.handle(email=email, password=password, name=name, role=role)
        _switch_session(previous, session)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    save_session(session)
    click.echo(f"Welcome, {session.name}! Registered as {session.role} (user #{session.user_id}).")


@click.command("login")
@click.option("--email", required=True, help="Email address.")
@click.option("--password", required=True, prompt=True, hide_input=True, help="Password.")
def auth_login(email: str, password: str) -> None:
    """Log in."""
    handler = LoginUserHandler(user_repo=user_repository(), hasher=password_hasher())

    try:
        previous = load_session()
        session = handler.handle(email=email, password=password, current=previous)
        _switch_session(previous, session)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    save_session(session)
    click.echo(f"Logged in as {session.name} ({session.role}).")


@click.command("logout")
def auth_logout() -> None:
    """Log out and discard the cart."""
    session = load_session()
    if session is None:
        click.echo("Not logged in.")
        return

    try:
        LogoutUserHandler(cart_store=cart_store()).handle(session.session_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    end_session()
    click.echo("Logged out.")


@click.command("whoami")
def auth_whoami() -> None:
    """Show the logged-in user."""
    _, user = require_user()
    click.echo(f"{user.name} <{user.email}>  role={user.role.value}  id={user.id}")
