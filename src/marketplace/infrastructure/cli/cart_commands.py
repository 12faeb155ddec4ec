"""CLI commands for the shopping cart."""

from __future__ import annotations

import click

from marketplace.application.add_to_cart import AddToCartHandler
from marketplace.application.dto import CartDTO
from marketplace.application.remove_from_cart import RemoveFromCartHandler
from marketplace.application.show_cart import ShowCartHandler
from marketplace.application.update_cart_item import UpdateCartItemHandler
from marketplace.domain.exceptions import DomainException
from marketplace.infrastructure.bootstrap import cart_store, product_repository
from marketplace.infrastructure.cli.session import require_user


def _display_cart(dto: CartDTO) -> None:
    """Shared formatting for displaying a cart."""
    if dto.is_empty:
        click.echo("Your cart is empty.")
        return

    click.echo(f"  {'ID':<6} {'Product':<24} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*58}")
    for item in dto.items:
        click.echo(
            f"  {item.product_id:<6} {item.title:<24} {item.quantity:>5} "
            f"{item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*58}")
    click.echo(f"  {'Items':<31} {dto.total_quantity:>5}")
    click.echo(f"  {'Cart Total':<31} {dto.total_price:>21}")


@click.command("add")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--qty", default=None, help="Quantity (defaults to 1).")
def cart_add(product_id: str, qty: str | None) -> None:
    """Add a product to the cart."""
    session, _ = require_user()
    handler = AddToCartHandler(cart_store=cart_store(), product_repo=product_repository())

    try:
        dto = handler.handle(session.session_id, product_id, qty)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(dto)


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--qty", default=None, help="New quantity (defaults to 1).")
def cart_update(product_id: str, qty: str | None) -> None:
    """Change the quantity of a cart line."""
    session, _ = require_user()
    handler = UpdateCartItemHandler(cart_store=cart_store())

    try:
        dto = handler.handle(session.session_id, product_id, qty)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(dto)


@click.command("remove")
@click.option("--id", "product_id", required=True, help="Product ID.")
def cart_remove(product_id: str) -> None:
    """Remove a product from the cart."""
    session, _ = require_user()
    handler = RemoveFromCartHandler(cart_store=cart_store())

    try:
        dto = handler.handle(session.session_id, product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(dto)


@click.command("show")
def cart_show() -> None:
    """Show the cart."""
    session, _ = require_user()
    handler = ShowCartHandler(cart_store=cart_store())

    try:
        dto = handler.handle(session.session_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(dto)
