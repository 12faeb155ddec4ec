"""CLI commands for checkout and the buyer's orders."""

from __future__ import annotations

import click

from marketplace.application.checkout import CheckoutHandler
from marketplace.application.dto import OrderDTO
from marketplace.application.list_orders import ListBuyerOrdersHandler
from marketplace.application.show_order import ShowOrderHandler
from marketplace.domain.exceptions import DomainException, EmptyCartError
from marketplace.infrastructure.bootstrap import cart_store, order_repository
from marketplace.infrastructure.cli.session import require_user


def display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"Buyer:   #{dto.buyer_id}")
    click.echo(f"Created: {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<24} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*51}")
    for item in dto.items:
        click.echo(
            f"  {item.title:<24} {item.quantity:>5} "
            f"{item.price_at_purchase:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*51}")
    click.echo(f"  {'Order Total':<30} {dto.total:>20}")


@click.command("checkout")
def order_checkout() -> None:
    """Place an order for everything in the cart."""
    session, user = require_user()
    handler = CheckoutHandler(cart_store=cart_store(), order_repo=order_repository())

    try:
        dto = handler.handle(session_id=session.session_id, buyer_id=user.id)
    except EmptyCartError:
        raise click.ClickException("Your cart is empty. Add products before checking out.")
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Thank you! Order #{dto.id} placed.")
    click.echo()
    display_order(dto)


@click.command("list")
def order_list() -> None:
    """List your orders."""
    _, user = require_user()
    handler = ListBuyerOrdersHandler(order_repo=order_repository())

    try:
        orders = handler.handle(user.id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not orders:
        click.echo("You have no orders yet.")
        return

    click.echo(f"{'Order':<8} {'Created':<22} {'Status':<10} {'Total':>12}")
    click.echo("-" * 55)
    for o in orders:
        click.echo(f"#{o.id:<7} {o.created_at:<22} {o.status:<10} {o.total:>12}")


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(order_id: int) -> None:
    """Show one of your orders."""
    _, user = require_user()
    handler = ShowOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id, buyer_id=user.id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_order(dto)
