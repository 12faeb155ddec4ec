"""CLI commands for the seller back office."""

from __future__ import annotations

from dataclasses import replace

import click

from marketplace.application.list_orders import ListSellerOrdersHandler
from marketplace.application.list_seller_products import ListSellerProductsHandler
from marketplace.application.seller_dashboard import (
    SellerAnalyticsHandler,
    SellerDashboardHandler,
)
from marketplace.application.seller_profile import ShowProfileHandler, UpdateProfileHandler
from marketplace.application.show_inventory import ShowInventoryHandler
from marketplace.application.show_order import ShowSellerOrderHandler
from marketplace.application.update_order_status import UpdateOrderStatusHandler
from marketplace.domain.exceptions import DomainException
from marketplace.domain.model.order import OrderStatus
from marketplace.domain.model.user import Role
from marketplace.infrastructure.bootstrap import (
    order_repository,
    product_repository,
    user_repository,
)
from marketplace.infrastructure.cli.order_commands import display_order
from marketplace.infrastructure.cli.session import require_user, save_session


@click.command("dashboard")
def seller_dashboard() -> None:
    """Sales overview."""
    _, seller = require_user(Role.SELLER)
    handler = SellerDashboardHandler(
        product_repo=product_repository(),
        order_repo=order_repository(),
    )

    try:
        dto = handler.handle(seller.id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    s = dto.stats
    click.echo(f"Products:         {s.total_products} ({s.active_products} active)")
    click.echo(f"Revenue:          {s.total_revenue}")
    click.echo(f"Pending orders:   {s.pending_orders}")
    click.echo(f"Delivered orders: {s.delivered_orders}")

    if dto.low_stock_products:
        click.echo()
        click.echo("Low stock:")
        for p in dto.low_stock_products:
            click.echo(f"  #{p.id:<6} {p.title:<28} {p.stock:>5}")

    if dto.recent_orders:
        click.echo()
        click.echo("Recent orders:")
        for o in dto.recent_orders:
            click.echo(f"  #{o.id:<6} {o.created_at:<22} {o.status:<10}")


@click.command("analytics")
def seller_analytics() -> None:
    """Daily sales for the last week and best sellers."""
    _, seller = require_user(Role.SELLER)
    handler = SellerAnalyticsHandler(order_repo=order_repository())

    try:
        dto = handler.handle(seller.id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{'Day':<12} {'Orders':>7} {'Revenue':>12}")
    click.echo("-" * 33)
    for day in dto.daily_sales:
        click.echo(f"{day.day:<12} {day.orders:>7} {day.revenue:>12}")

    if dto.top_products:
        click.echo()
        click.echo("Top products:")
        for p in dto.top_products:
            click.echo(f"  {p.title:<28} {p.units:>5} sold {p.revenue:>12}")


@click.command("products")
@click.option("--page", default=1, type=int, show_default=True, help="Page number.")
def seller_products(page: int) -> None:
    """List your products, newest first."""
    _, seller = require_user(Role.SELLER)
    handler = ListSellerProductsHandler(product_repo=product_repository())

    try:
        dto = handler.handle(seller.id, page=page)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not dto.products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Title':<28} {'Price':>10} {'Stock':>6} {'Status':>9}")
    click.echo("-" * 63)
    for p in dto.products:
        click.echo(f"{p.id:<6} {p.title:<28} {p.price:>10} {p.stock:>6} {p.status:>9}")
    click.echo(f"Page {dto.page} of {dto.total_pages} ({dto.total_products} products)")


@click.command("inventory")
def seller_inventory() -> None:
    """Stock levels, lowest first."""
    _, seller = require_user(Role.SELLER)
    handler = ShowInventoryHandler(product_repo=product_repository())

    try:
        lines = handler.handle(seller.id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not lines:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Title':<28} {'Stock':>6} {'Status':>9}")
    click.echo("-" * 52)
    for line in lines:
        marker = "  LOW" if line.low_stock else ""
        click.echo(f"{line.product_id:<6} {line.title:<28} {line.stock:>6} {line.status:>9}{marker}")


@click.command("orders")
def seller_orders() -> None:
    """Orders containing your products."""
    _, seller = require_user(Role.SELLER)
    handler = ListSellerOrdersHandler(order_repo=order_repository())

    try:
        orders = handler.handle(seller.id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not orders:
        click.echo("No orders yet.")
        return

    click.echo(f"{'Order':<8} {'Buyer':<8} {'Created':<22} {'Status':<10}")
    click.echo("-" * 50)
    for o in orders:
        click.echo(f"#{o.id:<7} #{o.buyer_id:<7} {o.created_at:<22} {o.status:<10}")


@click.command("order")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def seller_order(order_id: int) -> None:
    """Show an order containing your products."""
    _, seller = require_user(Role.SELLER)
    handler = ShowSellerOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id, seller_id=seller.id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_order(dto)


@click.command("status")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option(
    "--status",
    required=True,
    type=click.Choice(
        [s.value for s in OrderStatus if s.is_terminal] + ["completed"],
        case_sensitive=False,
    ),
    help="New status.",
)
def seller_order_status(order_id: int, status: str) -> None:
    """Mark an order delivered or cancelled."""
    _, seller = require_user(Role.SELLER)
    handler = UpdateOrderStatusHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id, seller_id=seller.id, status=status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} is now {dto.status}.")


@click.command("profile")
def seller_profile() -> None:
    """Show your seller profile."""
    _, seller = require_user(Role.SELLER)
    handler = ShowProfileHandler(user_repo=user_repository())

    try:
        p = handler.handle(seller.id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{p.name} <{p.email}>")
    click.echo(f"Seller #{p.user_id} since {p.member_since}")


@click.command("profile-update")
@click.option("--name", default=None, help="New display name.")
@click.option("--email", default=None, help="New login email.")
def seller_profile_update(name: str | None, email: str | None) -> None:
    """Change your name or email."""
    if name is None and email is None:
        raise click.UsageError("Give --name and/or --email.")
    session, seller = require_user(Role.SELLER)
    handler = UpdateProfileHandler(user_repo=user_repository())

    try:
        p = handler.handle(seller.id, name=name, email=email)
        save_session(replace(session, name=p.name))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Profile updated: {p.name} <{p.email}>")
