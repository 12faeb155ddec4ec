"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from marketplace.application.add_product import AddProductHandler
from marketplace.application.browse_products import BrowseProductsHandler, ShowProductHandler
from marketplace.application.delete_product import DeleteProductHandler
from marketplace.application.set_stock import SetStockHandler
from marketplace.application.toggle_product_status import ToggleProductStatusHandler
from marketplace.application.update_product import UpdateProductHandler
from marketplace.domain.exceptions import DomainException
from marketplace.domain.model.product import Category
from marketplace.domain.model.user import Role
from marketplace.infrastructure.bootstrap import product_repository
from marketplace.infrastructure.cli.session import require_user

_CATEGORIES = click.Choice([c.value for c in Category], case_sensitive=False)


@click.command("list")
@click.option("--q", "query", default=None, help="Search in titles.")
@click.option("--category", type=_CATEGORIES, default=None, help="Category filter.")
@click.option("--min", "min_price", default=None, help="Minimum price.")
@click.option("--max", "max_price", default=None, help="Maximum price.")
def product_list(
    query: str | None,
    category: str | None,
    min_price: str | None,
    max_price: str | None,
) -> None:
    """Browse products on sale."""
    handler = BrowseProductsHandler(product_repo=product_repository())

    try:
        products = handler.handle(
            query=query, category=category, min_price=min_price, max_price=max_price
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Title':<28} {'Category':<12} {'Price':>10}")
    click.echo("-" * 59)
    for p in products:
        click.echo(f"{p.id:<6} {p.title:<28} {p.category:<12} {p.price:>10}")


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_show(product_id: str) -> None:
    """Show one product."""
    handler = ShowProductHandler(product_repo=product_repository())

    try:
        p = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"#{p.id} {p.title}  ({p.status})")
    click.echo(f"Price:    {p.price}")
    click.echo(f"Category: {p.category}")
    click.echo(f"In stock: {p.stock}")
    click.echo(f"Seller:   #{p.seller_id}")
    click.echo()
    click.echo(p.description)


@click.command("add")
@click.option("--title", required=True, help="Product title.")
@click.option("--description", required=True, help="Product description.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--category", required=True, type=_CATEGORIES, help="Category.")
@click.option("--stock", default=0, type=int, show_default=True, help="Units in stock.")
@click.option("--image", default=None, help="Image URL.")
def product_add(
    title: str,
    description: str,
    price: str,
    category: str,
    stock: int,
    image: str | None,
) -> None:
    """List a new product (sellers only)."""
    _, seller = require_user(Role.SELLER)
    handler = AddProductHandler(product_repo=product_repository())

    try:
        p = handler.handle(
            seller_id=seller.id,
            title=title,
            description=description,
            price=price,
            category=category,
            stock=stock,
            image=image,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{p.id} '{p.title}' added at {p.price}")


@click.command("edit")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--title", required=True, help="Product title.")
@click.option("--description", required=True, help="Product description.")
@click.option("--price", required=True, help="Price (e.g. 29.99).")
@click.option("--category", required=True, type=_CATEGORIES, help="Category.")
@click.option("--available/--unavailable", "is_available", default=None, help="On sale or not.")
def product_edit(
    product_id: str,
    title: str,
    description: str,
    price: str,
    category: str,
    is_available: bool | None,
) -> None:
    """Edit one of your products."""
    _, seller = require_user(Role.SELLER)
    handler = UpdateProductHandler(product_repo=product_repository())

    try:
        p = handler.handle(
            product_id=product_id,
            seller_id=seller.id,
            title=title,
            description=description,
            price=price,
            category=category,
            is_available=is_available,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{p.id} updated: '{p.title}' at {p.price} ({p.status})")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_delete(product_id: str) -> None:
    """Delete one of your products."""
    _, seller = require_user(Role.SELLER)
    handler = DeleteProductHandler(product_repo=product_repository())

    try:
        handler.handle(product_id=product_id, seller_id=seller.id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} deleted.")


@click.command("toggle")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_toggle(product_id: str) -> None:
    """Put one of your products on or off sale."""
    _, seller = require_user(Role.SELLER)
    handler = ToggleProductStatusHandler(product_repo=product_repository())

    try:
        p = handler.handle(product_id=product_id, seller_id=seller.id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{p.id} is now {p.status}.")


@click.command("stock")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Units in stock.")
def product_stock(product_id: str, quantity: int) -> None:
    """Set the stock level of one of your products."""
    _, seller = require_user(Role.SELLER)
    handler = SetStockHandler(product_repo=product_repository())

    try:
        stock = handler.handle(product_id=product_id, seller_id=seller.id, quantity=quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Stock for product #{product_id} set to {stock}")
