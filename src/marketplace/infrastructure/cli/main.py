import click

from marketplace.infrastructure.cli.auth_commands import (
    auth_login,
    auth_logout,
    auth_register,
    auth_whoami,
)
from marketplace.infrastructure.cli.cart_commands import (
    cart_add,
    cart_remove,
    cart_show,
    cart_update,
)
from marketplace.infrastructure.cli.order_commands import (
    order_checkout,
    order_list,
    order_show,
)
from marketplace.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_edit,
    product_list,
    product_show,
    product_stock,
    product_toggle,
)
from marketplace.infrastructure.cli.seller_commands import (
    seller_analytics,
    seller_dashboard,
    seller_inventory,
    seller_order,
    seller_order_status,
    seller_orders,
    seller_products,
    seller_profile,
    seller_profile_update,
)
from marketplace.infrastructure.config import Settings
from marketplace.infrastructure.logging_config import configure_logging


@click.group()
def cli() -> None:
    """Marketplace: buy and sell from the command line."""
    configure_logging(Settings.from_env())


@cli.group()
def auth() -> None:
    """Register, log in and out."""


@cli.group()
def product() -> None:
    """Browse and manage products."""


@cli.group()
def cart() -> None:
    """Manage your shopping cart."""


@cli.group()
def order() -> None:
    """Check out and review your orders."""


@cli.group()
def seller() -> None:
    """Seller back office."""


# Register subcommands
auth.add_command(auth_login)
auth.add_command(auth_logout)
auth.add_command(auth_register)
auth.add_command(auth_whoami)
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_edit)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_stock)
product.add_command(product_toggle)
cart.add_command(cart_add)
cart.add_command(cart_remove)
cart.add_command(cart_show)
cart.add_command(cart_update)
order.add_command(order_checkout)
order.add_command(order_list)
order.add_command(order_show)
seller.add_command(seller_analytics)
seller.add_command(seller_dashboard)
seller.add_command(seller_inventory)
seller.add_command(seller_order)
seller.add_command(seller_order_status)
seller.add_command(seller_orders)
seller.add_command(seller_products)
seller.add_command(seller_profile)
seller.add_command(seller_profile_update)
