import click

from shopcart.infrastructure.cli.cart_commands import (
    cart_add,
    cart_remove,
    cart_show,
    cart_update,
)
from shopcart.infrastructure.cli.product_commands import product_list
from shopcart.infrastructure.config import Settings
from shopcart.infrastructure.logging import configure_logging


@click.group()
def cli() -> None:
    """shopcart — shopping cart for the storefront API"""
    configure_logging(Settings.from_env().log_level)


@cli.group()
def cart() -> None:
    """Manage the cart."""


# Register subcommands
cart.add_command(cart_add)
cart.add_command(cart_remove)
cart.add_command(cart_show)
cart.add_command(cart_update)
cli.add_command(product_list)
