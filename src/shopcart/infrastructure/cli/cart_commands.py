"""CLI commands for the shopper's cart."""

from __future__ import annotations

import click

from shopcart.application.cart_store import CartStore
from shopcart.application.dto import CartDTO, UpdateProductAmount
from shopcart.application.results import CartResult
from shopcart.domain.exceptions import DomainException
from shopcart.infrastructure.bootstrap import cart_repository
from shopcart.infrastructure.cli.runner import run_with_store
from shopcart.infrastructure.config import Settings


def _display_cart(dto: CartDTO) -> None:
    """Shared formatting for displaying the cart."""
    if not dto.items:
        click.echo("Cart is empty.")
        return

    click.echo(f"  {'ID':<6} {'Product':<30} {'Price':>10} {'Qty':>5}")
    click.echo(f"  {'-'*54}")
    for item in dto.items:
        click.echo(
            f"  {item.product_id:<6} {item.name:<30} {item.price:>10} {item.amount:>5}"
        )
    click.echo(f"  {'-'*54}")
    click.echo(f"  {'Items':<37} {dto.total_items:>16}")


def _finish(result: CartResult) -> None:
    """Print the cart after a successful change, or exit with status 1.

    The notifier has already printed the reason for a failure.
    """
    if not result.ok:
        raise SystemExit(1)
    _display_cart(CartDTO.from_cart(result.cart))


@click.command("show")
def cart_show() -> None:
    """Show the saved cart."""
    try:
        cart = cart_repository(Settings.from_env()).load()
    except DomainException as exc:
        raise click.ClickException(str(exc))
    _display_cart(CartDTO.from_cart(cart))


@click.command("add")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def cart_add(product_id: int) -> None:
    """Add one unit of a product to the cart."""

    async def add(store: CartStore) -> CartResult:
        # New items are resolved against a freshly loaded catalog
        await store.load_products()
        return await store.add_product(product_id)

    _finish(run_with_store(add))


@click.command("remove")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def cart_remove(product_id: int) -> None:
    """Remove a product from the cart."""

    async def remove(store: CartStore) -> CartResult:
        return await store.remove_product(product_id)

    _finish(run_with_store(remove))


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--amount", required=True, type=int, help="New quantity.")
def cart_update(product_id: int, amount: int) -> None:
    """Set the quantity of a product already in the cart."""

    async def update(store: CartStore) -> CartResult:
        return await store.update_product_amount(
            UpdateProductAmount(product_id=product_id, amount=amount)
        )

    _finish(run_with_store(update))
