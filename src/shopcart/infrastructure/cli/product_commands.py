"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from shopcart.application.cart_store import CartStore
from shopcart.domain.model.product import Product
from shopcart.infrastructure.cli.runner import run_with_store


@click.command("products")
def product_list() -> None:
    """List all products in the catalog."""

    async def load(store: CartStore) -> tuple[Product, ...]:
        await store.load_products()
        return store.products

    products = run_with_store(load)

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<30} {'Price':>10}")
    click.echo("-" * 48)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<30} {str(p.price):>10}")
