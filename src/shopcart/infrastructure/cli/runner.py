"""Bridges synchronous click commands to the async CartStore."""

from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, TypeVar

import click

from shopcart.application.cart_store import CartStore
from shopcart.domain.exceptions import DomainException
from shopcart.infrastructure.bootstrap import open_cart_store
from shopcart.infrastructure.cli.click_notifier import ClickNotifier
from shopcart.infrastructure.config import Settings

T = TypeVar("T")


def run_with_store(operation: Callable[[CartStore], Awaitable[T]]) -> T:
    """Open a CartStore, await *operation* on it and return its result."""

    async def _main() -> T:
        async with open_cart_store(Settings.from_env(), ClickNotifier()) as store:
            return await operation(store)

    try:
        return asyncio.run(_main())
    except DomainException as exc:
        raise click.ClickException(str(exc))
