"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from shopcart.application.cart_store import CartStore
from shopcart.application.notifier import Notifier
from shopcart.infrastructure.config import Settings
from shopcart.infrastructure.http.client import create_client
from shopcart.infrastructure.http.http_product_repository import HttpProductRepository
from shopcart.infrastructure.http.http_stock_repository import HttpStockRepository
from shopcart.infrastructure.persistence.file_storage import FileKeyValueStorage
from shopcart.infrastructure.persistence.json_cart_repository import JsonCartRepository


def cart_repository(settings: Settings) -> JsonCartRepository:
    return JsonCartRepository(FileKeyValueStorage(settings.data_dir))


@asynccontextmanager
async def open_cart_store(
    settings: Settings,
    notifier: Notifier,
) -> AsyncIterator[CartStore]:
    """Build a CartStore and close its HTTP client on exit."""
    async with create_client(settings.api_url, settings.api_timeout) as client:
        yield CartStore(
            cart_repo=cart_repository(settings),
            product_repo=HttpProductRepository(client),
            stock_repo=HttpStockRepository(client),
            notifier=notifier,
        )
