"""Integration tests for the RemoveProduct use case."""

import pytest

from shopcart.application import messages
from shopcart.application.cart_store import CartStore
from shopcart.application.remove_product import RemoveProductHandler
from shopcart.application.results import CartOutcome
from shopcart.domain.model.cart import Cart, CartLineItem
from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import Money
from shopcart.infrastructure.persistence.json_cart_repository import JsonCartRepository
from tests.fakes import (
    FakeProductRepository,
    FakeStockRepository,
    RecordingNotifier,
    seeded_storage,
)


def _cart(*ids: int) -> Cart:
    return Cart(tuple(
        CartLineItem.from_product(
            Product(id=i, name=f"Tênis {i}", price=Money.of("100.00"))
        )
        for i in ids
    ))


def _setup(cart: Cart):
    storage = seeded_storage(cart)
    stock_repo = FakeStockRepository()
    notifier = RecordingNotifier()
    store = CartStore(
        cart_repo=JsonCartRepository(storage),
        product_repo=FakeProductRepository(),
        stock_repo=stock_repo,
        notifier=notifier,
    )
    return store, storage, stock_repo, notifier


class TestRemoveProductHandler:

    def test_removes_existing_item(self):
        result = RemoveProductHandler().handle(_cart(1, 2), 1)
        assert result.ok
        assert result.cart == _cart(2)

    def test_missing_item_is_not_found(self):
        cart = _cart(1)
        result = RemoveProductHandler().handle(cart, 2)
        assert result.outcome is CartOutcome.NOT_FOUND
        assert result.cart is cart


class TestRemoveProduct:

    @pytest.mark.asyncio
    async def test_single_item_cart_becomes_empty(self):
        store, storage, _, notifier = _setup(_cart(1))

        result = await store.remove_product(1)

        assert result.ok
        assert store.cart == Cart()
        assert JsonCartRepository(storage).load() == Cart()
        assert notifier.messages == []

    @pytest.mark.asyncio
    async def test_removes_only_the_requested_item(self):
        store, _, _, _ = _setup(_cart(1, 2, 3))

        await store.remove_product(2)

        assert [i.product_id for i in store.cart] == [1, 3]

    @pytest.mark.asyncio
    async def test_missing_item_reported_and_cart_unchanged(self):
        store, storage, _, notifier = _setup(_cart(1))

        result = await store.remove_product(2)

        assert result.outcome is CartOutcome.NOT_FOUND
        assert store.cart == _cart(1)
        assert storage.writes == 0
        assert notifier.messages == [messages.REMOVE_PRODUCT_FAILED]

    @pytest.mark.asyncio
    async def test_removal_does_not_query_stock(self):
        store, _, stock_repo, _ = _setup(_cart(1))

        await store.remove_product(1)

        assert stock_repo.calls == []
