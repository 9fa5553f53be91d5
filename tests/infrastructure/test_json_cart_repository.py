"""Tests for the JSON cart snapshot stored in key-value storage."""

import json

import pytest

from shopcart.domain.model.cart import Cart, CartLineItem
from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import Money, Quantity
from shopcart.infrastructure.persistence.json_cart_repository import (
    CART_STORAGE_KEY,
    JsonCartRepository,
)
from shopcart.infrastructure.persistence.file_storage import FileKeyValueStorage
from tests.fakes import MemoryKeyValueStorage

SNEAKER = Product(id=1, name="Tênis de Caminhada Leve", price=Money.of("179.90"),
                  image_url="https://cdn.example.com/1.jpg")
RUNNER = Product(id=2, name="Tênis VR Caminhada", price=Money.of("139.90"))


class TestSave:

    def test_writes_json_array_under_fixed_key(self):
        storage = MemoryKeyValueStorage()
        cart = Cart((CartLineItem.from_product(SNEAKER, 2),))

        JsonCartRepository(storage).save(cart)

        raw = json.loads(storage.values[CART_STORAGE_KEY].decode("utf-8"))
        assert raw == [{
            "id": 1,
            "name": "Tênis de Caminhada Leve",
            "price": "179.90",
            "currency": "USD",
            "imageUrl": "https://cdn.example.com/1.jpg",
            "amount": 2,
        }]

    def test_keeps_insertion_order(self):
        storage = MemoryKeyValueStorage()
        repo = JsonCartRepository(storage)
        cart = Cart((
            CartLineItem.from_product(RUNNER, 1),
            CartLineItem.from_product(SNEAKER, 3),
        ))

        repo.save(cart)

        assert [i.product_id for i in repo.load()] == [2, 1]
        assert repo.load() == cart

    def test_custom_key(self):
        storage = MemoryKeyValueStorage()
        JsonCartRepository(storage, key="other").save(Cart())
        assert list(storage.values) == ["other"]


class TestLoad:

    def test_absent_key_gives_empty_cart(self):
        assert JsonCartRepository(MemoryKeyValueStorage()).load() == Cart()

    def test_reads_storefront_snapshot(self):
        # Snapshot written by the web storefront: numeric price, no currency
        data = json.dumps([
            {"id": 3, "name": "Tênis Trail", "price": 219.9,
             "imageUrl": "https://cdn.example.com/3.jpg", "amount": 4},
        ]).encode("utf-8")
        storage = MemoryKeyValueStorage({CART_STORAGE_KEY: data})

        cart = JsonCartRepository(storage).load()

        item = cart.find(3)
        assert item.price == Money.of("219.9")
        assert item.amount == Quantity(4)
        assert item.image_url == "https://cdn.example.com/3.jpg"

    @pytest.mark.parametrize("data", [
        b"{not json",
        b"\xff\xfe",
        b'{"id": 1}',
        b'[{"id": 1}]',
        b'[{"id": "x", "name": "A", "price": "1", "amount": 1}]',
        b'[{"id": 1, "name": "A", "price": "1", "amount": 0}]',
        b'[{"id": 1, "name": "A", "price": "abc", "amount": 1}]',
        b'[{"id": 1, "name": "A", "price": "1", "amount": 1},'
        b' {"id": 1, "name": "A", "price": "1", "amount": 2}]',
    ])
    def test_unreadable_snapshot_gives_empty_cart(self, data):
        storage = MemoryKeyValueStorage({CART_STORAGE_KEY: data})
        assert JsonCartRepository(storage).load() == Cart()

    def test_infinite_id_gives_empty_cart(self):
        data = b'[{"id": 1e400, "name": "A", "price": "1", "amount": 1}]'
        storage = MemoryKeyValueStorage({CART_STORAGE_KEY: data})
        assert JsonCartRepository(storage).load() == Cart()

    def test_storage_read_failure_gives_empty_cart(self, tmp_path):
        # A directory where the snapshot file should be
        (tmp_path / "%40RocketShoes%3Acart.json").mkdir()
        assert JsonCartRepository(FileKeyValueStorage(tmp_path)).load() == Cart()
