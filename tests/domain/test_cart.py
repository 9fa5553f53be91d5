"""Unit tests for the Cart aggregate."""

import pytest

from shopcart.domain.exceptions import EntityNotFoundError, ValidationError
from shopcart.domain.model.cart import Cart, CartLineItem
from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import Money, Quantity

SNEAKER = Product(id=1, name="Tênis de Caminhada Leve", price=Money.of("179.90"),
                  image_url="https://cdn.example.com/1.jpg")
RUNNER = Product(id=2, name="Tênis VR Caminhada", price=Money.of("139.90"))
TRAIL = Product(id=3, name="Tênis Trail", price=Money.of("219.90"))


def _cart(*pairs: tuple[Product, int]) -> Cart:
    return Cart(tuple(CartLineItem.from_product(p, amount) for p, amount in pairs))


class TestCartQueries:

    def test_empty_by_default(self):
        cart = Cart()
        assert len(cart) == 0
        assert cart.total_items == 0

    def test_find_returns_line_item(self):
        cart = _cart((SNEAKER, 2))
        item = cart.find(1)
        assert item is not None
        assert item.name == SNEAKER.name
        assert item.amount == Quantity(2)

    def test_find_missing_returns_none(self):
        assert _cart((SNEAKER, 1)).find(99) is None

    def test_total_items_sums_amounts(self):
        assert _cart((SNEAKER, 2), (RUNNER, 3)).total_items == 5

    def test_duplicate_product_rejected(self):
        with pytest.raises(ValidationError, match="only once"):
            _cart((SNEAKER, 1), (SNEAKER, 2))


class TestCartWithAdded:

    def test_appends_with_quantity_one(self):
        cart = _cart((SNEAKER, 2)).with_added(RUNNER)
        assert [i.product_id for i in cart] == [1, 2]
        assert cart.find(2).amount == Quantity(1)

    def test_copies_product_metadata(self):
        item = Cart().with_added(SNEAKER).find(1)
        assert item.price == Money.of("179.90")
        assert item.image_url == "https://cdn.example.com/1.jpg"

    def test_leaves_original_untouched(self):
        original = _cart((SNEAKER, 2))
        original.with_added(RUNNER)
        assert len(original) == 1

    def test_already_present_rejected(self):
        with pytest.raises(ValidationError, match="already in the cart"):
            _cart((SNEAKER, 1)).with_added(SNEAKER)


class TestCartWithAmount:

    def test_sets_absolute_amount(self):
        cart = _cart((SNEAKER, 2), (RUNNER, 1)).with_amount(1, 5)
        assert cart.find(1).amount == Quantity(5)
        assert cart.find(2).amount == Quantity(1)

    def test_keeps_order(self):
        cart = _cart((SNEAKER, 1), (RUNNER, 1), (TRAIL, 1)).with_amount(2, 4)
        assert [i.product_id for i in cart] == [1, 2, 3]

    def test_leaves_original_untouched(self):
        original = _cart((SNEAKER, 2))
        original.with_amount(1, 3)
        assert original.find(1).amount == Quantity(2)

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            _cart((SNEAKER, 2)).with_amount(1, 0)

    def test_missing_product_rejected(self):
        with pytest.raises(EntityNotFoundError, match="not in the cart"):
            _cart((SNEAKER, 2)).with_amount(2, 1)


class TestCartWithout:

    def test_removes_only_that_item(self):
        cart = _cart((SNEAKER, 1), (RUNNER, 2), (TRAIL, 3)).without(2)
        assert [i.product_id for i in cart] == [1, 3]
        assert cart.find(3).amount == Quantity(3)

    def test_removing_last_item_leaves_empty_cart(self):
        assert _cart((SNEAKER, 1)).without(1) == Cart()

    def test_missing_product_rejected(self):
        with pytest.raises(EntityNotFoundError, match="not in the cart"):
            _cart((SNEAKER, 1)).without(2)
