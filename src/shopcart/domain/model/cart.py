"""Cart aggregate — the shopper's selected products.

The Cart is an immutable value.  Every operation returns a new Cart
built from the old one, so a snapshot held by a caller (or one being
persisted) is never changed behind its back.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterator

from shopcart.domain.exceptions import EntityNotFoundError, ValidationError
from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class CartLineItem:
    """A product snapshot plus the selected quantity."""

    product_id: int
    name: str
    price: Money
    image_url: str
    amount: Quantity

    @staticmethod
    def from_product(product: Product, amount: int = 1) -> CartLineItem:
        return CartLineItem(
            product_id=product.id,
            name=product.name,
            price=product.price,
            image_url=product.image_url,
            amount=Quantity(amount),
        )


@dataclass(frozen=True)
class Cart:
    """Ordered collection of line items, in insertion order.

    Invariants:
    - a product id appears at most once
    - every line item holds a positive quantity
    """

    items: tuple[CartLineItem, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        ids = [item.product_id for item in self.items]
        if len(ids) != len(set(ids)):
            raise ValidationError("A product can appear only once in the cart")

    # --- Queries --------------------------------------------------------------

    def find(self, product_id: int) -> CartLineItem | None:
        for item in self.items:
            if item.product_id == product_id:
                return item
        return None

    def contains(self, product_id: int) -> bool:
        return self.find(product_id) is not None

    @property
    def total_items(self) -> int:
        return sum(item.amount.value for item in self.items)

    def __iter__(self) -> Iterator[CartLineItem]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    # --- Transformations ------------------------------------------------------

    def with_added(self, product: Product) -> Cart:
        """Append *product* as a new line item with quantity 1."""
        if self.contains(product.id):
            raise ValidationError(f"Product #{product.id} is already in the cart")
        return Cart(self.items + (CartLineItem.from_product(product),))

    def with_amount(self, product_id: int, amount: int) -> Cart:
        """Set the absolute quantity of an existing line item."""
        self._require(product_id)
        quantity = Quantity(amount)
        return Cart(tuple(
            replace(item, amount=quantity) if item.product_id == product_id else item
            for item in self.items
        ))

    def without(self, product_id: int) -> Cart:
        """Drop the line item for *product_id*, leaving the others in place."""
        self._require(product_id)
        return Cart(tuple(
            item for item in self.items if item.product_id != product_id
        ))

    # --- Internal helpers -----------------------------------------------------

    def _require(self, product_id: int) -> CartLineItem:
        item = self.find(product_id)
        if item is None:
            raise EntityNotFoundError(f"Product #{product_id} is not in the cart")
        return item
