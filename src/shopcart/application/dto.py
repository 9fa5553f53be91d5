"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from shopcart.domain.model.cart import Cart


@dataclass(frozen=True)
class UpdateProductAmount:
    """Input: the absolute quantity wanted for a product already in the cart."""

    product_id: int
    amount: int


@dataclass(frozen=True)
class CartLineItemDTO:
    """Output: a single line item as displayed to the user."""

    product_id: int
    name: str
    price: str  # formatted, e.g. "$179.90"
    amount: int


@dataclass(frozen=True)
class CartDTO:
    """Output: the whole cart as displayed to the user."""

    items: list[CartLineItemDTO]
    total_items: int

    @staticmethod
    def from_cart(cart: Cart) -> CartDTO:
        return CartDTO(
            items=[
                CartLineItemDTO(
                    product_id=item.product_id,
                    name=item.name,
                    price=str(item.price),
                    amount=item.amount.value,
                )
                for item in cart
            ],
            total_items=cart.total_items,
        )
