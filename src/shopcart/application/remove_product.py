"""Application service: Remove Product use case."""

from __future__ import annotations

from shopcart.application.results import CartResult
from shopcart.domain.model.cart import Cart


class RemoveProductHandler:

    def handle(self, cart: Cart, product_id: int) -> CartResult:
        if not cart.contains(product_id):
            return CartResult.not_found(cart, f"Product #{product_id} is not in the cart")
        return CartResult.success(cart.without(product_id))
