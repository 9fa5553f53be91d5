"""Application service: Add Product use case.

A product already in the cart gets one more unit, provided the stock
API confirms it.  A product not yet in the cart is taken from the
catalog with quantity 1.
"""

from __future__ import annotations

from typing import Sequence

from shopcart.application.results import CartResult
from shopcart.domain.exceptions import CollaboratorError
from shopcart.domain.model.cart import Cart
from shopcart.domain.model.product import Product
from shopcart.domain.repository.stock_repository import StockRepository
from shopcart.domain.service.stock_check_service import StockCheckService


class AddProductHandler:

    def __init__(self, stock_repo: StockRepository) -> None:
        self._stock_check = StockCheckService(stock_repo)

    async def handle(
        self,
        cart: Cart,
        catalog: Sequence[Product],
        product_id: int,
    ) -> CartResult:
        existing = cart.find(product_id)

        if existing is not None:
            wanted = existing.amount.increment().value
            try:
                available = await self._stock_check.is_available(product_id, wanted)
            except CollaboratorError as exc:
                return CartResult.collaborator_error(cart, str(exc))
            if not available:
                return CartResult.insufficient_stock(
                    cart, f"Cannot hold {wanted} of product #{product_id}"
                )
            return CartResult.success(cart.with_amount(product_id, wanted))

        # New line items come from the last loaded catalog only
        product = next((p for p in catalog if p.id == product_id), None)
        if product is None:
            return CartResult.not_found(
                cart, f"Product #{product_id} is not in the loaded catalog"
            )
        return CartResult.success(cart.with_added(product))
