"""Application service: Update Product Amount use case.

Sets the absolute quantity of a product already in the cart.  The
target must be positive; removing a product goes through the Remove
Product use case instead.
"""

from __future__ import annotations

from shopcart.application.dto import UpdateProductAmount
from shopcart.application.results import CartResult
from shopcart.domain.exceptions import CollaboratorError
from shopcart.domain.model.cart import Cart
from shopcart.domain.repository.stock_repository import StockRepository
from shopcart.domain.service.stock_check_service import StockCheckService


class UpdateProductAmountHandler:

    def __init__(self, stock_repo: StockRepository) -> None:
        self._stock_check = StockCheckService(stock_repo)

    async def handle(self, cart: Cart, request: UpdateProductAmount) -> CartResult:
        if request.amount <= 0:
            return CartResult.invalid_amount(
                cart, f"Amount must be positive, got {request.amount}"
            )

        if not cart.contains(request.product_id):
            return CartResult.not_found(
                cart, f"Product #{request.product_id} is not in the cart"
            )

        try:
            available = await self._stock_check.is_available(
                request.product_id, request.amount
            )
        except CollaboratorError as exc:
            return CartResult.collaborator_error(cart, str(exc))

        if not available:
            return CartResult.insufficient_stock(
                cart,
                f"Cannot hold {request.amount} of product #{request.product_id}",
            )
        return CartResult.success(cart.with_amount(request.product_id, request.amount))
