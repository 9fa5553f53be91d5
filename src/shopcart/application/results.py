"""Result kinds returned by the cart use cases.

Handlers never raise to signal an expected failure; they return a
CartResult whose ``cart`` is the new cart on success and the untouched
input cart otherwise.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from shopcart.domain.model.cart import Cart


class CartOutcome(Enum):
    OK = "OK"
    NOT_FOUND = "NOT_FOUND"
    INSUFFICIENT_STOCK = "INSUFFICIENT_STOCK"
    INVALID_AMOUNT = "INVALID_AMOUNT"
    COLLABORATOR_ERROR = "COLLABORATOR_ERROR"


@dataclass(frozen=True)
class CartResult:

    outcome: CartOutcome
    cart: Cart
    detail: str = ""

    @property
    def ok(self) -> bool:
        return self.outcome is CartOutcome.OK

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def success(cart: Cart) -> CartResult:
        return CartResult(CartOutcome.OK, cart)

    @staticmethod
    def not_found(cart: Cart, detail: str = "") -> CartResult:
        return CartResult(CartOutcome.NOT_FOUND, cart, detail)

    @staticmethod
    def insufficient_stock(cart: Cart, detail: str = "") -> CartResult:
        return CartResult(CartOutcome.INSUFFICIENT_STOCK, cart, detail)

    @staticmethod
    def invalid_amount(cart: Cart, detail: str = "") -> CartResult:
        return CartResult(CartOutcome.INVALID_AMOUNT, cart, detail)

    @staticmethod
    def collaborator_error(cart: Cart, detail: str = "") -> CartResult:
        return CartResult(CartOutcome.COLLABORATOR_ERROR, cart, detail)
