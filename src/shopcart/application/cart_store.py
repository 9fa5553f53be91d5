"""CartStore — owns the shopper's cart and the catalog cache.

Constructed once by the composition root and handed to whatever needs
the cart.  The store reads the persisted cart on construction, applies
the use-case handlers, and after every successful mutation writes the
new cart back.  Failures are reported to the user through the Notifier
and returned to the caller as a CartResult.

Mutating operations are serialized behind one asyncio.Lock that is held
across the stock query, so two concurrent adds of the same product
cannot lose an increment.
"""

from __future__ import annotations

import asyncio
import logging

from shopcart.application import messages
from shopcart.application.add_product import AddProductHandler
from shopcart.application.dto import UpdateProductAmount
from shopcart.application.load_products import LoadProductsHandler
from shopcart.application.notifier import Notifier
from shopcart.application.remove_product import RemoveProductHandler
from shopcart.application.results import CartOutcome, CartResult
from shopcart.application.update_product_amount import UpdateProductAmountHandler
from shopcart.domain.exceptions import StorageError
from shopcart.domain.model.cart import Cart
from shopcart.domain.model.product import Product
from shopcart.domain.repository.cart_repository import CartRepository
from shopcart.domain.repository.product_repository import ProductRepository
from shopcart.domain.repository.stock_repository import StockRepository

logger = logging.getLogger(__name__)


class CartStore:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
        stock_repo: StockRepository,
        notifier: Notifier,
    ) -> None:
        self._cart_repo = cart_repo
        self._notifier = notifier
        self._add = AddProductHandler(stock_repo)
        self._remove = RemoveProductHandler()
        self._update = UpdateProductAmountHandler(stock_repo)
        self._load = LoadProductsHandler(product_repo)
        self._lock = asyncio.Lock()

        self._cart: Cart = cart_repo.load()
        self._products: tuple[Product, ...] = ()

    # --- Public state ---------------------------------------------------------

    @property
    def cart(self) -> Cart:
        return self._cart

    @property
    def products(self) -> tuple[Product, ...]:
        return self._products

    # --- Operations -----------------------------------------------------------

    async def load_products(self) -> None:
        """Replace the catalog cache with a fresh listing.

        CollaboratorError propagates; the previous catalog is kept.
        """
        self._products = await self._load.handle()
        logger.debug("Loaded %d products", len(self._products))

    async def add_product(self, product_id: int) -> CartResult:
        async with self._lock:
            result = await self._add.handle(self._cart, self._products, product_id)
            return self._commit(result, messages.ADD_PRODUCT_FAILED)

    async def remove_product(self, product_id: int) -> CartResult:
        async with self._lock:
            result = self._remove.handle(self._cart, product_id)
            return self._commit(result, messages.REMOVE_PRODUCT_FAILED)

    async def update_product_amount(self, request: UpdateProductAmount) -> CartResult:
        async with self._lock:
            result = await self._update.handle(self._cart, request)
            return self._commit(result, messages.UPDATE_AMOUNT_FAILED)

    # --- Internal helpers -----------------------------------------------------

    def _commit(self, result: CartResult, failure_message: str) -> CartResult:
        """Adopt and persist a successful result, or report a failed one."""
        if not result.ok:
            logger.warning("Cart operation failed (%s): %s", result.outcome.value, result.detail)
            if result.outcome is CartOutcome.INSUFFICIENT_STOCK:
                self._notifier.report_error(messages.OUT_OF_STOCK)
            else:
                self._notifier.report_error(failure_message)
            return result

        self._cart = result.cart
        try:
            self._cart_repo.save(self._cart)
        except StorageError:
            # Persistence is fire-and-forget: the in-memory cart stays current.
            logger.error("Could not persist cart", exc_info=True)
        logger.debug("Cart now holds %d line items", len(self._cart))
        return result
