"""Domain service: Stock Check.

Answers whether a product can be held in the cart at a given quantity.
Stock is never cached: every quantity-increasing operation asks the
stock repository again, since availability changes between requests.
"""

from __future__ import annotations

import logging

from shopcart.domain.repository.stock_repository import StockRepository

logger = logging.getLogger(__name__)


class StockCheckService:

    def __init__(self, stock_repo: StockRepository) -> None:
        self._stock_repo = stock_repo

    async def is_available(self, product_id: int, quantity: int) -> bool:
        """Return True if *quantity* units of the product are in stock.

        CollaboratorError from the repository propagates to the caller.
        """
        stock = await self._stock_repo.get_by_product_id(product_id)
        if not stock.covers(quantity):
            logger.info(
                "Stock for product #%s is %s, %s requested",
                product_id, stock.amount, quantity,
            )
            return False
        return True
