"""Abstract repository for StockRecord lookups."""

from __future__ import annotations

from abc import ABC, abstractmethod

from shopcart.domain.model.stock import StockRecord


class StockRepository(ABC):

    @abstractmethod
    async def get_by_product_id(self, product_id: int) -> StockRecord:
        """Return the stock record for a product.

        Raises CollaboratorError if the lookup fails.
        """
