"""StockRecord — the purchasable quantity of a product.

Fetched on demand from the stock API every time a cart quantity grows.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StockRecord:

    product_id: int
    amount: int

    def covers(self, quantity: int) -> bool:
        """True if *quantity* units can be purchased."""
        return self.amount >= quantity
