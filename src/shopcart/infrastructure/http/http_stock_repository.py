"""httpx-backed implementation of StockRepository."""

from __future__ import annotations

import httpx

from shopcart.domain.exceptions import CollaboratorError
from shopcart.domain.model.stock import StockRecord
from shopcart.domain.repository.stock_repository import StockRepository
from shopcart.infrastructure.http.client import get_json


class HttpStockRepository(StockRepository):

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def get_by_product_id(self, product_id: int) -> StockRecord:
        raw = await get_json(self._client, f"/stock/{product_id}")
        try:
            return StockRecord(product_id=product_id, amount=int(raw["amount"]))
        except (KeyError, TypeError, ValueError, OverflowError) as exc:
            raise CollaboratorError(
                f"Malformed stock record for product #{product_id}"
            ) from exc
