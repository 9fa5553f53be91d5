"""httpx-backed implementation of ProductRepository."""

from __future__ import annotations

import httpx

from shopcart.domain.exceptions import CollaboratorError, ValidationError
from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import Money
from shopcart.domain.repository.product_repository import ProductRepository
from shopcart.infrastructure.http.client import get_json


class HttpProductRepository(ProductRepository):

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    # --- ProductRepository interface ------------------------------------------

    async def list_all(self) -> list[Product]:
        raw = await get_json(self._client, "/products")
        if not isinstance(raw, list):
            raise CollaboratorError("GET /products did not return a list")
        try:
            return [self._to_domain(item) for item in raw]
        except (KeyError, TypeError, ValueError, OverflowError, ValidationError) as exc:
            raise CollaboratorError(f"Malformed product in listing: {exc}") from exc

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        # The storefront API still serves the older "title"/"image" names
        return Product(
            id=int(raw["id"]),
            name=raw["name"] if "name" in raw else raw["title"],
            price=Money.of(raw["price"]),
            image_url=raw.get("imageUrl", raw.get("image", "")),
        )
