"""Application service: Load Products use case (query)."""

from __future__ import annotations

from shopcart.domain.model.product import Product
from shopcart.domain.repository.product_repository import ProductRepository


class LoadProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    async def handle(self) -> tuple[Product, ...]:
        """Fetch the full catalog.

        CollaboratorError is not caught here: the caller decides how to
        report a catalog that could not be loaded.
        """
        return tuple(await self._product_repo.list_all())
