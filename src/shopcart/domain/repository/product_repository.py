"""Abstract repository for the product catalog.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (HTTP, in-memory)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from shopcart.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    async def list_all(self) -> list[Product]:
        """Return every product in the catalog.

        Raises CollaboratorError if the catalog cannot be fetched.
        """
