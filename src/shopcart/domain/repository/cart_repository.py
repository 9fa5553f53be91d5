"""Abstract repository for the Cart snapshot."""

from __future__ import annotations

from abc import ABC, abstractmethod

from shopcart.domain.model.cart import Cart


class CartRepository(ABC):

    @abstractmethod
    def load(self) -> Cart:
        """Return the persisted cart, or an empty one if there is none."""

    @abstractmethod
    def save(self, cart: Cart) -> None:
        """Persist the full cart, replacing the previous snapshot."""
