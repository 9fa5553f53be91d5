"""Product as listed by the catalog API.

Products are read-only to the cart: they are only used as a source of
metadata when an item is first put into the cart.
"""

from __future__ import annotations

from dataclasses import dataclass

from shopcart.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    """A product in the catalog."""

    id: int
    name: str
    price: Money
    image_url: str = ""
