"""JSON implementation of CartRepository on top of KeyValueStorage.

The cart is stored as one UTF-8 JSON array under a fixed key, in the
same shape the web storefront keeps in its local storage.
"""

from __future__ import annotations

import json
import logging
from decimal import Decimal, InvalidOperation

from shopcart.domain.exceptions import StorageError, ValidationError
from shopcart.domain.model.cart import Cart, CartLineItem
from shopcart.domain.model.value_objects import Money, Quantity
from shopcart.domain.repository.cart_repository import CartRepository
from shopcart.domain.repository.key_value_storage import KeyValueStorage

logger = logging.getLogger(__name__)

CART_STORAGE_KEY = "@RocketShoes:cart"


class JsonCartRepository(CartRepository):

    def __init__(self, storage: KeyValueStorage, key: str = CART_STORAGE_KEY) -> None:
        self._storage = storage
        self._key = key

    # --- CartRepository interface ---------------------------------------------

    def load(self) -> Cart:
        try:
            data = self._storage.read(self._key)
        except StorageError as exc:
            logger.warning("Cannot read cart snapshot, starting empty: %s", exc)
            return Cart()
        if not data:
            return Cart()
        try:
            return self._to_domain(json.loads(data.decode("utf-8")))
        except (ValueError, KeyError, TypeError, OverflowError,
                InvalidOperation, ValidationError) as exc:
            # Corrupted snapshot - start over with an empty cart
            logger.warning("Discarding unreadable cart snapshot: %s", exc)
            return Cart()

    def save(self, cart: Cart) -> None:
        payload = json.dumps(self._to_raw(cart), indent=2)
        self._storage.write(self._key, payload.encode("utf-8"))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(cart: Cart) -> list[dict]:
        return [
            {
                "id": item.product_id,
                "name": item.name,
                "price": str(item.price.amount),
                "currency": item.price.currency,
                "imageUrl": item.image_url,
                "amount": item.amount.value,
            }
            for item in cart
        ]

    @staticmethod
    def _to_domain(raw: list[dict]) -> Cart:
        if not isinstance(raw, list):
            raise TypeError(f"Expected a JSON array, got {type(raw).__name__}")
        return Cart(tuple(
            CartLineItem(
                product_id=int(i["id"]),
                name=i["name"],
                price=Money(Decimal(str(i["price"])), i.get("currency", "USD")),
                image_url=i.get("imageUrl", ""),
                amount=Quantity(i["amount"]),
            )
            for i in raw
        ))
