"""Abstract durable key-value storage.

Values are opaque byte strings; what they mean is up to the caller.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class KeyValueStorage(ABC):

    @abstractmethod
    def read(self, key: str) -> bytes | None:
        """Return the value stored under *key*, or None if absent."""

    @abstractmethod
    def write(self, key: str, data: bytes) -> None:
        """Store *data* under *key*, replacing any previous value.

        Raises StorageError if the value cannot be written.
        """
