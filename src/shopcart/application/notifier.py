"""Abstract sink for user-facing error messages."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Notifier(ABC):

    @abstractmethod
    def report_error(self, message: str) -> None:
        """Show *message* to the user. Fire-and-forget."""
