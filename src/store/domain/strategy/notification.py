"""Abstract notification channel."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Notifier(ABC):

    @abstractmethod
    def send_notification(self, message: str) -> None:
        """Deliver *message* to this notifier's recipient."""
