"""Abstract low-level message sender used by NotificationService."""

from __future__ import annotations

from abc import ABC, abstractmethod


class MessageSender(ABC):

    @abstractmethod
    def send(self, message: str) -> None:
        """Send *message* over this sender's channel."""
