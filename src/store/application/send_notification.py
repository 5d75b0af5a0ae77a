"""Application service: send a message through an injected sender.

The service depends only on the MessageSender abstraction; the channel
is decided by whoever constructs it.
"""

from __future__ import annotations

from store.domain.exceptions import ValidationError
from store.domain.strategy.message_sender import MessageSender


class NotificationService:

    def __init__(self, sender: MessageSender) -> None:
        self._sender = sender

    def send_notification(self, message: str) -> None:
        if not message or not message.strip():
            raise ValidationError("Message must not be empty")
        self._sender.send(message)
