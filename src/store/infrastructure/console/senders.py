"""Console message senders for NotificationService."""

from __future__ import annotations

import click

from store.domain.model.order import Echo
from store.domain.strategy.message_sender import MessageSender


class EmailSender(MessageSender):

    def __init__(self, echo: Echo = click.echo) -> None:
        self._echo = echo

    def send(self, message: str) -> None:
        self._echo(f"Email sent: {message}")


class SmsSender(MessageSender):

    def __init__(self, echo: Echo = click.echo) -> None:
        self._echo = echo

    def send(self, message: str) -> None:
        self._echo(f"SMS sent: {message}")
