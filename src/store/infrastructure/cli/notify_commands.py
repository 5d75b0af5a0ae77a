"""CLI command for sending a standalone notification."""

from __future__ import annotations

import click

from store.application.send_notification import NotificationService
from store.domain.exceptions import DomainException
from store.infrastructure.bootstrap import CHANNELS, message_sender


@click.command("notify")
@click.option("--channel", type=click.Choice(CHANNELS), default="email", show_default=True, help="Delivery channel.")
@click.argument("message")
def notify(channel: str, message: str) -> None:
    """Send MESSAGE through the chosen channel."""
    service = NotificationService(message_sender(channel))

    try:
        service.send_notification(message)
    except DomainException as exc:
        raise click.ClickException(str(exc))
