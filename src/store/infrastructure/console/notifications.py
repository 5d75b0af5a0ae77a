"""Console notifiers — one per recipient channel."""

from __future__ import annotations

import click

from store.domain.exceptions import ValidationError
from store.domain.model.order import Echo
from store.domain.strategy.notification import Notifier


def _require_recipient(value: str, label: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{label} is required")
    return value.strip()


class EmailNotification(Notifier):

    def __init__(self, email: str, echo: Echo = click.echo) -> None:
        self._email = _require_recipient(email, "Email address")
        self._echo = echo

    @property
    def recipient(self) -> str:
        return self._email

    def send_notification(self, message: str) -> None:
        self._echo(f"Email to {self._email}: {message}")


class SmsNotification(Notifier):

    def __init__(self, phone: str, echo: Echo = click.echo) -> None:
        self._phone = _require_recipient(phone, "Phone number")
        self._echo = echo

    @property
    def recipient(self) -> str:
        return self._phone

    def send_notification(self, message: str) -> None:
        self._echo(f"SMS to {self._phone}: {message}")
