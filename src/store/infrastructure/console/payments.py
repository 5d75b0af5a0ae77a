"""Console payment adapters.

Nothing is actually charged; each adapter prints the transaction it
would have made and reports success.
"""

from __future__ import annotations

import click

from store.domain.exceptions import ValidationError
from store.domain.model.order import Echo
from store.domain.model.value_objects import Money
from store.domain.strategy.payment import Payment

_VISIBLE_CARD_DIGITS = 4


class CreditCardPayment(Payment):

    def __init__(self, card_number: str, echo: Echo = click.echo) -> None:
        card_number = card_number.strip()
        if len(card_number) < _VISIBLE_CARD_DIGITS:
            raise ValidationError(
                f"Card number must have at least {_VISIBLE_CARD_DIGITS} characters"
            )
        self._card_number = card_number
        self._echo = echo

    @property
    def masked_number(self) -> str:
        return f"{self._card_number[:_VISIBLE_CARD_DIGITS]}..."

    def process_payment(self, amount: Money) -> bool:
        self._echo(f"Card payment {self.masked_number} Amount: {amount}")
        return True


class PayPalPayment(Payment):

    def __init__(self, email: str, echo: Echo = click.echo) -> None:
        if not email or not email.strip():
            raise ValidationError("PayPal email is required")
        self._email = email.strip()
        self._echo = echo

    def process_payment(self, amount: Money) -> bool:
        self._echo(f"PayPal payment for {self._email}... Amount: {amount}")
        return True
