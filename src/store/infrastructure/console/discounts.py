"""Discount strategies."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

import click

from store.domain.exceptions import ValidationError
from store.domain.model.order import Echo, Order
from store.domain.model.value_objects import Money
from store.domain.strategy.discount import Discount

_HUNDRED = Decimal("100")


class PercentageDiscount(Discount):
    """Takes ``percent`` off the running total (0 to 100 inclusive)."""

    def __init__(self, percent: str | int | Decimal, echo: Echo = click.echo) -> None:
        try:
            value = Decimal(str(percent))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid discount percent: {percent!r}") from exc
        if not value.is_finite():
            raise ValidationError(f"Discount percent must be finite, got {value}")
        if not Decimal("0") <= value <= _HUNDRED:
            raise ValidationError(
                f"Discount percent must be between 0 and 100, got {value}"
            )
        self._percent = value
        self._echo = echo

    @property
    def percent(self) -> Decimal:
        return self._percent

    def apply_discount(self, order: Order, current_total: Money) -> Money:
        discount = current_total * (self._percent / _HUNDRED)
        self._echo(f"Discount {self._percent}%: -{discount}")
        return current_total - discount
