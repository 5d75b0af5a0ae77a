"""Console delivery adapters with fixed shipping costs."""

from __future__ import annotations

from decimal import Decimal

import click

from store.domain.model.order import Echo, Order
from store.domain.model.value_objects import Money
from store.domain.strategy.delivery import Delivery

COURIER_COST = Money(Decimal("10.00"))
PICKUP_COST = Money(Decimal("0.00"))


class CourierDelivery(Delivery):

    def __init__(self, echo: Echo = click.echo) -> None:
        self._echo = echo

    def calculate_cost(self, order: Order) -> Money:
        return COURIER_COST

    def deliver(self, order: Order) -> None:
        self._echo(f"Courier delivery of order {order.order_id}")


class PickUpPointDelivery(Delivery):

    def __init__(self, echo: Echo = click.echo) -> None:
        self._echo = echo

    def calculate_cost(self, order: Order) -> Money:
        return PICKUP_COST

    def deliver(self, order: Order) -> None:
        self._echo(f"Pick-up point delivery of order {order.order_id}")
