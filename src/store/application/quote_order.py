"""Application service: Quote Order use case.

Previews what an order would cost with an optional discount and the
chosen delivery. Unlike processing, the quote includes the delivery
cost; nothing is charged or shipped.
"""

from __future__ import annotations

from store.application.dto import ProductSpec, QuoteDTO
from store.application.order_builder import build_order
from store.domain.model.order import Echo
from store.domain.strategy.delivery import Delivery
from store.domain.strategy.discount import Discount


class QuoteOrderHandler:

    def __init__(
        self,
        delivery: Delivery,
        discount: Discount | None,
        echo: Echo,
    ) -> None:
        self._delivery = delivery
        self._discount = discount
        self._echo = echo

    def handle(self, order_id: str, product_specs: list[ProductSpec]) -> QuoteDTO:
        order = build_order(order_id, product_specs, self._echo)

        subtotal = order.total
        discounted = subtotal
        if self._discount is not None:
            discounted = self._discount.apply_discount(order, subtotal)

        delivery_cost = self._delivery.calculate_cost(order)

        return QuoteDTO(
            order_id=order.order_id,
            subtotal=str(subtotal),
            discounted_total=str(discounted),
            delivery_cost=str(delivery_cost),
            grand_total=str(discounted + delivery_cost),
        )
