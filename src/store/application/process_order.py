"""Application service: Process Order use case.

Builds the order from product specs, attaches whatever strategies the
caller chose and lets the Order aggregate run the processing steps.
"""

from __future__ import annotations

from store.application.dto import OrderDTO, ProductDTO, ProductSpec
from store.application.order_builder import build_order
from store.domain.model.order import Echo, Order
from store.domain.strategy.delivery import Delivery
from store.domain.strategy.notification import Notifier
from store.domain.strategy.payment import Payment


class ProcessOrderHandler:

    def __init__(
        self,
        payment: Payment | None,
        delivery: Delivery | None,
        notifiers: list[Notifier],
        echo: Echo,
    ) -> None:
        self._payment = payment
        self._delivery = delivery
        self._notifiers = list(notifiers)
        self._echo = echo

    def handle(self, order_id: str, product_specs: list[ProductSpec]) -> OrderDTO:
        """Process a new order.

        Steps:
        1. Build Products from the specs (fails on a bad price).
        2. Attach payment, delivery and notifiers to the Order.
        3. Let the Order charge, ship and notify.
        4. Return a DTO.
        """
        order = build_order(order_id, product_specs, self._echo)
        order.payment = self._payment
        order.delivery = self._delivery
        for notifier in self._notifiers:
            order.add_notification(notifier)

        order.process()

        return self._to_dto(order)

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_dto(order: Order) -> OrderDTO:
        return OrderDTO(
            order_id=order.order_id,
            products=[
                ProductDTO(id=product.id, name=product.name, price=str(product.price))
                for product in order.products
            ],
            total=str(order.total),
            notifications_sent=len(order.notifiers),
        )
