"""Shared helper: turn product specs into a populated Order."""

from __future__ import annotations

from store.application.dto import ProductSpec
from store.domain.model.order import Echo, Order
from store.domain.model.product import Product
from store.domain.model.value_objects import Money


def build_order(order_id: str, product_specs: list[ProductSpec], echo: Echo) -> Order:
    """Create an Order holding one Product per spec.

    Product IDs are assigned sequentially ("1", "2", ...) in the order given.
    """
    order = Order(order_id=order_id, echo=echo)
    for index, spec in enumerate(product_specs, start=1):
        order.add_product(
            Product(id=str(index), name=spec.name, price=Money.of(spec.price))
        )
    return order
