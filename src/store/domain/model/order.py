"""Order aggregate — the core of the domain.

The Order owns its products and notifiers and orchestrates processing
by delegating to whichever strategies the caller attached.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from store.domain.exceptions import ValidationError
from store.domain.model.product import Product
from store.domain.model.value_objects import Money
from store.domain.strategy.delivery import Delivery
from store.domain.strategy.notification import Notifier
from store.domain.strategy.payment import Payment

Echo = Callable[[str], None]


def _silent(line: str) -> None:
    pass


@dataclass
class Order:
    """Aggregate root for a single purchase.

    ``payment`` and ``delivery`` are optional collaborators; a missing one
    is skipped during processing, not treated as an error.
    """

    order_id: str
    products: list[Product] = field(default_factory=list)
    payment: Payment | None = None
    delivery: Delivery | None = None
    notifiers: list[Notifier] = field(default_factory=list)
    echo: Echo = field(default=_silent, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.order_id or not self.order_id.strip():
            raise ValidationError("Order ID is required")
        # The order owns its lists; never alias the caller's.
        self.products = list(self.products)
        self.notifiers = list(self.notifiers)

    # --- Population -----------------------------------------------------------

    def add_product(self, product: Product) -> None:
        self.products.append(product)

    def add_notification(self, notifier: Notifier) -> None:
        self.notifiers.append(notifier)

    # --- Processing -----------------------------------------------------------

    def process(self) -> None:
        """Charge, ship and notify, in that order.

        The amount charged is the product total only; delivery cost is
        not included. Every step runs regardless of the previous step's
        outcome, and calling this twice repeats all side effects.
        """
        total = self.total
        self.echo(f"=== PROCESSING ORDER {self.order_id} ===")
        self.echo(f"Products: {self.product_count}")
        self.echo(f"Total: {total}")

        if self.payment is not None:
            self.payment.process_payment(total)

        if self.delivery is not None:
            self.delivery.deliver(self)

        message = self.notification_message
        for notifier in self.notifiers:
            notifier.send_notification(message)

    # --- Computed properties --------------------------------------------------

    @property
    def total(self) -> Money:
        result = Money.zero()
        for product in self.products:
            result = result + product.price
        return result

    @property
    def product_count(self) -> int:
        return len(self.products)

    @property
    def notification_message(self) -> str:
        return f"Order {self.order_id} processed!"
