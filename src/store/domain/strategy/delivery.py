"""Abstract delivery strategy.

Delivery both prices and fulfils shipping. The cost is informational:
``Order.process()`` charges the product total only.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from store.domain.model.value_objects import Money

if TYPE_CHECKING:
    from store.domain.model.order import Order


class Delivery(ABC):

    @abstractmethod
    def calculate_cost(self, order: Order) -> Money:
        """Return the shipping cost for *order*."""

    @abstractmethod
    def deliver(self, order: Order) -> None:
        """Ship *order* to the customer."""
