"""Abstract discount strategy.

Not applied by ``Order.process()``; quotes use it to preview a
discounted total.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from store.domain.model.value_objects import Money

if TYPE_CHECKING:
    from store.domain.model.order import Order


class Discount(ABC):

    @abstractmethod
    def apply_discount(self, order: Order, current_total: Money) -> Money:
        """Return *current_total* reduced by this discount."""
