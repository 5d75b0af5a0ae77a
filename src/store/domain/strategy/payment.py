"""Abstract payment strategy."""

from __future__ import annotations

from abc import ABC, abstractmethod

from store.domain.model.value_objects import Money


class Payment(ABC):

    @abstractmethod
    def process_payment(self, amount: Money) -> bool:
        """Charge *amount* and return whether the charge succeeded."""
