"""Product value record.

A product is captured by the order that contains it. It never changes
after construction, so orders can hold a reference safely.
"""

from __future__ import annotations

from dataclasses import dataclass

from store.domain.exceptions import ValidationError
from store.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:

    id: str
    name: str
    price: Money

    def __post_init__(self) -> None:
        if not self.id or not self.id.strip():
            raise ValidationError("Product ID is required")
        if not self.name or not self.name.strip():
            raise ValidationError("Product name is required")
        if not isinstance(self.price, Money):
            raise ValidationError(
                f"Product price must be Money, got {type(self.price).__name__}"
            )
