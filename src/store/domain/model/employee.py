"""Employees and salary calculation.

Employee kinds are a closed set, so the kind is a tag on the record and
one function computes the salary for every kind.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from store.domain.exceptions import ValidationError
from store.domain.model.value_objects import Money


class EmployeeKind(Enum):
    PERMANENT = "PERMANENT"
    CONTRACT = "CONTRACT"
    INTERN = "INTERN"

    @property
    def multiplier(self) -> Decimal:
        return _SALARY_MULTIPLIERS[self]

    @staticmethod
    def parse(raw: str) -> EmployeeKind:
        try:
            return EmployeeKind(raw.strip().upper())
        except ValueError as exc:
            choices = ", ".join(kind.value.lower() for kind in EmployeeKind)
            raise ValidationError(
                f"Unknown employee kind '{raw}' (expected one of: {choices})"
            ) from exc


_SALARY_MULTIPLIERS = {
    EmployeeKind.PERMANENT: Decimal("1.2"),
    EmployeeKind.CONTRACT: Decimal("1.1"),
    EmployeeKind.INTERN: Decimal("0.8"),
}


@dataclass(frozen=True)
class Employee:

    name: str
    base_salary: Money
    kind: EmployeeKind

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Employee name is required")


def calculate_salary(employee: Employee) -> Money:
    return employee.base_salary * employee.kind.multiplier
