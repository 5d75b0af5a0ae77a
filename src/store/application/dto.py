"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductSpec:
    """Input: a product to put in the order (name + price as text)."""

    name: str
    price: str


@dataclass(frozen=True)
class EmployeeSpec:
    """Input: an employee to run through payroll."""

    name: str
    kind: str
    base_salary: str


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    price: str  # formatted, e.g. "$999.99"


@dataclass(frozen=True)
class OrderDTO:
    """Output: a processed order as displayed to the user."""

    order_id: str
    products: list[ProductDTO]
    total: str
    notifications_sent: int


@dataclass(frozen=True)
class QuoteDTO:
    """Output: what an order would cost, nothing charged."""

    order_id: str
    subtotal: str
    discounted_total: str
    delivery_cost: str
    grand_total: str


@dataclass(frozen=True)
class PayslipDTO:
    name: str
    kind: str
    base_salary: str
    salary: str


@dataclass(frozen=True)
class PayrollDTO:
    payslips: list[PayslipDTO]
    total: str
