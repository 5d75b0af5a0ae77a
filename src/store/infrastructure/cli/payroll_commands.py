"""CLI command for the payroll calculator."""

from __future__ import annotations

import click

from store.application.calculate_payroll import CalculatePayrollHandler
from store.application.dto import EmployeeSpec
from store.domain.exceptions import DomainException


def _parse_employees(raw: tuple[str, ...]) -> list[EmployeeSpec]:
    """Parse ('Alice:permanent:1000', ...) into EmployeeSpec list."""
    specs: list[EmployeeSpec] = []
    for entry in raw:
        parts = [part.strip() for part in entry.split(":")]
        if len(parts) != 3:
            raise click.BadParameter(
                f"Invalid employee format '{entry}'. Expected 'Name:Kind:BaseSalary'."
            )
        name, kind, base_salary = parts
        specs.append(EmployeeSpec(name=name, kind=kind, base_salary=base_salary))
    return specs


@click.command("payroll")
@click.option(
    "--employee",
    "employees",
    multiple=True,
    required=True,
    help="Employee as 'Name:Kind:BaseSalary' (kind: permanent, contract, intern). Repeatable.",
)
def payroll(employees: tuple[str, ...]) -> None:
    """Calculate salaries for the given employees."""
    specs = _parse_employees(employees)

    try:
        dto = CalculatePayrollHandler().handle(specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"  {'Employee':<20} {'Kind':<10} {'Base':>12} {'Salary':>12}")
    click.echo(f"  {'-'*57}")
    for slip in dto.payslips:
        click.echo(
            f"  {slip.name:<20} {slip.kind:<10} {slip.base_salary:>12} {slip.salary:>12}"
        )
    click.echo(f"  {'-'*57}")
    click.echo(f"  {'Payroll Total':<44} {dto.total:>12}")
