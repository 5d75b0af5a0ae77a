"""Application service: Calculate Payroll use case."""

from __future__ import annotations

from store.application.dto import EmployeeSpec, PayrollDTO, PayslipDTO
from store.domain.model.employee import Employee, EmployeeKind, calculate_salary
from store.domain.model.value_objects import Money


class CalculatePayrollHandler:

    def handle(self, specs: list[EmployeeSpec]) -> PayrollDTO:
        """Compute each employee's salary and the payroll total.

        All specs are validated before any salary is computed, so a bad
        entry anywhere fails the whole run.
        """
        employees = [
            Employee(
                name=spec.name,
                base_salary=Money.of(spec.base_salary),
                kind=EmployeeKind.parse(spec.kind),
            )
            for spec in specs
        ]

        payslips: list[PayslipDTO] = []
        total = Money.zero()
        for employee in employees:
            salary = calculate_salary(employee)
            total = total + salary
            payslips.append(
                PayslipDTO(
                    name=employee.name,
                    kind=employee.kind.value,
                    base_salary=str(employee.base_salary),
                    salary=str(salary),
                )
            )

        return PayrollDTO(payslips=payslips, total=str(total))
