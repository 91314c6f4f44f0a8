"""Dashboard totals across every budget category."""
from __future__ import annotations

from collections.abc import Mapping, Sequence

from ..schemas import (
    BudgetSummary,
    EmployeeBase,
    EmployeeStatus,
    OvertimeLedger,
    RateValues,
    SpecialAssistLedger,
)
from .company_trip import calculate_company_trip
from .family_visit import calculate_family_visit, is_family_visit_eligible
from .manager_rotation import calculate_manager_rotation
from .overtime import calculate_overtime
from .special_assist import calculate_special_assist, calculate_special_assist_items
from .travel import calculate_travel


def _total(records) -> float:
    return sum((record.total for record in records), 0.0)


def summarize_budget(
    employees: Sequence[EmployeeBase],
    rate_table: Mapping[str, RateValues],
    year_be: int,
    special_assist: SpecialAssistLedger,
    overtime: OvertimeLedger,
    destination: str,
    bus_fare: float,
) -> BudgetSummary:
    travel_total = _total(calculate_travel(employees, rate_table, year_be))
    special_assist_total = calculate_special_assist_items(special_assist).total
    assistance_total = _total(calculate_special_assist(employees, rate_table))
    family_visit_total = _total(
        calculate_family_visit([e for e in employees if is_family_visit_eligible(e)])
    )
    company_trip_total = _total(calculate_company_trip(employees, rate_table, destination, bus_fare))
    manager_rotation_total = _total(calculate_manager_rotation(employees, rate_table))
    overtime_total = calculate_overtime(overtime).total

    return BudgetSummary(
        year=year_be,
        total_employees=len(employees),
        active_employees=sum(1 for e in employees if e.status == EmployeeStatus.ELIGIBLE),
        travel_total=travel_total,
        special_assist_total=special_assist_total,
        assistance_total=assistance_total,
        family_visit_total=family_visit_total,
        company_trip_total=company_trip_total,
        manager_rotation_total=manager_rotation_total,
        overtime_total=overtime_total,
        total_expenses=(
            travel_total
            + special_assist_total
            + assistance_total
            + family_visit_total
            + company_trip_total
            + manager_rotation_total
            + overtime_total
        ),
    )
