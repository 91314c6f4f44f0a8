"""Home-visit bus fare reimbursement."""
from __future__ import annotations

from collections.abc import Iterable

from ..schemas import EmployeeBase, EmployeeStatus, FamilyVisitRecord
from .constants import FAMILY_VISIT_TRIPS_PER_YEAR


def is_family_visit_eligible(employee: EmployeeBase) -> bool:
    """Eligibility applied by every caller before :func:`calculate_family_visit`."""

    return employee.status == EmployeeStatus.ELIGIBLE


def calculate_family_visit(employees: Iterable[EmployeeBase]) -> list[FamilyVisitRecord]:
    """Four round trips a year at the employee's one-way bus fare.

    No filtering happens here; pass the already-eligible employees.
    """

    records: list[FamilyVisitRecord] = []
    for employee in employees:
        round_trip_fare = employee.home_visit_bus_fare * 2
        bus_fare_total = round_trip_fare * FAMILY_VISIT_TRIPS_PER_YEAR
        records.append(
            FamilyVisitRecord(
                **employee.model_dump(),
                round_trip_fare=round_trip_fare,
                trips_per_year=FAMILY_VISIT_TRIPS_PER_YEAR,
                bus_fare_total=bus_fare_total,
                total=bus_fare_total,
            )
        )
    return records
