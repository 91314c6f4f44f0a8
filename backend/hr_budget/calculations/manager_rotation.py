"""Rotation travel for top-level managers."""
from __future__ import annotations

from collections.abc import Iterable, Mapping

from ..schemas import EmployeeBase, ManagerRotationRecord, RateValues
from .constants import TOP_LEVEL_CODE
from .rates import resolve_rates


def calculate_manager_rotation(
    employees: Iterable[EmployeeBase],
    rate_table: Mapping[str, RateValues],
) -> list[ManagerRotationRecord]:
    """Per-diem, lodging and fares for each level-7 employee.

    ``working_days`` drives the stay: ``working_days + 1`` hotel nights and
    ``working_days + 2`` per-diem days. The ``other`` custom rate is an
    extra vehicle cost.
    """

    records: list[ManagerRotationRecord] = []
    for employee in employees:
        if employee.level != TOP_LEVEL_CODE:
            continue

        rates = resolve_rates(employee, rate_table)
        working_days = employee.working_days or 1
        hotel_nights = working_days + 1
        per_diem_days = working_days + 2

        per_diem_cost = rates.per_diem * per_diem_days
        accommodation_cost = rates.hotel * hotel_nights
        travel_cost = rates.travel
        taxi_cost = rates.local
        overrides = employee.custom_travel_rates
        other_vehicle_cost = (overrides.other if overrides else None) or 0.0

        records.append(
            ManagerRotationRecord(
                **employee.model_dump(),
                per_diem_days=per_diem_days,
                hotel_nights=hotel_nights,
                per_diem_cost=per_diem_cost,
                accommodation_cost=accommodation_cost,
                travel_cost=travel_cost,
                taxi_cost=taxi_cost,
                other_vehicle_cost=other_vehicle_cost,
                total_travel=travel_cost + taxi_cost + other_vehicle_cost,
                total=per_diem_cost + accommodation_cost + travel_cost + taxi_cost + other_vehicle_cost,
            )
        )
    return records
