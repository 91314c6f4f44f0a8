"""Travel reimbursement for milestone service anniversaries."""
from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from ..schemas import EmployeeBase, RateValues, TravelRecord
from .constants import MILESTONE_SERVICE_YEARS
from .rates import resolve_rates

logger = logging.getLogger(__name__)


def service_years(employee: EmployeeBase, year_be: int) -> int:
    return year_be - employee.start_year


def calculate_travel(
    employees: Iterable[EmployeeBase],
    rate_table: Mapping[str, RateValues],
    year_be: int,
) -> list[TravelRecord]:
    """Return a record for every employee reaching a milestone anniversary in ``year_be``.

    Lodging covers ``travel_working_days + 1`` nights and per-diem
    ``travel_working_days + 2`` days; fares are flat round-trip amounts.
    """

    records: list[TravelRecord] = []
    for employee in employees:
        years = service_years(employee, year_be)
        if years not in MILESTONE_SERVICE_YEARS:
            continue

        rates = resolve_rates(employee, rate_table)
        working_days = employee.travel_working_days or 1
        hotel_nights = working_days + 1
        per_diem_days = working_days + 2
        hotel = hotel_nights * rates.hotel
        per_diem = per_diem_days * rates.per_diem
        travel_round_trip = rates.travel
        local_round_trip = rates.local

        records.append(
            TravelRecord(
                **employee.model_dump(),
                service_years=years,
                hotel_nights=hotel_nights,
                per_diem_days=per_diem_days,
                hotel=hotel,
                per_diem=per_diem,
                travel_round_trip=travel_round_trip,
                local_round_trip=local_round_trip,
                total=hotel + per_diem + travel_round_trip + local_round_trip,
            )
        )

    logger.debug("%d employee(s) reach a milestone in %s", len(records), year_be)
    return records
