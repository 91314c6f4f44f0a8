"""Annual company trip: shared bus fare plus lodging with room pairing."""
from __future__ import annotations

from collections.abc import Mapping, Sequence

from ..schemas import CompanyTripRecord, EmployeeBase, Gender, RateValues
from .constants import (
    NOTE_NO_PAIR,
    NOTE_NOT_ELIGIBLE,
    NOTE_SINGLE_ROOM,
    PAIR_TAGS,
    TOP_LEVEL_CODE,
)
from .rates import resolve_rates


def is_accommodation_eligible(employee: EmployeeBase, destination: str) -> bool:
    """Employees whose home province is the destination need no lodging."""

    return employee.visit_province != destination


def assign_room_pairs(employees: Sequence[EmployeeBase], destination: str) -> dict[int, str]:
    """Pair same-gender employees greedily in list order.

    Returns ``{position in employees: pair tag}``. Within each gender the
    1st and 2nd employees share a room, then the 3rd and 4th, and so on; a
    leftover odd employee is absent from the result. Top-level managers never
    enter the pool. The outcome depends on input order.
    """

    pools: dict[Gender, list[int]] = {}
    for position, employee in enumerate(employees):
        if not is_accommodation_eligible(employee, destination):
            continue
        if employee.level == TOP_LEVEL_CODE:
            continue
        pools.setdefault(employee.gender, []).append(position)

    tags: dict[int, str] = {}
    pair_count = 0
    for members in pools.values():
        for i in range(0, len(members) - 1, 2):
            tag = PAIR_TAGS[pair_count % len(PAIR_TAGS)]
            tags[members[i]] = tag
            tags[members[i + 1]] = tag
            pair_count += 1
    return tags


def calculate_company_trip(
    employees: Sequence[EmployeeBase],
    rate_table: Mapping[str, RateValues],
    destination: str,
    bus_fare: float,
) -> list[CompanyTripRecord]:
    """One record per employee, in input order.

    Everyone pays the round-trip bus fare. Lodging is the employee's own
    hotel rate for a single room, or half of it when sharing.
    """

    pairs = assign_room_pairs(employees, destination)
    bus_fare_total = bus_fare * 2

    records: list[CompanyTripRecord] = []
    for position, employee in enumerate(employees):
        hotel = resolve_rates(employee, rate_table).hotel
        tag = pairs.get(position)

        if not is_accommodation_eligible(employee, destination):
            accommodation_cost, note = 0.0, NOTE_NOT_ELIGIBLE
        elif employee.level == TOP_LEVEL_CODE:
            accommodation_cost, note = hotel, NOTE_SINGLE_ROOM
        elif tag is not None:
            accommodation_cost = hotel / 2
            note = f"{tag} shared room ({employee.gender.value})"
        else:
            accommodation_cost, note = hotel, NOTE_NO_PAIR

        records.append(
            CompanyTripRecord(
                **employee.model_dump(),
                bus_fare=bus_fare,
                bus_fare_total=bus_fare_total,
                accommodation_cost=accommodation_cost,
                pair_tag=tag,
                note=note,
                total=bus_fare_total + accommodation_cost,
            )
        )
    return records
