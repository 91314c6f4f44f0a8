"""Resolve the effective allowance rates for an employee."""
from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import TypeVar

from ..schemas import EmployeeBase, RateValues
from .constants import UNSPECIFIED_POSITION
from .numbers import to_number

logger = logging.getLogger(__name__)

OVERRIDABLE_FIELDS = ("hotel", "per_diem", "travel", "local", "souvenir_allowance")

EmployeeT = TypeVar("EmployeeT", bound=EmployeeBase)


def resolve_rates(employee: EmployeeBase, rate_table: Mapping[str, RateValues]) -> RateValues:
    """Return the level rates for ``employee`` with its custom overrides applied.

    An unknown level resolves to an all-zero bundle instead of failing, so a
    half-configured rate table never blocks the budget screens. Rent and
    monthly assistance cannot be overridden per employee.
    """

    base = rate_table.get(employee.level)
    if base is None:
        logger.debug("No master rate for level %r (employee %s)", employee.level, employee.employee_id)
        base = RateValues(position=UNSPECIFIED_POSITION)

    overrides = employee.custom_travel_rates
    if overrides is None:
        return base.model_copy()

    updates = {}
    for field in OVERRIDABLE_FIELDS:
        value = getattr(overrides, field)
        if value is not None:
            updates[field] = value
    return base.model_copy(update=updates)


def level_sort_key(level: str) -> float:
    """Numeric value of a level key such as ``"4.5"``; non-numeric levels sort as 0."""

    return to_number(level)


def sort_by_level(employees: Iterable[EmployeeT]) -> list[EmployeeT]:
    """Highest level first, then by name."""

    return sorted(employees, key=lambda emp: (-level_sort_key(emp.level), emp.name))
