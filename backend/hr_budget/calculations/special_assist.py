"""Special assistance: per-employee rent/monthly assist and the yearly item ledger."""
from __future__ import annotations

from collections.abc import Iterable, Mapping

from ..schemas import (
    EmployeeBase,
    EmployeeStatus,
    RateValues,
    SpecialAssistItemBase,
    SpecialAssistItemResult,
    SpecialAssistLedger,
    SpecialAssistLedgerResult,
    SpecialAssistRecord,
)
from .constants import MONTHS_PER_YEAR
from .rates import resolve_rates


def calculate_special_assist(
    employees: Iterable[EmployeeBase],
    rate_table: Mapping[str, RateValues],
) -> list[SpecialAssistRecord]:
    """Twelve months of rent and monthly assistance for each eligible employee."""

    records: list[SpecialAssistRecord] = []
    for employee in employees:
        if employee.status != EmployeeStatus.ELIGIBLE:
            continue
        rates = resolve_rates(employee, rate_table)
        total_rent = rates.rent * MONTHS_PER_YEAR
        total_monthly_assist = rates.monthly_assist * MONTHS_PER_YEAR
        records.append(
            SpecialAssistRecord(
                **employee.model_dump(),
                rent_per_month=rates.rent,
                monthly_assist_per_month=rates.monthly_assist,
                total_rent=total_rent,
                total_monthly_assist=total_monthly_assist,
                total=total_rent + total_monthly_assist,
            )
        )
    return records


def special_assist_item_total(item: SpecialAssistItemBase) -> float:
    return item.times_per_year * item.days * item.people * item.rate


def calculate_special_assist_items(ledger: SpecialAssistLedger) -> SpecialAssistLedgerResult:
    """Total every ledger line and the year."""

    items = [
        SpecialAssistItemResult(**item.model_dump(), item_total=special_assist_item_total(item))
        for item in ledger.items
    ]
    return SpecialAssistLedgerResult(
        year=ledger.year,
        items=items,
        total=sum((item.item_total for item in items), 0.0),
    )
