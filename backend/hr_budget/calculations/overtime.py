"""Holiday overtime pay."""
from __future__ import annotations

from ..schemas import OvertimeItemBase, OvertimeItemResult, OvertimeLedger, OvertimeResult
from .constants import OVERTIME_HOURLY_DIVISOR


def effective_hourly_rate(item: OvertimeItemBase, salary: float) -> float:
    """The line's own rate, or ``salary / 210`` when it has none."""

    if item.hourly_rate is not None:
        return item.hourly_rate
    return salary / OVERTIME_HOURLY_DIVISOR


def calculate_overtime(ledger: OvertimeLedger) -> OvertimeResult:
    items: list[OvertimeItemResult] = []
    for item in ledger.items:
        rate = effective_hourly_rate(item, ledger.salary)
        items.append(
            OvertimeItemResult(
                **item.model_dump(),
                effective_hourly_rate=rate,
                item_total=item.people * item.days * item.hours * rate,
            )
        )
    return OvertimeResult(
        year=ledger.year,
        salary=ledger.salary,
        items=items,
        total=sum((item.item_total for item in items), 0.0),
    )
