"""Tests for the per-category budget summary."""
import pytest

from hr_budget.calculations.summary import summarize_budget
from hr_budget.schemas import OvertimeLedger, SpecialAssistLedger

DESTINATION = "ขอนแก่น"


@pytest.fixture
def staff(make_employee):
    return [
        make_employee("M", level="7", start_year=2548, visit_province=DESTINATION, home_visit_bus_fare=300),
        make_employee("A", level="5", start_year=2550, home_visit_bus_fare=100),
        make_employee("B", level="5", start_year=2550, status="ineligible", home_visit_bus_fare=200),
    ]


def test_category_totals(staff, rate_table) -> None:
    summary = summarize_budget(
        staff,
        rate_table,
        2568,
        SpecialAssistLedger(year=2568, items=[{"item": "Funeral wreath", "people": 2, "rate": 500}]),
        OvertimeLedger(year=2568, items=[{"people": 1, "days": 1, "hours": 8, "hourly_rate": 100}]),
        DESTINATION,
        600,
    )

    assert summary.year == 2568
    assert summary.total_employees == 3
    assert summary.active_employees == 2
    assert summary.travel_total == 8100
    assert summary.special_assist_total == 1000
    assert summary.assistance_total == 240000
    # B is ineligible, so only M (2400) and A (800) get home visits
    assert summary.family_visit_total == 3200
    assert summary.company_trip_total == 3 * 1200 + 500 + 500
    assert summary.manager_rotation_total == 8100
    assert summary.overtime_total == 800
    assert summary.total_expenses == 265800


def test_empty_year(rate_table) -> None:
    summary = summarize_budget(
        [], rate_table, 2569, SpecialAssistLedger(year=2569), OvertimeLedger(year=2569), DESTINATION, 600
    )

    assert summary.total_employees == 0
    assert summary.total_expenses == 0
