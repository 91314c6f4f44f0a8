"""Tests for special assistance payments and the yearly item ledger."""
from hr_budget.calculations.special_assist import (
    calculate_special_assist,
    calculate_special_assist_items,
)
from hr_budget.schemas import SpecialAssistItemBase, SpecialAssistLedger


def test_only_eligible_employees_are_paid(make_employee, rate_table) -> None:
    employees = [
        make_employee("A", status="eligible"),
        make_employee("B", status="ineligible"),
    ]

    records = calculate_special_assist(employees, rate_table)

    assert [record.employee_id for record in records] == ["A"]


def test_twelve_months_of_rent_and_assistance(make_employee, rate_table) -> None:
    record = calculate_special_assist([make_employee(level="5")], rate_table)[0]

    assert record.rent_per_month == 5000
    assert record.monthly_assist_per_month == 2000
    assert record.total_rent == 60000
    assert record.total_monthly_assist == 24000
    assert record.total == 84000


def test_ledger_item_total_is_product_of_fields() -> None:
    item = SpecialAssistItemBase(item="Flood relief", times_per_year=2, days=3, people=4, rate=100)

    result = calculate_special_assist_items(SpecialAssistLedger(year=2569, items=[item]))

    assert result.items[0].item_total == 2400
    assert result.total == 2400


def test_ledger_year_total_sums_items() -> None:
    item = {"item": "Visit", "times_per_year": 2, "days": 3, "people": 4, "rate": 100}
    ledger = SpecialAssistLedger(year=2569, items=[item, item])

    result = calculate_special_assist_items(ledger)

    assert result.year == 2569
    assert result.total == 4800


def test_ledger_coerces_strings_and_garbage() -> None:
    ledger = SpecialAssistLedger(
        year=2569,
        items=[{"item": "Meals", "times_per_year": "1", "days": "2", "people": "n/a", "rate": "1,000"}],
    )

    result = calculate_special_assist_items(ledger)

    assert result.items[0].people == 0
    assert result.items[0].rate == 1000
    assert result.total == 0


def test_empty_inputs(rate_table) -> None:
    assert calculate_special_assist([], rate_table) == []
    assert calculate_special_assist_items(SpecialAssistLedger(year=2569)).total == 0


def test_idempotent_and_non_mutating(make_employee, rate_table) -> None:
    employees = [make_employee("A", custom_travel_rates={"per_diem": 400}), make_employee("B", level="7")]
    snapshot = [emp.model_dump() for emp in employees]
    ledger = SpecialAssistLedger(year=2569, items=[{"item": "Wreath", "people": 2, "rate": 500}])
    ledger_snapshot = ledger.model_dump()

    assert calculate_special_assist(employees, rate_table) == calculate_special_assist(employees, rate_table)
    assert calculate_special_assist_items(ledger) == calculate_special_assist_items(ledger)
    assert [emp.model_dump() for emp in employees] == snapshot
    assert ledger.model_dump() == ledger_snapshot
