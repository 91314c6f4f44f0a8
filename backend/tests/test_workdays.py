"""Tests for the working-day calendar."""
from datetime import date

from hr_budget.calculations.workdays import (
    compute_work_days,
    count_weekdays,
    estimate_holidays,
    is_special_holiday,
    summarize_holidays,
)
from hr_budget.schemas import HolidayBase


def holiday(day: str, name: str, is_special: bool = False) -> HolidayBase:
    return HolidayBase(date=date.fromisoformat(day), name=name, is_special=is_special)


def test_weekday_counts_for_known_years() -> None:
    # 2025 starts on a Wednesday, 2024 is a leap year starting on a Monday
    assert count_weekdays(2025) == 261
    assert count_weekdays(2024) == 262
    assert count_weekdays(2023) == 260


def test_no_holidays_means_all_weekdays_are_work_days() -> None:
    result = compute_work_days(2568, [])

    assert result.weekdays == 261
    assert result.holidays_on_weekdays == 0
    assert result.total_work_days == result.weekdays


def test_weekend_holidays_are_not_deducted() -> None:
    holidays = [
        holiday("2025-01-01", "New Year's Day"),  # Wednesday
        holiday("2025-04-13", "Songkran"),  # Sunday
        holiday("2025-05-05", "Coronation Day"),  # Monday
    ]

    result = compute_work_days(2568, holidays)

    assert result.holidays_on_weekdays == 2
    assert result.total_work_days == 259


def test_special_holidays_toggle() -> None:
    holidays = [
        holiday("2025-01-01", "New Year's Day"),
        holiday("2025-02-12", "วันหยุดพิเศษ (เพิ่มเติม)"),
        holiday("2025-06-02", "Bridge day", is_special=True),
        holiday("2025-04-15", "ชดเชยวันสงกรานต์"),
    ]

    included = compute_work_days(2568, holidays, include_special=True)
    excluded = compute_work_days(2568, holidays, include_special=False)

    assert included.holidays_on_weekdays == 4
    # compensatory days still count when special holidays are left out
    assert excluded.holidays_on_weekdays == 2
    assert excluded.total_work_days == 259


def test_special_detection_by_flag_or_name() -> None:
    assert is_special_holiday(holiday("2025-02-12", "Special holiday for the festival"))
    assert is_special_holiday(holiday("2025-02-12", "Anything", is_special=True))
    assert not is_special_holiday(holiday("2025-02-12", "Compensatory day"))


def test_holiday_summary_splits_banking_and_special() -> None:
    holidays = [
        holiday("2025-01-01", "New Year's Day"),
        holiday("2025-02-12", "วันหยุดพิเศษ"),
        holiday("2025-04-15", "ชดเชยวันสงกรานต์"),
    ]

    summary = summarize_holidays(2568, holidays)

    assert summary.total_holidays == 3
    assert summary.banking_holidays == 1
    assert summary.special_holidays == 2
    assert summary.working_days == 258
    assert summary.working_days_without_special == 259


def test_estimate_uses_preceding_years_only() -> None:
    history = {
        2022: [holiday("2022-01-03", "ชดเชยวันขึ้นปีใหม่"), holiday("2022-04-13", "วันสงกรานต์")],
        2023: [
            holiday("2023-01-02", "วันขึ้นปีใหม่"),
            holiday("2023-04-13", "วันสงกรานต์"),
            holiday("2023-12-29", "วันหยุดพิเศษ"),
        ],
        2024: [holiday("2024-01-01", "วันขึ้นปีใหม่"), holiday("2024-04-15", "วันสงกรานต์")],
        2025: [holiday("2025-01-01", "วันขึ้นปีใหม่")],
    }

    estimate = estimate_holidays(2568, history)

    assert estimate is not None
    assert [entry.year for entry in estimate.recent_years] == [2567, 2566, 2565]
    assert [entry.count for entry in estimate.recent_years] == [2, 3, 2]
    # (2 + 3 + 2) / 3 rounds to 2
    assert estimate.average_holidays == 2
    assert estimate.estimated_work_days == 261 - 2
    names = [entry.name for entry in estimate.common_holidays]
    assert names == ["วันขึ้นปีใหม่", "วันสงกรานต์"]
    assert estimate.common_holidays[0].occurrences == 3
    assert estimate.common_holidays[0].months == ["01"]
    assert estimate.common_holidays[1].months == ["04"]


def test_estimate_without_history_is_none() -> None:
    assert estimate_holidays(2568, {2025: [holiday("2025-01-01", "New Year's Day")]}) is None


def test_estimate_groups_names_regardless_of_marker_case() -> None:
    history = {
        2022: [holiday("2022-05-02", "Bridge day")],
        2023: [holiday("2023-05-05", "Special Holiday Bridge day", is_special=True)],
        2024: [holiday("2024-05-06", "Bridge day")],
    }

    estimate = estimate_holidays(2568, history)

    assert estimate is not None
    assert estimate.common_holidays[0].name == "Bridge day"
    assert estimate.common_holidays[0].occurrences == 3
    assert estimate.common_holidays[0].months == ["05"]
