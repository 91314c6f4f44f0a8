"""Working-day arithmetic over a Buddhist-era year."""
from __future__ import annotations

import logging
import math
import re
from calendar import monthrange
from collections.abc import Iterable, Mapping, Sequence
from datetime import date

from ..schemas import (
    CommonHoliday,
    HolidayBase,
    HolidayEstimate,
    HolidaySummary,
    WorkDayCalculation,
    YearHolidayCount,
)
from .constants import BUDDHIST_ERA_OFFSET, COMPENSATORY_HOLIDAY_MARKERS, SPECIAL_HOLIDAY_MARKERS
from .numbers import round_half_up

logger = logging.getLogger(__name__)

ESTIMATE_LOOKBACK_YEARS = 5
COMMON_HOLIDAY_SHARE = 0.6


def to_gregorian(year_be: int) -> int:
    return year_be - BUDDHIST_ERA_OFFSET


def to_buddhist_era(year_ce: int) -> int:
    return year_ce + BUDDHIST_ERA_OFFSET


def _is_weekday(day: date) -> bool:
    return day.weekday() < 5


def _has_marker(name: str, markers: Sequence[str]) -> bool:
    folded = name.casefold()
    return any(marker in folded for marker in markers)


def is_special_holiday(holiday: HolidayBase) -> bool:
    """Explicit flag, or a legacy name carrying the special-holiday marker."""

    return holiday.is_special or _has_marker(holiday.name, SPECIAL_HOLIDAY_MARKERS)


def is_compensatory_holiday(holiday: HolidayBase) -> bool:
    return _has_marker(holiday.name, COMPENSATORY_HOLIDAY_MARKERS)


def count_weekdays(year_ce: int) -> int:
    """Number of Monday-Friday dates in a Gregorian year."""

    weekdays = 0
    for month in range(1, 13):
        _, days_in_month = monthrange(year_ce, month)
        for day in range(1, days_in_month + 1):
            if _is_weekday(date(year_ce, month, day)):
                weekdays += 1
    return weekdays


def compute_work_days(
    year_be: int,
    holidays: Iterable[HolidayBase],
    include_special: bool = True,
) -> WorkDayCalculation:
    """Weekdays in the year minus holidays that land on a weekday.

    ``holidays`` must already be the list for the matching Gregorian year.
    With ``include_special`` false, special holidays are not deducted.
    """

    weekdays = count_weekdays(to_gregorian(year_be))
    counted = [h for h in holidays if include_special or not is_special_holiday(h)]
    on_weekdays = sum(1 for h in counted if _is_weekday(h.date))
    return WorkDayCalculation(
        weekdays=weekdays,
        holidays_on_weekdays=on_weekdays,
        total_work_days=weekdays - on_weekdays,
    )


def summarize_holidays(year_be: int, holidays: Sequence[HolidayBase]) -> HolidaySummary:
    """Holiday counts by kind plus working days with and without special holidays."""

    banking = sum(
        1 for h in holidays if not is_special_holiday(h) and not is_compensatory_holiday(h)
    )
    return HolidaySummary(
        year=year_be,
        total_holidays=len(holidays),
        banking_holidays=banking,
        special_holidays=len(holidays) - banking,
        working_days=compute_work_days(year_be, holidays, True).total_work_days,
        working_days_without_special=compute_work_days(year_be, holidays, False).total_work_days,
    )


_MARKER_PATTERN = re.compile(
    "|".join(re.escape(marker) for marker in SPECIAL_HOLIDAY_MARKERS + COMPENSATORY_HOLIDAY_MARKERS),
    re.IGNORECASE,
)


def _normalised_name(name: str) -> str:
    return _MARKER_PATTERN.sub("", name).strip()


def estimate_holidays(
    year_be: int,
    holidays_by_year: Mapping[int, Sequence[HolidayBase]],
) -> HolidayEstimate | None:
    """Forecast the holiday load of ``year_be`` from up to five earlier years.

    ``holidays_by_year`` is keyed by Gregorian year. Returns ``None`` when no
    earlier year is on record.
    """

    year_ce = to_gregorian(year_be)
    recent = sorted(
        (y for y in holidays_by_year if year_ce - ESTIMATE_LOOKBACK_YEARS <= y < year_ce),
        reverse=True,
    )
    if not recent:
        logger.debug("No holiday history before %s", year_be)
        return None

    counts = [len(holidays_by_year[y]) for y in recent]
    average = round_half_up(sum(counts) / len(recent))

    # name -> [first seen name, occurrences, months]
    frequency: dict[str, list] = {}
    for y in recent:
        for holiday in holidays_by_year[y]:
            key = _normalised_name(holiday.name)
            entry = frequency.setdefault(key, [holiday.name, 0, set()])
            entry[1] += 1
            entry[2].add(f"{holiday.date.month:02d}")

    threshold = math.ceil(len(recent) * COMMON_HOLIDAY_SHARE)
    common = [entry for entry in frequency.values() if entry[1] >= threshold]
    common.sort(key=lambda entry: entry[1], reverse=True)

    return HolidayEstimate(
        year=year_be,
        recent_years=[
            YearHolidayCount(year=to_buddhist_era(y), count=c) for y, c in zip(recent, counts)
        ],
        average_holidays=average,
        estimated_work_days=count_weekdays(year_ce) - average,
        common_holidays=[
            CommonHoliday(
                name=name,
                occurrences=occurrences,
                years_considered=len(recent),
                months=sorted(months),
            )
            for name, occurrences, months in common[:average]
        ],
    )
