"""Read-only endpoints exposing the allowance calculators."""
import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..calculations.company_trip import calculate_company_trip
from ..calculations.constants import BUDGET_YEARS
from ..calculations.family_visit import calculate_family_visit, is_family_visit_eligible
from ..calculations.manager_rotation import calculate_manager_rotation
from ..calculations.overtime import calculate_overtime
from ..calculations.rates import sort_by_level
from ..calculations.special_assist import calculate_special_assist, calculate_special_assist_items
from ..calculations.summary import summarize_budget
from ..calculations.travel import calculate_travel
from ..calculations.workdays import (
    compute_work_days,
    estimate_holidays,
    summarize_holidays,
    to_gregorian,
)
from ..config import Settings
from ..dependencies import (
    get_app_settings,
    get_db_session,
    get_overtime_repository,
    get_special_assist_repository,
)
from ..repositories import (
    OvertimeLedgerRepository,
    SpecialAssistLedgerRepository,
    load_employees,
    load_holidays,
    load_holidays_by_year,
    load_rate_table,
)
from ..schemas import (
    BudgetSummary,
    CalculationReport,
    CompanyTripRecord,
    FamilyVisitRecord,
    HolidayEstimate,
    HolidaySummary,
    ManagerRotationRecord,
    OvertimeResult,
    SpecialAssistLedgerResult,
    SpecialAssistRecord,
    TravelRecord,
    WorkDayCalculation,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/calculations", tags=["calculations"])


def _report(year: int, records: list) -> dict:
    return {
        "year": year,
        "records": records,
        "total": sum((record.total for record in records), 0.0),
    }


@router.get("/years", response_model=list[int])
async def budget_years() -> list[int]:
    """Buddhist-era years offered for budgeting."""

    return list(BUDGET_YEARS)


@router.get("/current-year", response_model=int)
async def current_budget_year(settings: Settings = Depends(get_app_settings)) -> int:
    """Year the budgeting screens open on."""

    return settings.current_budget_year


@router.get("/{year}/travel", response_model=CalculationReport[TravelRecord])
async def travel_allowance(year: int, session: AsyncSession = Depends(get_db_session)) -> dict:
    employees = await load_employees(session)
    rates = await load_rate_table(session)
    return _report(year, calculate_travel(employees, rates, year))


@router.get("/{year}/special-assist", response_model=CalculationReport[SpecialAssistRecord])
async def special_assist(year: int, session: AsyncSession = Depends(get_db_session)) -> dict:
    employees = await load_employees(session)
    rates = await load_rate_table(session)
    return _report(year, calculate_special_assist(employees, rates))


@router.get("/{year}/special-assist-items", response_model=SpecialAssistLedgerResult)
async def special_assist_items(
    year: int,
    repository: SpecialAssistLedgerRepository = Depends(get_special_assist_repository),
) -> SpecialAssistLedgerResult:
    return calculate_special_assist_items(await repository.get(year))


@router.get("/{year}/family-visit", response_model=CalculationReport[FamilyVisitRecord])
async def family_visit(year: int, session: AsyncSession = Depends(get_db_session)) -> dict:
    """Eligible employees only, highest level first."""

    employees = await load_employees(session)
    eligible = [emp for emp in employees if is_family_visit_eligible(emp)]
    return _report(year, sort_by_level(calculate_family_visit(eligible)))


@router.get("/{year}/company-trip", response_model=CalculationReport[CompanyTripRecord])
async def company_trip(
    year: int,
    destination: str | None = Query(default=None),
    bus_fare: float | None = Query(default=None, ge=0),
    session: AsyncSession = Depends(get_db_session),
    settings: Settings = Depends(get_app_settings),
) -> dict:
    """Trip costs in stored employee order; pairing depends on that order."""

    employees = await load_employees(session)
    rates = await load_rate_table(session)
    records = calculate_company_trip(
        employees,
        rates,
        destination if destination is not None else settings.company_trip_destination,
        bus_fare if bus_fare is not None else settings.company_trip_bus_fare,
    )
    return _report(year, records)


@router.get("/{year}/manager-rotation", response_model=CalculationReport[ManagerRotationRecord])
async def manager_rotation(year: int, session: AsyncSession = Depends(get_db_session)) -> dict:
    employees = await load_employees(session)
    rates = await load_rate_table(session)
    return _report(year, calculate_manager_rotation(employees, rates))


@router.get("/{year}/overtime", response_model=OvertimeResult)
async def overtime(
    year: int,
    repository: OvertimeLedgerRepository = Depends(get_overtime_repository),
) -> OvertimeResult:
    return calculate_overtime(await repository.get(year))


@router.get("/{year}/workdays", response_model=WorkDayCalculation)
async def work_days(
    year: int,
    include_special: bool = Query(default=True),
    session: AsyncSession = Depends(get_db_session),
) -> WorkDayCalculation:
    holidays = await load_holidays(session, to_gregorian(year))
    return compute_work_days(year, holidays, include_special)


@router.get("/{year}/holidays/summary", response_model=HolidaySummary)
async def holiday_summary(year: int, session: AsyncSession = Depends(get_db_session)) -> HolidaySummary:
    holidays = await load_holidays(session, to_gregorian(year))
    return summarize_holidays(year, holidays)


@router.get("/{year}/holidays/estimate", response_model=HolidayEstimate)
async def holiday_estimate(year: int, session: AsyncSession = Depends(get_db_session)) -> HolidayEstimate:
    """Forecast from the five years before ``year``."""

    estimate = estimate_holidays(year, await load_holidays_by_year(session))
    if estimate is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No holiday history for the preceding years",
        )
    return estimate


@router.get("/{year}/summary", response_model=BudgetSummary)
async def budget_summary(
    year: int,
    session: AsyncSession = Depends(get_db_session),
    settings: Settings = Depends(get_app_settings),
) -> BudgetSummary:
    """Totals for every budget category of the year."""

    employees = await load_employees(session)
    rates = await load_rate_table(session)
    special_assist_ledger = await SpecialAssistLedgerRepository(session).get(year)
    overtime_ledger = await OvertimeLedgerRepository(session).get(year)
    summary = summarize_budget(
        employees,
        rates,
        year,
        special_assist_ledger,
        overtime_ledger,
        settings.company_trip_destination,
        settings.company_trip_bus_fare,
    )
    logger.debug("Budget summary for %s: %.2f", year, summary.total_expenses)
    return summary
