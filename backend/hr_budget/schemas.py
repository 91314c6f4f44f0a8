"""Pydantic schemas used across the backend API and the calculators."""
import datetime
from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field, field_validator, model_validator

from .calculations.constants import BUDGET_YEARS, DEFAULT_OVERTIME_SALARY
from .calculations.numbers import to_int, to_number, to_optional_number


class Gender(str, Enum):
    """Employee gender, used to group room pairs."""

    MALE = "male"
    FEMALE = "female"


class EmployeeStatus(str, Enum):
    """Whether the employee is entitled to assistance payments."""

    ELIGIBLE = "eligible"
    INELIGIBLE = "ineligible"


# Values written by the earlier Thai-language front end
LEGACY_GENDERS = {"ชาย": Gender.MALE, "หญิง": Gender.FEMALE}
LEGACY_STATUSES = {"มีสิทธิ์": EmployeeStatus.ELIGIBLE, "หมดสิทธิ์": EmployeeStatus.INELIGIBLE}


class CustomTravelRates(BaseModel):
    """Per-employee overrides; ``None`` leaves the level rate in force."""

    hotel: float | None = None
    per_diem: float | None = None
    travel: float | None = None
    local: float | None = None
    souvenir_allowance: float | None = None
    other: float | None = None

    model_config = {"from_attributes": True}

    @field_validator("*", mode="before")
    @classmethod
    def _coerce_override(cls, value: Any) -> float | None:
        return to_optional_number(value)


class EmployeeBase(BaseModel):
    """Shared properties for employee operations."""

    employee_id: str
    name: str
    gender: Gender
    start_year: int
    level: str
    status: EmployeeStatus = EmployeeStatus.ELIGIBLE
    visit_province: str = ""
    home_visit_bus_fare: float = 0.0
    working_days: int = 1
    travel_working_days: int = 1
    custom_travel_rates: CustomTravelRates | None = None

    model_config = {"from_attributes": True}

    @field_validator("gender", mode="before")
    @classmethod
    def _normalise_gender(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.strip()
            return LEGACY_GENDERS.get(value, value.lower())
        return value

    @field_validator("status", mode="before")
    @classmethod
    def _normalise_status(cls, value: Any) -> Any:
        if value is None or value == "":
            return EmployeeStatus.ELIGIBLE
        if isinstance(value, str):
            value = value.strip()
            return LEGACY_STATUSES.get(value, value.lower())
        return value

    @field_validator("level", "employee_id", mode="before")
    @classmethod
    def _as_text(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value.strip() if isinstance(value, str) else value

    @field_validator("visit_province", mode="before")
    @classmethod
    def _blank_province(cls, value: Any) -> str:
        return "" if value is None else str(value).strip()

    @field_validator("home_visit_bus_fare", mode="before")
    @classmethod
    def _coerce_amount(cls, value: Any) -> float:
        return to_number(value)

    @field_validator("start_year", "working_days", "travel_working_days", mode="before")
    @classmethod
    def _coerce_count(cls, value: Any) -> int:
        return to_int(value)


class EmployeeCreate(EmployeeBase):
    """Employee payload for creation and bulk upserts."""


class EmployeeUpdate(BaseModel):
    """Partial employee payload; unset fields keep their stored value."""

    employee_id: str | None = None
    name: str | None = None
    gender: str | None = None
    start_year: int | str | None = None
    level: str | int | float | None = None
    status: str | None = None
    visit_province: str | None = None
    home_visit_bus_fare: float | str | None = None
    working_days: int | str | None = None
    travel_working_days: int | str | None = None
    custom_travel_rates: dict[str, Any] | None = None


class EmployeeRead(EmployeeBase):
    """Employee representation returned by the API."""

    id: int


class RateValues(BaseModel):
    """Standard allowance amounts for one job level."""

    position: str = ""
    rent: float = 0.0
    monthly_assist: float = 0.0
    souvenir_allowance: float = 0.0
    travel: float = 0.0
    local: float = 0.0
    per_diem: float = 0.0
    hotel: float = 0.0

    model_config = {"from_attributes": True}

    @field_validator(
        "rent", "monthly_assist", "souvenir_allowance", "travel", "local", "per_diem", "hotel",
        mode="before",
    )
    @classmethod
    def _coerce_amount(cls, value: Any) -> float:
        return to_number(value)


class RateBundle(RateValues):
    """Master rate row keyed by level."""

    level: str

    @field_validator("level", mode="before")
    @classmethod
    def _level_text(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value.strip() if isinstance(value, str) else value


class RateBundleUpdate(BaseModel):
    """Partial master-rate payload."""

    position: str | None = None
    rent: float | str | None = None
    monthly_assist: float | str | None = None
    souvenir_allowance: float | str | None = None
    travel: float | str | None = None
    local: float | str | None = None
    per_diem: float | str | None = None
    hotel: float | str | None = None


class RateBundleRead(RateBundle):
    """Master rate as returned by the API."""

    id: int


class HolidayBase(BaseModel):
    """A public or company holiday."""

    date: datetime.date
    name: str
    is_special: bool = False

    model_config = {"from_attributes": True}

    @field_validator("is_special", mode="before")
    @classmethod
    def _none_is_regular(cls, value: Any) -> Any:
        return False if value is None else value


class HolidayCreate(HolidayBase):
    """Holiday payload for creation."""


class HolidayRead(HolidayBase):
    """Holiday as returned by the API; ``year`` is the Gregorian year."""

    id: int
    year: int


class BudgetItemType(str, Enum):
    """Grouping rows of the budget sheet."""

    MAIN_HEADER = "main_header"
    HEADER = "header"


def _optional_text(value: Any) -> Any:
    if value is None:
        return None
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    if isinstance(value, str):
        return value.strip() or None
    return value


def _year_values(value: Any) -> Any:
    if value is None:
        return {}
    if isinstance(value, dict):
        return {to_int(year): to_number(amount) for year, amount in value.items()}
    return value


class BudgetItemBase(BaseModel):
    """A line of the budget sheet with one amount per Buddhist-era year.

    Header rows only group lines. Every other row gets a zero for each
    budget year it has no amount for.
    """

    type: BudgetItemType | None = None
    code: str | None = None
    account_code: str | None = None
    name: str
    values: dict[int, float] = Field(default_factory=dict)
    notes: str | None = None

    model_config = {"from_attributes": True}

    @field_validator("type", mode="before")
    @classmethod
    def _blank_type(cls, value: Any) -> Any:
        return None if value == "" else value

    @field_validator("code", "account_code", mode="before")
    @classmethod
    def _as_text(cls, value: Any) -> Any:
        return _optional_text(value)

    @field_validator("values", mode="before")
    @classmethod
    def _coerce_values(cls, value: Any) -> Any:
        return _year_values(value)

    @model_validator(mode="after")
    def _fill_budget_years(self) -> "BudgetItemBase":
        if self.type is None:
            filled = {year: 0.0 for year in BUDGET_YEARS}
            filled.update(self.values)
            self.values = dict(sorted(filled.items()))
        return self


class BudgetItemCreate(BudgetItemBase):
    """Budget line payload for creation and bulk upserts."""


class BudgetItemUpdate(BaseModel):
    """Partial budget line payload; ``values`` replaces the stored amounts."""

    type: str | None = None
    code: str | int | None = None
    account_code: str | int | None = None
    name: str | None = None
    values: dict[str, Any] | None = None
    notes: str | None = None


class BudgetItemRead(BudgetItemBase):
    id: int


class BudgetValueUpdate(BaseModel):
    """New amount for one year of a budget line."""

    value: float

    @field_validator("value", mode="before")
    @classmethod
    def _coerce_value(cls, value: Any) -> float:
        return to_number(value)


class SpecialAssistItemBase(BaseModel):
    """One line of the year's special assistance ledger."""

    item: str = ""
    times_per_year: float = 1
    days: float = 1
    people: float = 1
    rate: float = 0.0
    notes: str = ""

    model_config = {"from_attributes": True}

    @field_validator("times_per_year", "days", "people", "rate", mode="before")
    @classmethod
    def _coerce_number(cls, value: Any) -> float:
        return to_number(value)

    @field_validator("item", "notes", mode="before")
    @classmethod
    def _blank_text(cls, value: Any) -> str:
        return "" if value is None else str(value)


class SpecialAssistLedger(BaseModel):
    """Special assistance ledger for a Buddhist-era year."""

    year: int
    items: list[SpecialAssistItemBase] = Field(default_factory=list)


class SpecialAssistItemResult(SpecialAssistItemBase):
    item_total: float


class SpecialAssistLedgerResult(BaseModel):
    year: int
    items: list[SpecialAssistItemResult]
    total: float


class OvertimeItemBase(BaseModel):
    """One holiday-overtime line; ``hourly_rate`` of ``None`` means salary-derived."""

    item: str = ""
    days: float = 1
    hours: float = 8
    people: float = 1
    hourly_rate: float | None = None

    model_config = {"from_attributes": True}

    @field_validator("days", "hours", "people", mode="before")
    @classmethod
    def _coerce_number(cls, value: Any) -> float:
        return to_number(value)

    @field_validator("hourly_rate", mode="before")
    @classmethod
    def _coerce_rate(cls, value: Any) -> float | None:
        return to_optional_number(value)

    @field_validator("item", mode="before")
    @classmethod
    def _blank_text(cls, value: Any) -> str:
        return "" if value is None else str(value)


class OvertimeLedger(BaseModel):
    """Overtime plan for a Buddhist-era year with its shared base salary."""

    year: int
    salary: float = DEFAULT_OVERTIME_SALARY
    items: list[OvertimeItemBase] = Field(default_factory=list)
    notes: str = ""

    @field_validator("salary", mode="before")
    @classmethod
    def _coerce_salary(cls, value: Any) -> float:
        return to_number(value)


class OvertimeItemResult(OvertimeItemBase):
    effective_hourly_rate: float
    item_total: float


class OvertimeResult(BaseModel):
    year: int
    salary: float
    items: list[OvertimeItemResult]
    total: float


class TravelRecord(EmployeeBase):
    """Milestone-anniversary travel reimbursement for one employee."""

    service_years: int
    hotel_nights: int
    per_diem_days: int
    hotel: float
    per_diem: float
    travel_round_trip: float
    local_round_trip: float
    total: float


class SpecialAssistRecord(EmployeeBase):
    """Annual rent and monthly assistance for one eligible employee."""

    rent_per_month: float
    monthly_assist_per_month: float
    total_rent: float
    total_monthly_assist: float
    total: float


class FamilyVisitRecord(EmployeeBase):
    """Home-visit bus fare reimbursement for one employee."""

    round_trip_fare: float
    trips_per_year: int
    bus_fare_total: float
    total: float


class CompanyTripRecord(EmployeeBase):
    """Transport and lodging share of the annual company trip."""

    bus_fare: float
    bus_fare_total: float
    accommodation_cost: float
    pair_tag: str | None = None
    note: str
    total: float


class ManagerRotationRecord(EmployeeBase):
    """Rotation travel cost for one top-level manager."""

    per_diem_days: int
    hotel_nights: int
    per_diem_cost: float
    accommodation_cost: float
    travel_cost: float
    taxi_cost: float
    other_vehicle_cost: float
    total_travel: float
    total: float


class WorkDayCalculation(BaseModel):
    weekdays: int
    holidays_on_weekdays: int
    total_work_days: int


class HolidaySummary(BaseModel):
    year: int
    total_holidays: int
    banking_holidays: int
    special_holidays: int
    working_days: int
    working_days_without_special: int


class YearHolidayCount(BaseModel):
    year: int
    count: int


class CommonHoliday(BaseModel):
    name: str
    occurrences: int
    years_considered: int
    months: list[str]


class HolidayEstimate(BaseModel):
    """Holiday forecast for a year derived from the preceding years."""

    year: int
    recent_years: list[YearHolidayCount]
    average_holidays: int
    estimated_work_days: int
    common_holidays: list[CommonHoliday]


class BudgetSummary(BaseModel):
    """Per-category budget totals for one Buddhist-era year."""

    year: int
    total_employees: int
    active_employees: int
    travel_total: float
    special_assist_total: float
    assistance_total: float
    family_visit_total: float
    company_trip_total: float
    manager_rotation_total: float
    overtime_total: float
    total_expenses: float


RecordT = TypeVar("RecordT", bound=BaseModel)


class CalculationReport(BaseModel, Generic[RecordT]):
    """Itemised records for a year plus their summed total."""

    year: int
    records: list[RecordT]
    total: float
