"""Storage access used by the calculation endpoints.

Reads convert ORM rows into the schema objects the calculators consume.
The year-keyed ledgers go through small repositories whose ``get`` returns
an explicit default for a missing year without writing it.
"""
from __future__ import annotations

import logging
from collections import defaultdict

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from .calculations.constants import DEFAULT_OVERTIME_SALARY
from .models import Employee, Holiday, MasterRate, OvertimeItem, OvertimeYear, SpecialAssistItem
from .schemas import (
    EmployeeRead,
    HolidayBase,
    OvertimeItemBase,
    OvertimeLedger,
    RateValues,
    SpecialAssistItemBase,
    SpecialAssistLedger,
)

logger = logging.getLogger(__name__)


async def load_employees(session: AsyncSession) -> list[EmployeeRead]:
    """All employees in insertion order; room pairing depends on this order."""

    result = await session.execute(select(Employee).order_by(Employee.id))
    return [EmployeeRead.model_validate(row) for row in result.scalars().all()]


async def load_rate_table(session: AsyncSession) -> dict[str, RateValues]:
    result = await session.execute(select(MasterRate))
    return {row.level: RateValues.model_validate(row) for row in result.scalars().all()}


async def load_holidays(session: AsyncSession, year_ce: int) -> list[HolidayBase]:
    result = await session.execute(
        select(Holiday).where(Holiday.year == year_ce).order_by(Holiday.date)
    )
    return [HolidayBase.model_validate(row) for row in result.scalars().all()]


async def load_holidays_by_year(session: AsyncSession) -> dict[int, list[HolidayBase]]:
    """Every stored holiday grouped by Gregorian year."""

    result = await session.execute(select(Holiday).order_by(Holiday.date))
    grouped: dict[int, list[HolidayBase]] = defaultdict(list)
    for row in result.scalars().all():
        grouped[row.year].append(HolidayBase.model_validate(row))
    return dict(grouped)


class SpecialAssistLedgerRepository:
    """Special assistance ledger rows keyed by Buddhist-era year."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @staticmethod
    def default(year: int) -> SpecialAssistLedger:
        return SpecialAssistLedger(year=year, items=[])

    async def get(self, year: int) -> SpecialAssistLedger:
        result = await self.session.execute(
            select(SpecialAssistItem).where(SpecialAssistItem.year == year).order_by(SpecialAssistItem.id)
        )
        rows = result.scalars().all()
        if not rows:
            return self.default(year)
        return SpecialAssistLedger(
            year=year, items=[SpecialAssistItemBase.model_validate(row) for row in rows]
        )

    async def set(self, year: int, ledger: SpecialAssistLedger) -> SpecialAssistLedger:
        """Replace every line stored for ``year``."""

        await self.session.execute(delete(SpecialAssistItem).where(SpecialAssistItem.year == year))
        for item in ledger.items:
            self.session.add(SpecialAssistItem(year=year, **item.model_dump()))
        await self.session.commit()
        logger.info("Saved %d special assistance item(s) for %s", len(ledger.items), year)
        return await self.get(year)


class OvertimeLedgerRepository:
    """Overtime salary and lines keyed by Buddhist-era year."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @staticmethod
    def default(year: int) -> OvertimeLedger:
        return OvertimeLedger(year=year, salary=DEFAULT_OVERTIME_SALARY, items=[], notes="")

    async def get(self, year: int) -> OvertimeLedger:
        header = (
            await self.session.execute(select(OvertimeYear).where(OvertimeYear.year == year))
        ).scalar_one_or_none()
        if header is None:
            return self.default(year)

        result = await self.session.execute(
            select(OvertimeItem).where(OvertimeItem.year == year).order_by(OvertimeItem.id)
        )
        return OvertimeLedger(
            year=year,
            salary=header.salary,
            notes=header.notes or "",
            items=[OvertimeItemBase.model_validate(row) for row in result.scalars().all()],
        )

    async def set(self, year: int, ledger: OvertimeLedger) -> OvertimeLedger:
        """Replace the salary, notes and every line stored for ``year``."""

        header = (
            await self.session.execute(select(OvertimeYear).where(OvertimeYear.year == year))
        ).scalar_one_or_none()
        if header is None:
            header = OvertimeYear(year=year)
            self.session.add(header)
        header.salary = ledger.salary
        header.notes = ledger.notes

        await self.session.execute(delete(OvertimeItem).where(OvertimeItem.year == year))
        for item in ledger.items:
            self.session.add(OvertimeItem(year=year, **item.model_dump()))
        await self.session.commit()
        logger.info("Saved overtime ledger for %s (%d line(s))", year, len(ledger.items))
        return await self.get(year)
