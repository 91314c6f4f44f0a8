"""Holiday calendar endpoints."""
import logging
from typing import Sequence

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..dependencies import get_db_session
from ..models import Holiday
from ..schemas import HolidayCreate, HolidayRead

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/holidays", tags=["holidays"])


@router.get("/", response_model=list[HolidayRead])
async def list_holidays(
    year: int | None = Query(default=None, description="Gregorian year"),
    session: AsyncSession = Depends(get_db_session),
) -> Sequence[Holiday]:
    """Return holidays by date, optionally for one Gregorian year."""

    query = select(Holiday).order_by(Holiday.date)
    if year is not None:
        query = query.where(Holiday.year == year)
    result = await session.execute(query)
    return list(result.scalars().all())


@router.post("/", response_model=HolidayRead, status_code=status.HTTP_201_CREATED)
async def create_holiday(
    payload: HolidayCreate,
    session: AsyncSession = Depends(get_db_session),
) -> Holiday:
    duplicate = await session.execute(select(Holiday).where(Holiday.date == payload.date))
    if duplicate.scalar_one_or_none() is not None:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="A holiday already exists on this date")

    holiday = Holiday(year=payload.date.year, **payload.model_dump())
    session.add(holiday)
    await session.commit()
    await session.refresh(holiday)
    logger.info("Added holiday %s (%s)", holiday.date.isoformat(), holiday.name)
    return holiday


@router.delete("/{holiday_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_holiday(
    holiday_id: int,
    session: AsyncSession = Depends(get_db_session),
) -> Response:
    holiday = await session.get(Holiday, holiday_id)
    if holiday is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Holiday not found")
    await session.delete(holiday)
    await session.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
