"""Master rate endpoints: standard allowance amounts per job level."""
import logging
from typing import Sequence

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..calculations.rates import level_sort_key
from ..dependencies import get_db_session
from ..models import MasterRate
from ..schemas import RateBundle, RateBundleRead, RateBundleUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/master-rates", tags=["master-rates"])


@router.get("/", response_model=list[RateBundleRead])
async def list_master_rates(session: AsyncSession = Depends(get_db_session)) -> Sequence[MasterRate]:
    """Return every level, highest level first."""

    result = await session.execute(select(MasterRate))
    return sorted(result.scalars().all(), key=lambda rate: -level_sort_key(rate.level))


@router.post("/bulk", response_model=list[RateBundleRead])
async def upsert_master_rates(
    payload: list[RateBundle],
    session: AsyncSession = Depends(get_db_session),
) -> list[MasterRate]:
    """Insert or replace master rates keyed by ``level``."""

    result = await session.execute(select(MasterRate))
    existing = {row.level: row for row in result.scalars().all()}

    saved: list[MasterRate] = []
    for bundle in payload:
        values = bundle.model_dump()
        rate = existing.get(bundle.level)
        if rate is None:
            rate = MasterRate(**values)
            session.add(rate)
            existing[bundle.level] = rate
        else:
            for key, value in values.items():
                setattr(rate, key, value)
        saved.append(rate)

    await session.commit()
    for rate in saved:
        await session.refresh(rate)
    logger.info("Upserted %d master rate(s)", len(saved))
    return saved


@router.put("/{level}", response_model=RateBundleRead)
async def update_master_rate(
    level: str,
    payload: RateBundleUpdate,
    session: AsyncSession = Depends(get_db_session),
) -> MasterRate:
    """Change individual amounts of one level."""

    result = await session.execute(select(MasterRate).where(MasterRate.level == level))
    rate = result.scalar_one_or_none()
    if rate is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Level not found")

    current = RateBundle.model_validate(rate).model_dump()
    try:
        merged = RateBundle.model_validate({**current, **payload.model_dump(exclude_unset=True)})
    except ValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=exc.errors(include_url=False, include_context=False),
        ) from exc

    for key, value in merged.model_dump().items():
        setattr(rate, key, value)
    await session.commit()
    await session.refresh(rate)
    return rate
