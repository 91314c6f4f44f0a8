"""Budget sheet endpoints: lines with one amount per budget year."""
import logging
from typing import Sequence

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..dependencies import get_db_session
from ..models import BudgetItem
from ..schemas import (
    BudgetItemBase,
    BudgetItemCreate,
    BudgetItemRead,
    BudgetItemUpdate,
    BudgetValueUpdate,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/budget-items", tags=["budget-items"])


def _column_values(payload: BudgetItemBase) -> dict:
    return payload.model_dump(mode="json")


def _find_existing(items: Sequence[BudgetItem], payload: BudgetItemBase) -> BudgetItem | None:
    """Match on account code, or on code when the payload has no account code."""

    for item in items:
        if payload.account_code is not None:
            if item.account_code == payload.account_code:
                return item
        elif payload.code is not None and item.code == payload.code:
            return item
    return None


async def _get_or_404(session: AsyncSession, item_id: int) -> BudgetItem:
    item = await session.get(BudgetItem, item_id)
    if item is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Budget item not found")
    return item


@router.get("/", response_model=list[BudgetItemRead])
async def list_budget_items(session: AsyncSession = Depends(get_db_session)) -> Sequence[BudgetItem]:
    """Return the sheet in the order lines were added."""

    result = await session.execute(select(BudgetItem).order_by(BudgetItem.id))
    return list(result.scalars().all())


@router.post("/", response_model=BudgetItemRead, status_code=status.HTTP_201_CREATED)
async def create_budget_item(
    payload: BudgetItemCreate,
    session: AsyncSession = Depends(get_db_session),
) -> BudgetItem:
    item = BudgetItem(**_column_values(payload))
    session.add(item)
    await session.commit()
    await session.refresh(item)
    logger.info("Created budget item %s", item.account_code or item.code or item.name)
    return item


@router.post("/bulk", response_model=list[BudgetItemRead])
async def upsert_budget_items(
    payload: list[BudgetItemCreate],
    session: AsyncSession = Depends(get_db_session),
) -> list[BudgetItem]:
    """Insert or replace lines keyed by account code, falling back to code."""

    result = await session.execute(select(BudgetItem).order_by(BudgetItem.id))
    existing = list(result.scalars().all())

    saved: list[BudgetItem] = []
    for line in payload:
        values = _column_values(line)
        item = _find_existing(existing, line)
        if item is None:
            item = BudgetItem(**values)
            session.add(item)
            existing.append(item)
        else:
            for key, value in values.items():
                setattr(item, key, value)
        saved.append(item)

    await session.commit()
    for item in saved:
        await session.refresh(item)
    logger.info("Upserted %d budget item(s)", len(saved))
    return saved


@router.put("/{item_id}", response_model=BudgetItemRead)
async def update_budget_item(
    item_id: int,
    payload: BudgetItemUpdate,
    session: AsyncSession = Depends(get_db_session),
) -> BudgetItem:
    """Apply a partial update; the merged line is re-validated."""

    item = await _get_or_404(session, item_id)
    current = BudgetItemBase.model_validate(item).model_dump()
    try:
        merged = BudgetItemBase.model_validate({**current, **payload.model_dump(exclude_unset=True)})
    except ValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=exc.errors(include_url=False, include_context=False),
        ) from exc

    for key, value in _column_values(merged).items():
        setattr(item, key, value)
    await session.commit()
    await session.refresh(item)
    return item


@router.put("/{item_id}/values/{year}", response_model=BudgetItemRead)
async def set_budget_value(
    item_id: int,
    year: int,
    payload: BudgetValueUpdate,
    session: AsyncSession = Depends(get_db_session),
) -> BudgetItem:
    """Set the amount of one Buddhist-era year."""

    item = await _get_or_404(session, item_id)
    if item.type is not None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Header rows carry no amounts",
        )

    # a new dict so the JSON column is flagged as changed
    item.values = {**(item.values or {}), str(year): payload.value}
    await session.commit()
    await session.refresh(item)
    logger.info("Set budget item %s for %s to %.2f", item_id, year, payload.value)
    return item
