"""Year-keyed special assistance and overtime ledgers."""
from fastapi import APIRouter, Depends, HTTPException, status

from ..dependencies import get_overtime_repository, get_special_assist_repository
from ..repositories import OvertimeLedgerRepository, SpecialAssistLedgerRepository
from ..schemas import OvertimeLedger, SpecialAssistLedger

router = APIRouter(prefix="/ledgers", tags=["ledgers"])


def _check_year(path_year: int, body_year: int) -> None:
    if path_year != body_year:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Ledger year does not match the URL",
        )


@router.get("/special-assist/{year}", response_model=SpecialAssistLedger)
async def get_special_assist_ledger(
    year: int,
    repository: SpecialAssistLedgerRepository = Depends(get_special_assist_repository),
) -> SpecialAssistLedger:
    """Return the stored ledger, or an empty one when the year has none."""

    return await repository.get(year)


@router.put("/special-assist/{year}", response_model=SpecialAssistLedger)
async def put_special_assist_ledger(
    year: int,
    payload: SpecialAssistLedger,
    repository: SpecialAssistLedgerRepository = Depends(get_special_assist_repository),
) -> SpecialAssistLedger:
    _check_year(year, payload.year)
    return await repository.set(year, payload)


@router.get("/overtime/{year}", response_model=OvertimeLedger)
async def get_overtime_ledger(
    year: int,
    repository: OvertimeLedgerRepository = Depends(get_overtime_repository),
) -> OvertimeLedger:
    """Return the stored ledger, or the default salary with no lines."""

    return await repository.get(year)


@router.put("/overtime/{year}", response_model=OvertimeLedger)
async def put_overtime_ledger(
    year: int,
    payload: OvertimeLedger,
    repository: OvertimeLedgerRepository = Depends(get_overtime_repository),
) -> OvertimeLedger:
    _check_year(year, payload.year)
    return await repository.set(year, payload)
