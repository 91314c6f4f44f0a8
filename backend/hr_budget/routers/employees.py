"""Employee endpoints for the FastAPI backend."""
import logging
from typing import Sequence

from fastapi import APIRouter, Depends, HTTPException, Response, status
from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..dependencies import get_db_session
from ..models import Employee
from ..schemas import EmployeeBase, EmployeeCreate, EmployeeRead, EmployeeUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employees", tags=["employees"])


def _column_values(payload: EmployeeBase) -> dict:
    return payload.model_dump(mode="json")


async def _get_or_404(session: AsyncSession, employee_pk: int) -> Employee:
    employee = await session.get(Employee, employee_pk)
    if employee is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Employee not found")
    return employee


@router.get("/", response_model=list[EmployeeRead])
async def list_employees(session: AsyncSession = Depends(get_db_session)) -> Sequence[Employee]:
    """Return all employees in the order they were added."""

    result = await session.execute(select(Employee).order_by(Employee.id))
    return list(result.scalars().all())


@router.post("/", response_model=EmployeeRead, status_code=status.HTTP_201_CREATED)
async def create_employee(
    payload: EmployeeCreate,
    session: AsyncSession = Depends(get_db_session),
) -> Employee:
    """Create an employee with a new ``employee_id``."""

    duplicate = await session.execute(
        select(Employee).where(Employee.employee_id == payload.employee_id)
    )
    if duplicate.scalar_one_or_none() is not None:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Employee ID already exists")

    employee = Employee(**_column_values(payload))
    session.add(employee)
    await session.commit()
    await session.refresh(employee)
    logger.info("Created employee %s", employee.employee_id)
    return employee


@router.post("/bulk", response_model=list[EmployeeRead])
async def upsert_employees(
    payload: list[EmployeeCreate],
    session: AsyncSession = Depends(get_db_session),
) -> list[Employee]:
    """Insert or fully replace employees keyed by ``employee_id``."""

    result = await session.execute(select(Employee))
    existing = {row.employee_id: row for row in result.scalars().all()}

    saved: list[Employee] = []
    for item in payload:
        values = _column_values(item)
        employee = existing.get(item.employee_id)
        if employee is None:
            employee = Employee(**values)
            session.add(employee)
            existing[item.employee_id] = employee
        else:
            for key, value in values.items():
                setattr(employee, key, value)
        saved.append(employee)

    await session.commit()
    for employee in saved:
        await session.refresh(employee)
    logger.info("Upserted %d employee(s)", len(saved))
    return saved


@router.put("/{employee_pk}", response_model=EmployeeRead)
async def update_employee(
    employee_pk: int,
    payload: EmployeeUpdate,
    session: AsyncSession = Depends(get_db_session),
) -> Employee:
    """Apply a partial update; the merged record is re-validated."""

    employee = await _get_or_404(session, employee_pk)
    current = EmployeeBase.model_validate(employee).model_dump()
    try:
        merged = EmployeeBase.model_validate({**current, **payload.model_dump(exclude_unset=True)})
    except ValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=exc.errors(include_url=False, include_context=False),
        ) from exc

    if merged.employee_id != employee.employee_id:
        clash = await session.execute(
            select(Employee).where(Employee.employee_id == merged.employee_id)
        )
        if clash.scalar_one_or_none() is not None:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Employee ID already exists")

    for key, value in _column_values(merged).items():
        setattr(employee, key, value)
    await session.commit()
    await session.refresh(employee)
    return employee


@router.delete("/{employee_pk}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_employee(
    employee_pk: int,
    session: AsyncSession = Depends(get_db_session),
) -> Response:
    employee = await _get_or_404(session, employee_pk)
    await session.delete(employee)
    await session.commit()
    logger.info("Deleted employee %s", employee.employee_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
