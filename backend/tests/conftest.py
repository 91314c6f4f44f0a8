"""Test fixtures for the backend."""
import os
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./test_hr_budget.db")

from hr_budget import models  # noqa: E402
from hr_budget.database import engine  # noqa: E402
from hr_budget.main import app  # noqa: E402
from hr_budget.schemas import EmployeeBase, RateValues  # noqa: E402


test_db_path = Path("test_hr_budget.db")


@pytest.fixture(scope="session", autouse=True)
def remove_test_database():
    """Delete the SQLite file once the session is over."""

    yield
    if test_db_path.exists():
        test_db_path.unlink()


@pytest_asyncio.fixture
async def prepare_database():
    """Create the schema before a test and drop it afterwards."""

    async with engine.begin() as conn:
        await conn.run_sync(models.Base.metadata.create_all)
    yield
    async with engine.begin() as conn:
        await conn.run_sync(models.Base.metadata.drop_all)


@pytest_asyncio.fixture
async def client(prepare_database) -> AsyncClient:
    """Provide an HTTP client for integration tests."""

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
        yield client


@pytest.fixture
def make_employee():
    """Build an employee with sensible defaults; keyword arguments override."""

    def _make(employee_id: str = "E001", **overrides) -> EmployeeBase:
        fields = {
            "employee_id": employee_id,
            "name": f"Employee {employee_id}",
            "gender": "male",
            "start_year": 2548,
            "level": "5",
            "status": "eligible",
            "visit_province": "",
            "home_visit_bus_fare": 0,
            "working_days": 1,
            "travel_working_days": 1,
        }
        fields.update(overrides)
        return EmployeeBase(**fields)

    return _make


@pytest.fixture
def rate_table() -> dict[str, RateValues]:
    return {
        "7": RateValues(
            position="Director", rent=9000, monthly_assist=4000, souvenir_allowance=1500,
            travel=3000, local=200, per_diem=300, hotel=2000,
        ),
        "5": RateValues(
            position="Senior officer", rent=5000, monthly_assist=2000, souvenir_allowance=1000,
            travel=1500, local=150, per_diem=240, hotel=1000,
        ),
        "4.5": RateValues(
            position="Officer", rent=4000, monthly_assist=1500, souvenir_allowance=800,
            travel=1200, local=100, per_diem=240, hotel=900,
        ),
    }
