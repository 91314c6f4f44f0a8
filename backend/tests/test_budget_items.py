"""Tests for the budget sheet lines and their API."""
import pytest
from httpx import AsyncClient

from hr_budget.schemas import BudgetItemBase, BudgetItemType

LINES = [
    {"type": "main_header", "code": "1", "name": "Personnel"},
    {"code": "1.1", "account_code": "5101010101", "name": "Salaries", "values": {"2569": "1,200,000"}},
    {"code": "1.2", "account_code": "5101020101", "name": "Travel"},
]


def test_lines_get_every_budget_year() -> None:
    line = BudgetItemBase(name="Salaries", values={"2570": 500})

    assert list(line.values) == list(range(2568, 2581))
    assert line.values[2570] == 500
    assert line.values[2568] == 0


def test_header_rows_carry_no_defaults() -> None:
    header = BudgetItemBase(type="header", name="Welfare")

    assert header.type is BudgetItemType.HEADER
    assert header.values == {}


def test_blank_codes_and_type_are_unset() -> None:
    line = BudgetItemBase(type="", code=" ", account_code=5101010101, name="Salaries", values=None)

    assert line.type is None
    assert line.code is None
    assert line.account_code == "5101010101"
    assert line.values[2580] == 0


@pytest.mark.asyncio
async def test_create_and_list(client: AsyncClient) -> None:
    response = await client.post("/budget-items/", json=LINES[1])
    assert response.status_code == 201
    created = response.json()
    assert created["values"]["2569"] == 1200000
    assert created["values"]["2568"] == 0

    items = (await client.get("/budget-items/")).json()
    assert [item["name"] for item in items] == ["Salaries"]


@pytest.mark.asyncio
async def test_bulk_upsert_matches_account_code_then_code(client: AsyncClient) -> None:
    first = await client.post("/budget-items/bulk", json=LINES)
    assert first.status_code == 200
    ids = [item["id"] for item in first.json()]

    second = await client.post(
        "/budget-items/bulk",
        json=[
            {"account_code": "5101010101", "name": "Salaries and wages"},
            {"type": "main_header", "code": "1", "name": "Personnel costs"},
        ],
    )
    assert [item["id"] for item in second.json()] == [ids[1], ids[0]]

    items = (await client.get("/budget-items/")).json()
    assert len(items) == 3
    assert items[0]["name"] == "Personnel costs"
    assert items[1]["name"] == "Salaries and wages"


@pytest.mark.asyncio
async def test_set_one_year_value(client: AsyncClient) -> None:
    line = (await client.post("/budget-items/", json=LINES[1])).json()

    response = await client.put(f"/budget-items/{line['id']}/values/2570", json={"value": "75,000"})

    assert response.status_code == 200
    values = response.json()["values"]
    assert values["2570"] == 75000
    assert values["2569"] == 1200000


@pytest.mark.asyncio
async def test_header_rows_reject_values(client: AsyncClient) -> None:
    header = (await client.post("/budget-items/", json=LINES[0])).json()

    response = await client.put(f"/budget-items/{header['id']}/values/2570", json={"value": 1})

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_partial_update_and_missing_line(client: AsyncClient) -> None:
    line = (await client.post("/budget-items/", json=LINES[2])).json()

    response = await client.put(f"/budget-items/{line['id']}", json={"notes": "per diem and fares"})

    assert response.status_code == 200
    assert response.json()["notes"] == "per diem and fares"
    assert response.json()["name"] == "Travel"
    assert (await client.put("/budget-items/999", json={"notes": "x"})).status_code == 404
