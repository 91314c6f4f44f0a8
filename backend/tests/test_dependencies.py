"""Tests for the request-scoped database session dependency."""
import logging

import pytest
from sqlalchemy.exc import OperationalError

from hr_budget.dependencies import get_db_session


@pytest.mark.asyncio
async def test_storage_error_is_logged_and_reraised(caplog: pytest.LogCaptureFixture) -> None:
    dependency = get_db_session()
    await dependency.__anext__()

    with caplog.at_level(logging.ERROR, logger="hr_budget.dependencies"):
        with pytest.raises(OperationalError):
            await dependency.athrow(OperationalError("INSERT INTO employees", {}, Exception("disk full")))

    records = [record for record in caplog.records if record.name == "hr_budget.dependencies"]
    assert len(records) == 1
    assert records[0].levelno == logging.ERROR
    assert records[0].exc_info is not None


@pytest.mark.asyncio
async def test_other_errors_pass_through_silently(caplog: pytest.LogCaptureFixture) -> None:
    dependency = get_db_session()
    await dependency.__anext__()

    with caplog.at_level(logging.ERROR, logger="hr_budget.dependencies"):
        with pytest.raises(ValueError):
            await dependency.athrow(ValueError("not a storage error"))

    assert not [record for record in caplog.records if record.name == "hr_budget.dependencies"]
