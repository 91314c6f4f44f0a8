"""Reusable FastAPI dependencies."""
from __future__ import annotations

import logging
from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from .config import Settings, get_settings
from .database import AsyncSessionLocal
from .repositories import OvertimeLedgerRepository, SpecialAssistLedgerRepository

logger = logging.getLogger(__name__)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Dependency that yields an AsyncSession.

    A storage error raised while handling the request is logged and the
    transaction rolled back before it propagates.
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
        except SQLAlchemyError:
            logger.exception("Database error; rolling back the request transaction")
            await session.rollback()
            raise


def get_app_settings() -> Settings:
    return get_settings()


def get_special_assist_repository(
    session: AsyncSession = Depends(get_db_session),
) -> SpecialAssistLedgerRepository:
    return SpecialAssistLedgerRepository(session)


def get_overtime_repository(
    session: AsyncSession = Depends(get_db_session),
) -> OvertimeLedgerRepository:
    return OvertimeLedgerRepository(session)
