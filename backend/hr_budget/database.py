"""Database session management for the FastAPI backend."""
from sqlalchemy.ext.asyncio import (
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool

from .config import get_settings

settings = get_settings()
engine_kwargs: dict = {"future": True, "echo": False}
if settings.database_url.startswith("sqlite+"):
    # aiosqlite connections are bound to the loop that opened them
    engine_kwargs["connect_args"] = {"check_same_thread": False}
    engine_kwargs["poolclass"] = NullPool
engine = create_async_engine(settings.database_url, **engine_kwargs)
AsyncSessionLocal = async_sessionmaker(engine, expire_on_commit=False)
