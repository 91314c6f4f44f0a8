"""FastAPI application entry point."""
import logging

from fastapi import FastAPI

from . import __version__, models
from .config import get_settings
from .database import engine
from .logging_config import setup_logging
from .routers.budget_items import router as budget_items_router
from .routers.calculations import router as calculations_router
from .routers.employees import router as employees_router
from .routers.holidays import router as holidays_router
from .routers.ledgers import router as ledgers_router
from .routers.master_rates import router as master_rates_router

logger = logging.getLogger(__name__)

app = FastAPI(title="HR Budget Backend", version=__version__)
app.include_router(employees_router)
app.include_router(master_rates_router)
app.include_router(holidays_router)
app.include_router(budget_items_router)
app.include_router(ledgers_router)
app.include_router(calculations_router)


@app.on_event("startup")
async def on_startup() -> None:
    """Configure logging and ensure database tables exist."""

    settings = get_settings()
    setup_logging(settings.log_level, settings.log_json)

    async with engine.begin() as conn:
        await conn.run_sync(models.Base.metadata.create_all)
    logger.info("HR budget backend started")


@app.get("/health", tags=["system"])
async def healthcheck() -> dict[str, str]:
    """Simple readiness check for uptime monitors."""

    return {"status": "ok"}
