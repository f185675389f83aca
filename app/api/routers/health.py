"""
Health endpoints for the car rental API.

- /health, /health/live: process is up, no dependencies touched
- /health/db: the database answers a trivial query
- /health/ready: every table exists and the catalog has been seeded,
  i.e. /api/cars and /api/locations can serve real data
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import func, inspect, select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db_session
from app.infrastructure.db.tables import cars, locations, metadata

logger = logging.getLogger(__name__)

router = APIRouter()

SERVICE_NAME = "car-rental-api"


def _missing_tables(sync_session) -> list[str]:
    present = set(inspect(sync_session.connection()).get_table_names())
    return sorted(set(metadata.tables) - present)


async def _count(session: AsyncSession, table) -> int:
    result = await session.execute(select(func.count()).select_from(table))
    return result.scalar_one()


@router.get("/health")
@router.get("/health/live")
async def liveness():
    return {"status": "ok", "service": SERVICE_NAME}


@router.get("/health/db")
async def database_health(session: AsyncSession = Depends(get_db_session)):
    try:
        await session.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.error("Database health check failed", exc_info=True)
        return JSONResponse(
            status_code=503,
            content={"status": "unhealthy", "component": "database"},
        )
    return {"status": "healthy", "component": "database"}


@router.get("/health/ready")
async def readiness(session: AsyncSession = Depends(get_db_session)):
    """
    503 until the schema is complete and locations and cars are seeded.

    A fresh deployment with `SEED_ON_STARTUP=false` stays not ready until
    `scripts/seed_db.py` has run.
    """
    checks: dict[str, str] = {}
    try:
        missing = await session.run_sync(_missing_tables)
        if missing:
            checks["schema"] = "missing: " + ", ".join(missing)
        else:
            checks["schema"] = "ok"
            checks["locations"] = "ok" if await _count(session, locations) else "empty"
            checks["cars"] = "ok" if await _count(session, cars) else "empty"
    except SQLAlchemyError:
        logger.error("Readiness check could not query the database", exc_info=True)
        checks["database"] = "unreachable"

    ready = bool(checks) and all(value == "ok" for value in checks.values())
    body = {"status": "ready" if ready else "not_ready", "checks": checks}
    if not ready:
        logger.warning("Service not ready", extra={"checks": checks})
        return JSONResponse(status_code=503, content=body)
    return body
