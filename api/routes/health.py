"""Health check route"""

from fastapi import APIRouter
import anyio
import logging

from api.responses import HealthResponse
from app.config import settings
from domain.models import check_database

router = APIRouter(tags=["Health"])
logger = logging.getLogger("scpp.api.health")


@router.get("/health-check", response_model=HealthResponse)
async def health_check():
    """Liveness plus a SELECT 1 against the database; no session required"""
    database_ok = await anyio.to_thread.run_sync(check_database)
    if not database_ok:
        logger.warning("Health check: database unavailable")
    return HealthResponse(
        status="ok" if database_ok else "degraded",
        service=settings.app_name,
        version=settings.app_version,
        database="ok" if database_ok else "unavailable",
    )
