import logging
from datetime import date
from typing import Literal

from fastapi import APIRouter
from pydantic import BaseModel

from pto_planner.config import get_settings
from pto_planner.services.holiday import holidays_for_year

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])

# Any fixed year works; the check only proves the calendar builds.
_PROBE_YEAR = 2000


class HealthResponse(BaseModel):
    """Health check response."""

    status: Literal["ok", "degraded", "error"]
    version: str
    environment: str


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Return the health status of the API service."""
    settings = get_settings()
    status: Literal["ok", "degraded", "error"] = "ok"

    try:
        if date(_PROBE_YEAR, 12, 25) not in holidays_for_year(_PROBE_YEAR):
            status = "degraded"
    except Exception:
        logger.exception("Health check: holiday calendar failed")
        status = "degraded"

    return HealthResponse(
        status=status,
        version=settings.app_version,
        environment=settings.environment,
    )
