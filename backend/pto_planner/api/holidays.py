# ruff: noqa: B008, TC003
from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Query, status

from pto_planner.api.deps import PolicyDep
from pto_planner.exceptions import AppError
from pto_planner.schemas.holiday import (
    HolidayListResponse,
    HolidayResponse,
    SuggestHoursPayload,
    SuggestHoursResponse,
)
from pto_planner.services import duration as duration_service
from pto_planner.services import holiday as holiday_service

holidays_router = APIRouter(prefix="/holidays", tags=["calendar"])

workdays_router = APIRouter(prefix="/workdays", tags=["calendar"])


@holidays_router.get("", response_model=HolidayListResponse)
async def list_holidays(
    year: int | None = Query(default=None, ge=1, le=9999),
    start: date | None = Query(default=None),
    end: date | None = Query(default=None),
) -> HolidayListResponse:
    """List observed holidays for a year, or for every year touched by start..end."""
    if year is not None:
        holidays = holiday_service.holidays_for_year(year)
    elif start is not None and end is not None:
        if end < start:
            raise AppError("end must not be before start", status_code=status.HTTP_400_BAD_REQUEST)
        holidays = holiday_service.holidays_for_range(start, end)
    else:
        raise AppError("Provide either year or both start and end", status_code=status.HTTP_400_BAD_REQUEST)

    items = [HolidayResponse(date=day, name=name) for day, name in sorted(holidays.items())]
    return HolidayListResponse(items=items, total=len(items))


@workdays_router.post("/suggest", response_model=SuggestHoursResponse)
async def suggest_hours(
    payload: SuggestHoursPayload,
    policy: PolicyDep,
) -> SuggestHoursResponse:
    """Suggest PTO hours for a date range (one workday of hours per workday)."""
    suggestion = duration_service.suggest_pto_hours(payload.start_date, payload.end_date, policy)
    return SuggestHoursResponse.model_validate(suggestion)
