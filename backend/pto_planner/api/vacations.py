# ruff: noqa: TC001
from __future__ import annotations

from fastapi import APIRouter

from pto_planner.api.deps import PolicyDep
from pto_planner.schemas.vacation import ExpandVacationPayload, VacationDayListResponse, VacationDayResponse
from pto_planner.services import vacation as vacation_service

vacations_router = APIRouter(prefix="/vacations", tags=["vacations"])


@vacations_router.post("/expand", response_model=VacationDayListResponse)
async def expand_vacation(
    payload: ExpandVacationPayload,
    policy: PolicyDep,
) -> VacationDayListResponse:
    """Split a vacation's hours across the workdays it covers."""
    days = vacation_service.expand_vacation_days(payload.vacation, policy)
    return VacationDayListResponse(
        items=[VacationDayResponse.model_validate(day) for day in days],
        total=len(days),
        standard_hours=sum(day.standard_hours for day in days),
        flex_hours=sum(day.flex_hours for day in days),
    )
