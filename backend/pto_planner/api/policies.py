from __future__ import annotations

from fastapi import APIRouter

from pto_planner.api.deps import PolicyDep, YearsAheadDep
from pto_planner.schemas.policy import PolicyConfigResponse

router = APIRouter(prefix="/policy", tags=["policy"])


@router.get("", response_model=PolicyConfigResponse)
async def get_policy(policy: PolicyDep, years_ahead: YearsAheadDep) -> PolicyConfigResponse:
    """Return the default accrual policy and projection horizon."""
    return PolicyConfigResponse(policy=policy, projection_years_ahead=years_ahead)
