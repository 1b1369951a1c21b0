# ruff: noqa: TC001
from __future__ import annotations

from datetime import date

from fastapi import APIRouter

from pto_planner.api.deps import PolicyDep, YearsAheadDep, resolve_policy
from pto_planner.schemas.balance import BalanceProjectionResponse, ProjectionPayload, TimelineLedger
from pto_planner.services import balance as balance_service
from pto_planner.services import ledger as ledger_service

projections_router = APIRouter(prefix="/projections", tags=["projections"])


@projections_router.post("/balance", response_model=BalanceProjectionResponse)
async def project_balance(
    payload: ProjectionPayload,
    policy: PolicyDep,
    default_years_ahead: YearsAheadDep,
) -> BalanceProjectionResponse:
    """Project balances to the end of the horizon with accruals and planned vacations."""
    years_ahead = payload.years_ahead if payload.years_ahead is not None else default_years_ahead
    result = balance_service.project_balances(
        payload.today,
        payload.initial_standard,
        payload.initial_flex,
        payload.vacations,
        years_ahead,
        resolve_policy(payload.policy, policy),
    )
    return BalanceProjectionResponse(
        standard=result.standard,
        flex=result.flex,
        horizon_end=date(payload.today.year + years_ahead, 12, 31),
    )


@projections_router.post("/ledger", response_model=TimelineLedger)
async def build_ledger(
    payload: ProjectionPayload,
    policy: PolicyDep,
    default_years_ahead: YearsAheadDep,
) -> TimelineLedger:
    """Build the chronological balance timeline for display."""
    years_ahead = payload.years_ahead if payload.years_ahead is not None else default_years_ahead
    return ledger_service.build_timeline_ledger(
        payload.today,
        payload.initial_standard,
        payload.initial_flex,
        payload.vacations,
        years_ahead,
        resolve_policy(payload.policy, policy),
    )
