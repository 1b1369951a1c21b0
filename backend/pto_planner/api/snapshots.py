# ruff: noqa: B008, TC003
from __future__ import annotations

from datetime import date
from typing import Any

from fastapi import APIRouter, Body, Query

from pto_planner.api.deps import PolicyDep
from pto_planner.schemas.snapshot import ExportPayload, ReconcileResponse
from pto_planner.services import snapshot as snapshot_service

snapshots_router = APIRouter(prefix="/snapshots", tags=["snapshots"])


@snapshots_router.post("/export")
async def export_snapshot(payload: ExportPayload) -> dict[str, Any]:
    """Export balances and vacations in the snapshot wire format."""
    snapshot = snapshot_service.export_state(
        payload.export_date,
        payload.current_standard_pto,
        payload.current_flex_pto,
        payload.vacations,
    )
    return snapshot.to_wire()


@snapshots_router.post("/reconcile", response_model=ReconcileResponse)
async def reconcile_snapshot(
    policy: PolicyDep,
    today: date = Query(),
    data: Any = Body(),
) -> ReconcileResponse:
    """Bring a previously exported snapshot forward to today.

    The body is validated here rather than by the router so malformed
    snapshots surface as InvalidSnapshotError.
    """
    result = snapshot_service.import_and_reconcile(data, today, policy)
    return ReconcileResponse(
        current_standard=result.current_standard,
        current_flex=result.current_flex,
        future_vacations=result.future_vacations,
        accruals_applied=result.accruals_applied,
        vacations_applied=result.vacations_applied,
    )
