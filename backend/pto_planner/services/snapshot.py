"""Snapshot export and reconciliation.

A snapshot records balances as of its export date. Reconciling replays the
accruals and vacations between the export date and today through the balance
simulator, so an old export can be brought up to date.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from pto_planner.exceptions import InvalidSnapshotError
from pto_planner.schemas.snapshot import Snapshot, SnapshotVacation
from pto_planner.services.accrual import generate_accruals_between
from pto_planner.services.balance import VacationDeduction, apply_events_with_caps

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping
    from datetime import date

    from pto_planner.schemas.policy import PolicyConfig
    from pto_planner.schemas.vacation import VacationRequest
    from pto_planner.services.balance import BalanceEvent

logger = logging.getLogger(__name__)


@dataclass
class ReconcileResult:
    """Balances as of today and the vacations that have not started yet."""

    current_standard: float
    current_flex: float
    future_vacations: list[VacationRequest] = field(default_factory=list)
    accruals_applied: int = 0
    vacations_applied: int = 0


def export_state(
    now: date,
    current_standard: float,
    current_flex: float,
    vacations: Iterable[VacationRequest],
) -> Snapshot:
    """Capture balances and planned vacations as a snapshot dated now."""
    return Snapshot(
        export_date=now,
        current_standard_pto=current_standard,
        current_flex_pto=current_flex,
        vacations=[SnapshotVacation.from_request(v) for v in vacations],
    )


def parse_snapshot(data: Mapping[str, Any] | Snapshot) -> Snapshot:
    """Validate raw snapshot JSON.

    Raises InvalidSnapshotError when the export date (or any vacation date)
    is missing or not a YYYY-MM-DD string.
    """
    if isinstance(data, Snapshot):
        return data
    try:
        return Snapshot.model_validate(data)
    except ValidationError as exc:
        logger.warning("Rejected snapshot: %d validation error(s)", exc.error_count())
        raise InvalidSnapshotError(_describe_errors(exc)) from exc


def _describe_errors(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "snapshot"
        parts.append(f"{location}: {error['msg']}")
    return "Invalid snapshot: " + "; ".join(parts)


def import_and_reconcile(
    data: Mapping[str, Any] | Snapshot,
    today: date,
    config: PolicyConfig,
) -> ReconcileResult:
    """Bring an exported snapshot forward to today.

    Flow:
    1. Parse and validate the snapshot
    2. Replay monthly accruals from the month after the export month, for every
       1st strictly before today (the export month's accrual is already captured)
    3. Deduct whole vacations that started on or after the export date and before today
    4. Run both through the cap-aware simulator seeded at the export date
    5. Return vacations starting today or later unchanged; earlier ones are dropped
    """
    snapshot = parse_snapshot(data)
    export_date = snapshot.export_date
    vacations = [v.to_request() for v in snapshot.vacations]

    events: list[BalanceEvent] = list(generate_accruals_between(export_date, today, config))
    accruals_applied = len(events)

    elapsed = [v for v in vacations if export_date <= v.start_date < today]
    events.extend(
        VacationDeduction(date=v.start_date, standard_hours=v.standard_hours, flex_hours=v.flex_hours) for v in elapsed
    )

    balances = apply_events_with_caps(
        snapshot.current_standard_pto,
        snapshot.current_flex_pto,
        events,
        export_date,
        config,
    )
    future_vacations = [v for v in vacations if v.start_date >= today]

    logger.info(
        "Reconciled snapshot from %s to %s: accruals=%d vacations=%d future=%d",
        export_date,
        today,
        accruals_applied,
        len(elapsed),
        len(future_vacations),
    )

    return ReconcileResult(
        current_standard=balances.standard,
        current_flex=balances.flex,
        future_vacations=future_vacations,
        accruals_applied=accruals_applied,
        vacations_applied=len(elapsed),
    )
