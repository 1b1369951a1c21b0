"""Timeline ledger: accruals, rollover losses and aggregated vacations for display.

The ledger replays the same rules as ``apply_events_with_caps`` but records
the delta each event actually applied, so a capped accrual shows a smaller
credit than the nominal monthly rate.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING

from pto_planner.models.enums import LedgerEntryType
from pto_planner.schemas.balance import LedgerEntry, TimelineLedger, YearEndInfo
from pto_planner.services.accrual import AccrualEvent, generate_accrual_events
from pto_planner.services.balance import BalanceState, sort_events
from pto_planner.services.vacation import VacationDayEvent, expand_vacation_days

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pto_planner.schemas.policy import PolicyConfig
    from pto_planner.schemas.vacation import VacationRequest
    from pto_planner.services.balance import BalanceEvent

logger = logging.getLogger(__name__)

_INITIAL_DESCRIPTION = "Current Balance"
_ACCRUAL_DESCRIPTION = "Monthly Accrual"
_VACATION_DESCRIPTION = "Vacation"


@dataclass
class _VacationTotals:
    """Per-request accumulator for vacation day deductions."""

    standard_change: float = 0.0
    flex_change: float = 0.0
    running_standard: float | None = None
    running_flex: float | None = None
    causes_shortage: bool = False


def _ledger_sort_key(entry: LedgerEntry) -> tuple[date, int]:
    return entry.date, entry.type.sort_rank


def _build_vacation_entry(vacation: VacationRequest, totals: _VacationTotals) -> LedgerEntry:
    """Fold a request's day deductions into one display entry dated at its start."""
    return LedgerEntry(
        type=LedgerEntryType.VACATION,
        date=vacation.start_date,
        description=_VACATION_DESCRIPTION,
        standard_change=totals.standard_change,
        flex_change=totals.flex_change,
        running_standard=totals.running_standard,
        running_flex=totals.running_flex,
        causes_shortage=totals.causes_shortage,
        vacation_id=vacation.id,
        name=vacation.name,
        start_date=vacation.start_date,
        end_date=vacation.end_date,
    )


def build_timeline_ledger(
    today: date,
    initial_standard: float,
    initial_flex: float,
    vacations: Sequence[VacationRequest],
    years_ahead: int,
    config: PolicyConfig,
) -> TimelineLedger:
    """Build the display timeline from today through Dec 31 of today.year + years_ahead.

    Flow:
    1. Generate accruals and expand every vacation (past or future) into workdays
    2. Merge chronologically, accruals first on shared dates
    3. Replay with caps and rollover, recording the actual deltas
    4. Attach year-end losses to the Jan 1 accrual of the new year
    5. Aggregate vacation days per request, flagging negative balances
    6. Sort for display: date, then initial < accrual < vacation
    """
    # 1. Build the event streams.
    events: list[BalanceEvent] = list(generate_accrual_events(today, years_ahead, config))
    for vacation in vacations:
        events.extend(expand_vacation_days(vacation, config))

    state = BalanceState(initial_standard, initial_flex, today, config)
    entries: list[LedgerEntry] = [
        LedgerEntry(
            type=LedgerEntryType.INITIAL,
            date=today,
            description=_INITIAL_DESCRIPTION,
            running_standard=state.standard,
            running_flex=state.flex,
        )
    ]
    totals_by_vacation: dict[str | int, _VacationTotals] = {}
    pending_year_end: YearEndInfo | None = None

    # 2-3. Replay in processing order.
    for event in sort_events(events):
        rollover = state.advance_to(event.date)
        if rollover is not None:
            if pending_year_end is not None:
                logger.debug("Discarding year-end info for %d with no Jan 1 accrual", pending_year_end.to_year)
            pending_year_end = YearEndInfo.model_validate(rollover)

        if isinstance(event, AccrualEvent):
            standard_change, flex_change = state.apply_accrual(event)
            entry = LedgerEntry(
                type=LedgerEntryType.ACCRUAL,
                date=event.date,
                description=_ACCRUAL_DESCRIPTION,
                standard_change=standard_change,
                flex_change=flex_change,
                running_standard=state.standard,
                running_flex=state.flex,
            )

            # 4. Year-end info belongs to the new year's Jan 1 accrual only.
            if pending_year_end is not None and event.date == date(pending_year_end.to_year, 1, 1):
                entry.year_end_info = pending_year_end
                pending_year_end = None

            entries.append(entry)

        elif isinstance(event, VacationDayEvent):
            state.apply_deduction(event)

            # 5. Accumulate per request.
            totals = totals_by_vacation.setdefault(event.parent_id, _VacationTotals())
            totals.standard_change -= event.standard_hours
            totals.flex_change -= event.flex_hours
            totals.running_standard = state.standard
            totals.running_flex = state.flex
            if state.has_shortage:
                totals.causes_shortage = True

    if pending_year_end is not None:
        logger.debug("Discarding year-end info for %d with no Jan 1 accrual", pending_year_end.to_year)

    for vacation in vacations:
        totals = totals_by_vacation.get(vacation.id, _VacationTotals())
        if totals.causes_shortage:
            logger.debug("Vacation %s starting %s overdraws a balance", vacation.id, vacation.start_date)
        entries.append(_build_vacation_entry(vacation, totals))

    # 6. Display order; Python's sort is stable, so ties keep insertion order.
    entries.sort(key=_ledger_sort_key)

    has_any_shortage = any(e.type == LedgerEntryType.VACATION and bool(e.causes_shortage) for e in entries)
    return TimelineLedger(events=entries, has_any_shortage=has_any_shortage)
