"""Cap-aware balance simulation over accrual and vacation event streams."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pto_planner.services.accrual import (
    AccrualEvent,
    apply_annual_credit_cap,
    generate_accrual_events,
    initial_flex_accrued_this_year,
)
from pto_planner.services.carryover import roll_over_year
from pto_planner.services.vacation import VacationDayEvent, expand_vacation_days

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import date

    from pto_planner.schemas.policy import PolicyConfig
    from pto_planner.schemas.vacation import VacationRequest
    from pto_planner.services.carryover import YearEndRollover

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VacationDeduction:
    """A whole-request deduction applied on a single date."""

    date: date
    standard_hours: float = 0.0
    flex_hours: float = 0.0


@dataclass(frozen=True)
class BalancePair:
    """Standard and flex balances in hours. Not floored at zero."""

    standard: float
    flex: float


BalanceEvent = AccrualEvent | VacationDeduction | VacationDayEvent


def event_sort_key(event: BalanceEvent) -> tuple[date, int]:
    """Chronological order; accruals before deductions on the same date."""
    return event.date, 0 if isinstance(event, AccrualEvent) else 1


def sort_events(events: Iterable[BalanceEvent]) -> list[BalanceEvent]:
    """Return a new chronologically ordered list; the input is left untouched."""
    return sorted(events, key=event_sort_key)


# ---------------------------------------------------------------------------
# Running balance state
# ---------------------------------------------------------------------------


class BalanceState:
    """Running balances plus the flex credited so far in the current year.

    One instance per simulation run; never shared between calls.
    """

    def __init__(self, standard: float, flex: float, reference_date: date, config: PolicyConfig) -> None:
        self.standard = standard
        self.flex = flex
        self.config = config
        self.flex_accrued_this_year = initial_flex_accrued_this_year(reference_date, config)
        self.year = reference_date.year

    def advance_to(self, event_date: date) -> YearEndRollover | None:
        """Apply the year-end clamp when event_date falls in a later year.

        Returns the rollover applied, or None when still in the same year.
        """
        if event_date.year <= self.year:
            return None

        rollover = roll_over_year(self.standard, self.flex, self.year, event_date.year, self.config)
        self.standard = rollover.standard
        self.flex = rollover.flex
        self.flex_accrued_this_year = 0.0
        self.year = event_date.year
        return rollover

    def apply_accrual(self, event: AccrualEvent) -> tuple[float, float]:
        """Credit one accrual under both caps. Returns the actual (standard, flex) deltas.

        The annual credit cap limits how much flex is added this year; the
        balance cap limits the resulting total. They apply independently.
        """
        standard_before = self.standard
        self.standard = min(self.standard + event.resolve_standard(self.config), self.config.standard_cap)

        flex_before = self.flex
        credited = apply_annual_credit_cap(
            self.flex_accrued_this_year,
            event.resolve_flex(self.config),
            self.config.flex_annual_accrual_cap,
        )
        if credited > 0:
            self.flex += credited
            self.flex_accrued_this_year += credited
        self.flex = min(self.flex, self.config.flex_balance_cap)

        return self.standard - standard_before, self.flex - flex_before

    def apply_deduction(self, event: VacationDeduction | VacationDayEvent) -> None:
        """Subtract a vacation deduction. Balances may go negative."""
        self.standard -= event.standard_hours
        self.flex -= event.flex_hours

    @property
    def has_shortage(self) -> bool:
        return self.standard < 0 or self.flex < 0

    def snapshot(self) -> BalancePair:
        return BalancePair(standard=self.standard, flex=self.flex)


# ---------------------------------------------------------------------------
# Simulation
# ---------------------------------------------------------------------------


def apply_events_with_caps(
    initial_standard: float,
    initial_flex: float,
    events: Iterable[BalanceEvent],
    reference_date: date,
    config: PolicyConfig,
) -> BalancePair:
    """Replay events against starting balances and return the final balances.

    reference_date is the date the starting balances are valid for; it seeds
    the year's already-credited flex and the year used for rollover detection.
    """
    state = BalanceState(initial_standard, initial_flex, reference_date, config)

    for event in sort_events(events):
        state.advance_to(event.date)
        if isinstance(event, AccrualEvent):
            state.apply_accrual(event)
        else:
            state.apply_deduction(event)

    return state.snapshot()


def project_balances(
    today: date,
    initial_standard: float,
    initial_flex: float,
    vacations: Iterable[VacationRequest],
    years_ahead: int,
    config: PolicyConfig,
) -> BalancePair:
    """Project balances to the end of the horizon (Dec 31 of today.year + years_ahead).

    Vacations are deducted per workday, as in the ledger.
    """
    events: list[BalanceEvent] = list(generate_accrual_events(today, years_ahead, config))
    for vacation in vacations:
        events.extend(expand_vacation_days(vacation, config))

    result = apply_events_with_caps(initial_standard, initial_flex, events, today, config)
    logger.debug(
        "Projected balances from %s over %d years: standard=%.2f flex=%.2f",
        today,
        years_ahead,
        result.standard,
        result.flex,
    )
    return result
