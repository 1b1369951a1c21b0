"""Accrual schedule: monthly standard and flex grants posted on the 1st."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING

from pto_planner.services.dates import first_of_month, next_month

if TYPE_CHECKING:
    from collections.abc import Iterator

    from pto_planner.schemas.policy import PolicyConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AccrualEvent:
    """A nominal (pre-cap) monthly grant.

    A missing amount means "the configured rate for this event's month".
    """

    date: date
    standard_amount: float | None = None
    flex_amount: float | None = None

    def resolve_standard(self, config: PolicyConfig) -> float:
        if self.standard_amount is None:
            return config.standard_monthly_rate
        return self.standard_amount

    def resolve_flex(self, config: PolicyConfig) -> float:
        if self.flex_amount is None:
            return config.flex_grant_for_month(self.date.month)
        return self.flex_amount


# ---------------------------------------------------------------------------
# Pure computation helpers
# ---------------------------------------------------------------------------


def _iter_month_starts(first: date, *, through: date | None = None, before: date | None = None) -> Iterator[date]:
    """Yield consecutive 1sts of the month starting at ``first``.

    Stops after ``through`` (inclusive bound) or at ``before`` (exclusive bound).
    """
    current = first_of_month(first)
    while (through is None or current <= through) and (before is None or current < before):
        yield current
        current = next_month(current)


def _first_accrual_date(reference_date: date) -> date:
    """First accrual still to come as of reference_date.

    An accrual dated the 1st has already happened on any later day of the month.
    """
    if reference_date.day > 1:
        return next_month(reference_date)
    return reference_date


def _build_accrual_event(accrual_date: date, config: PolicyConfig) -> AccrualEvent:
    return AccrualEvent(
        date=accrual_date,
        standard_amount=config.standard_monthly_rate,
        flex_amount=config.flex_grant_for_month(accrual_date.month),
    )


def apply_annual_credit_cap(credited_this_year: float, requested: float, annual_cap: float) -> float:
    """Clamp a flex grant so the year's credited total stays within annual_cap.

    Returns the amount actually credited (0 once the cap is reached).
    """
    room = max(0.0, annual_cap - credited_this_year)
    return min(room, requested)


# ---------------------------------------------------------------------------
# Schedule generation
# ---------------------------------------------------------------------------


def generate_accrual_events(reference_date: date, years_ahead: int, config: PolicyConfig) -> list[AccrualEvent]:
    """Generate monthly accrual events from reference_date through Dec 31 of year + years_ahead.

    The first event is the 1st of reference_date's month when reference_date
    is itself the 1st, otherwise the 1st of the following month.
    """
    horizon = date(reference_date.year + years_ahead, 12, 31)
    events = [
        _build_accrual_event(accrual_date, config)
        for accrual_date in _iter_month_starts(_first_accrual_date(reference_date), through=horizon)
    ]
    logger.debug("Generated %d accrual events from %s through %s", len(events), reference_date, horizon)
    return events


def generate_accruals_between(export_date: date, today: date, config: PolicyConfig) -> list[AccrualEvent]:
    """Accruals posted after a snapshot taken on export_date, up to (not including) today.

    The export month's accrual is always treated as already captured.
    """
    return [
        _build_accrual_event(accrual_date, config)
        for accrual_date in _iter_month_starts(next_month(export_date), before=today)
    ]


def initial_flex_accrued_this_year(reference_date: date, config: PolicyConfig) -> float:
    """Flex hours already credited in reference_date's year, January through its month.

    Used to seed the annual credit counter when simulation starts mid-year.
    """
    credited = 0.0
    for month in range(1, reference_date.month + 1):
        if credited >= config.flex_annual_accrual_cap:
            break
        credited += apply_annual_credit_cap(
            credited,
            config.flex_grant_for_month(month),
            config.flex_annual_accrual_cap,
        )
    return credited
