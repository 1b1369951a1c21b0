"""Vacation expansion: spread a request's hours over the workdays it covers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from pto_planner.services.duration import iter_workdays
from pto_planner.services.holiday import holidays_for_range

if TYPE_CHECKING:
    from datetime import date

    from pto_planner.schemas.policy import PolicyConfig
    from pto_planner.schemas.vacation import VacationRequest


@dataclass(frozen=True)
class VacationDayEvent:
    """One workday's share of a vacation request's deduction."""

    date: date
    parent_id: str | int
    standard_hours: float
    flex_hours: float


def expand_vacation_days(vacation: VacationRequest, config: PolicyConfig) -> list[VacationDayEvent]:
    """Expand a vacation into per-workday deduction events.

    Each workday takes up to one full workday of hours, drawn from the standard
    pool first and the flex pool for the remainder. Once both pools are spent
    the remaining workdays get no event. Totals that do not match the span's
    capacity are accepted as-is: extra hours are never allocated and missing
    hours leave trailing days untouched.
    """
    holidays = holidays_for_range(vacation.start_date, vacation.end_date)

    remaining_standard = vacation.standard_hours
    remaining_flex = vacation.flex_hours
    days: list[VacationDayEvent] = []

    for day in iter_workdays(vacation.start_date, vacation.end_date, holidays):
        day_total = min(config.workday_hours, remaining_standard + remaining_flex)
        if day_total <= 0:
            break

        standard_use = min(remaining_standard, day_total)
        remaining_standard -= standard_use
        flex_use = min(remaining_flex, day_total - standard_use)
        remaining_flex -= flex_use

        days.append(
            VacationDayEvent(
                date=day,
                parent_id=vacation.id,
                standard_hours=standard_use,
                flex_hours=flex_use,
            )
        )

    return days
