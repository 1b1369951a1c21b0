"""Workday counting and PTO hour suggestions for a date range."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pto_planner.services.dates import date_range
from pto_planner.services.holiday import holidays_for_range

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping
    from datetime import date

    from pto_planner.schemas.policy import PolicyConfig


@dataclass(frozen=True)
class WorkdayCount:
    """Partition of a date range into workdays, weekend days and holidays."""

    workdays: int = 0
    weekend_days: int = 0
    holidays_found: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class HoursSuggestion:
    """Suggested PTO request size for a date range."""

    hours: float
    workdays: int
    weekend_days: int
    holidays_found: list[str]


def is_weekend(day: date) -> bool:
    return day.weekday() >= 5


def iter_workdays(start: date, end: date, holidays: Mapping[date, str]) -> Iterator[date]:
    """Yield the days in [start, end] that are neither weekend days nor holidays."""
    for day in date_range(start, end):
        if is_weekend(day) or day in holidays:
            continue
        yield day


def classify_days(start: date, end: date, holidays: Mapping[date, str]) -> WorkdayCount:
    """Classify each day in [start, end] as workday, weekend day or holiday.

    Weekend days are never checked against the holiday calendar, so a holiday
    falling on a weekend counts as a weekend day only.
    """
    workdays = 0
    weekend_days = 0
    holidays_found: list[str] = []

    for day in date_range(start, end):
        # Skip weekends.
        if is_weekend(day):
            weekend_days += 1
            continue

        # Holidays.
        name = holidays.get(day)
        if name is not None:
            holidays_found.append(name)
            continue

        workdays += 1

    return WorkdayCount(workdays=workdays, weekend_days=weekend_days, holidays_found=holidays_found)


def suggest_pto_hours(start: date, end: date, config: PolicyConfig) -> HoursSuggestion:
    """Suggest a PTO request size: one full workday of hours per workday in range.

    Advisory only; nothing is validated against any balance.
    """
    counts = classify_days(start, end, holidays_for_range(start, end))
    return HoursSuggestion(
        hours=counts.workdays * config.workday_hours,
        workdays=counts.workdays,
        weekend_days=counts.weekend_days,
        holidays_found=counts.holidays_found,
    )
