"""Observed company holiday calendar.

Fixed-date holidays that land on a weekend are observed on the following
Monday (Saturday +2 days, Sunday +1 day). Nth-weekday holidays never fall on a
weekend and are not shifted.
"""

from __future__ import annotations

import calendar
from datetime import date, timedelta
from functools import lru_cache
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

_SATURDAY = calendar.SATURDAY
_SUNDAY = calendar.SUNDAY


def _observed(nominal: date) -> date:
    """Shift a weekend date forward to the following Monday."""
    if nominal.weekday() == _SATURDAY:
        return nominal + timedelta(days=2)
    if nominal.weekday() == _SUNDAY:
        return nominal + timedelta(days=1)
    return nominal


def _nth_weekday(year: int, month: int, weekday: int, n: int) -> date:
    """Return the n-th (1-based) given weekday of a month."""
    first = date(year, month, 1)
    offset = (weekday - first.weekday()) % 7
    return first + timedelta(days=offset + 7 * (n - 1))


def _last_weekday(year: int, month: int, weekday: int) -> date:
    """Return the last given weekday of a month."""
    _, days_in_month = calendar.monthrange(year, month)
    last = date(year, month, days_in_month)
    offset = (last.weekday() - weekday) % 7
    return last - timedelta(days=offset)


@lru_cache(maxsize=64)
def holidays_for_year(year: int) -> Mapping[date, str]:
    """Return the observed holidays for one year, keyed by date.

    The result is read-only and always holds seven entries.
    """
    holidays = {
        _observed(date(year, 1, 1)): "New Year's Day",
        _nth_weekday(year, 1, calendar.MONDAY, 3): "MLK Day",
        _last_weekday(year, 5, calendar.MONDAY): "Memorial Day",
        _observed(date(year, 7, 4)): "Independence Day",
        _nth_weekday(year, 9, calendar.MONDAY, 1): "Labor Day",
        _nth_weekday(year, 11, calendar.THURSDAY, 4): "Thanksgiving",
        _observed(date(year, 12, 25)): "Christmas Day",
    }
    return MappingProxyType(dict(sorted(holidays.items())))


def holidays_for_range(start: date, end: date) -> Mapping[date, str]:
    """Union of the yearly calendars for every year touched by [start, end]."""
    first_year, last_year = sorted((start.year, end.year))
    merged: dict[date, str] = {}
    for year in range(first_year, last_year + 1):
        merged.update(holidays_for_year(year))
    return MappingProxyType(merged)
