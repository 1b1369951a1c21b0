"""Civil-date helpers shared by the calendar, accrual and snapshot code.

Dates are plain ``datetime.date`` values: no time component, no timezone.
"""

from __future__ import annotations

import re
from datetime import date, timedelta
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

_YMD_PATTERN = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")
_ONE_DAY = timedelta(days=1)


class DateRange:
    """Inclusive, restartable range of calendar days.

    Iterating twice yields the same days; an ``end`` before ``start`` is empty.
    """

    __slots__ = ("end", "start")

    def __init__(self, start: date, end: date) -> None:
        self.start = start
        self.end = end

    def __iter__(self) -> Iterator[date]:
        current = self.start
        while current <= self.end:
            yield current
            current += _ONE_DAY

    def __len__(self) -> int:
        return max((self.end - self.start).days + 1, 0)

    def __repr__(self) -> str:
        return f"DateRange({self.start.isoformat()}, {self.end.isoformat()})"


def date_range(start: date, end: date) -> DateRange:
    """Return the days from start to end, both inclusive."""
    return DateRange(start, end)


def first_of_month(d: date) -> date:
    return d.replace(day=1)


def next_month(d: date) -> date:
    """Return the 1st of the month following d."""
    if d.month == 12:
        return date(d.year + 1, 1, 1)
    return date(d.year, d.month + 1, 1)


def serialize_ymd(d: date) -> str:
    """Serialize a date in the canonical ``YYYY-MM-DD`` wire form."""
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def parse_ymd(value: str) -> date:
    """Parse a canonical ``YYYY-MM-DD`` string.

    Raises ValueError for anything else, including impossible dates.
    """
    match = _YMD_PATTERN.match(value.strip()) if isinstance(value, str) else None
    if match is None:
        msg = f"Expected a YYYY-MM-DD date, got {value!r}"
        raise ValueError(msg)
    year, month, day = (int(part) for part in match.groups())
    return date(year, month, day)


def format_date(value: object) -> str:
    """Format a date for display as ``M/D/YYYY``; non-dates render as ``""``."""
    if not isinstance(value, date):
        return ""
    return f"{value.month}/{value.day}/{value.year}"
