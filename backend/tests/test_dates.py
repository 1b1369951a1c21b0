"""Tests for civil-date helpers."""

from __future__ import annotations

from datetime import date, datetime

import pytest

from pto_planner.services.dates import date_range, first_of_month, format_date, next_month, parse_ymd, serialize_ymd


def test_date_range_is_inclusive() -> None:
    days = list(date_range(date(2024, 2, 27), date(2024, 3, 1)))
    assert days == [date(2024, 2, 27), date(2024, 2, 28), date(2024, 2, 29), date(2024, 3, 1)]


def test_date_range_is_restartable() -> None:
    days = date_range(date(2025, 1, 1), date(2025, 1, 3))
    assert list(days) == list(days)
    assert len(days) == 3


def test_inverted_date_range_is_empty() -> None:
    days = date_range(date(2025, 1, 3), date(2025, 1, 1))
    assert list(days) == []
    assert len(days) == 0


def test_month_helpers() -> None:
    assert first_of_month(date(2025, 5, 17)) == date(2025, 5, 1)
    assert next_month(date(2025, 5, 17)) == date(2025, 6, 1)
    assert next_month(date(2025, 12, 31)) == date(2026, 1, 1)


def test_serialize_ymd_pads() -> None:
    assert serialize_ymd(date(2026, 6, 5)) == "2026-06-05"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("2026-06-15", date(2026, 6, 15)),
        (" 2024-02-29 ", date(2024, 2, 29)),
    ],
)
def test_parse_ymd(raw: str, expected: date) -> None:
    assert parse_ymd(raw) == expected


@pytest.mark.parametrize("raw", ["", "2026-6-15", "06/15/2026", "2025-02-29", "2026-13-01", "2026-06-15T00:00"])
def test_parse_ymd_rejects(raw: str) -> None:
    with pytest.raises(ValueError):
        parse_ymd(raw)


def test_format_date() -> None:
    assert format_date(date(2023, 11, 5)) == "11/5/2023"
    assert format_date(datetime(2023, 1, 9, 15, 30)) == "1/9/2023"


@pytest.mark.parametrize("value", [None, "2023-11-05", 20231105])
def test_format_date_non_date_is_blank(value: object) -> None:
    assert format_date(value) == ""
