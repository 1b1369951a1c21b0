"""Tests for the cap-aware balance simulator and balance projections."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

import pytest

from pto_planner.schemas.policy import PolicyConfig
from pto_planner.schemas.vacation import VacationRequest
from pto_planner.services.accrual import AccrualEvent
from pto_planner.services.balance import (
    VacationDeduction,
    apply_events_with_caps,
    project_balances,
    sort_events,
)
from pto_planner.services.vacation import VacationDayEvent

if TYPE_CHECKING:
    from httpx import AsyncClient

BALANCE_URL = "/projections/balance"


def _monthly(year: int, months: range) -> list[AccrualEvent]:
    return [AccrualEvent(date=date(year, m, 1), standard_amount=13.34, flex_amount=8) for m in months]


# ---------------------------------------------------------------------------
# apply_events_with_caps
# ---------------------------------------------------------------------------


def test_standard_is_capped(config: PolicyConfig) -> None:
    result = apply_events_with_caps(159, 0, _monthly(2026, range(2, 4)), date(2026, 1, 1), config)
    assert result.standard == 160


def test_flex_annual_credit_cap(config: PolicyConfig) -> None:
    # Jan's 10h is already credited when starting on Jan 1.
    result = apply_events_with_caps(10, 10, _monthly(2026, range(2, 13)), date(2026, 1, 1), config)
    assert result.flex == pytest.approx(48)


def test_flex_balance_cap(config: PolicyConfig) -> None:
    result = apply_events_with_caps(0, 95, _monthly(2026, range(2, 3)), date(2026, 1, 1), config)
    assert result.flex == 96


def test_year_end_rollover_then_new_year_accruals(config: PolicyConfig) -> None:
    events = [
        AccrualEvent(date=date(2027, 1, 1), standard_amount=13.34, flex_amount=10),
        AccrualEvent(date=date(2027, 2, 1), standard_amount=13.34, flex_amount=8),
    ]
    result = apply_events_with_caps(200, 90, events, date(2026, 12, 15), config)
    assert result.standard == 160
    assert result.flex == pytest.approx(66)


def test_deductions_may_go_negative(config: PolicyConfig) -> None:
    events = [VacationDeduction(date=date(2026, 3, 2), standard_hours=16, flex_hours=4)]
    result = apply_events_with_caps(8, 0, events, date(2026, 3, 1), config)
    assert (result.standard, result.flex) == (-8, -4)


def test_accrual_applies_before_same_day_deduction(config: PolicyConfig) -> None:
    events = [
        VacationDeduction(date=date(2026, 3, 1), standard_hours=16),
        AccrualEvent(date=date(2026, 3, 1), standard_amount=13.34, flex_amount=8),
    ]
    result = apply_events_with_caps(160, 0, events, date(2026, 2, 15), config)
    assert result.standard == 144


def test_accrual_without_amounts_uses_policy_rates(config: PolicyConfig) -> None:
    events = [AccrualEvent(date=date(2026, 2, 1))]
    result = apply_events_with_caps(0, 0, events, date(2026, 1, 15), config)
    assert result.standard == pytest.approx(13.34)
    assert result.flex == 8


def test_per_day_and_whole_request_deductions_agree(config: PolicyConfig) -> None:
    per_day = [
        VacationDayEvent(date=date(2026, 3, 2), parent_id=1, standard_hours=8, flex_hours=0),
        VacationDayEvent(date=date(2026, 3, 3), parent_id=1, standard_hours=4, flex_hours=4),
    ]
    whole = [VacationDeduction(date=date(2026, 3, 2), standard_hours=12, flex_hours=4)]
    reference = date(2026, 3, 1)
    assert apply_events_with_caps(50, 20, per_day, reference, config) == apply_events_with_caps(
        50, 20, whole, reference, config
    )


def test_empty_event_stream_returns_initial(config: PolicyConfig) -> None:
    result = apply_events_with_caps(42.5, -3, [], date(2026, 5, 5), config)
    assert (result.standard, result.flex) == (42.5, -3)


def test_sort_events_leaves_input_untouched() -> None:
    events = [
        VacationDeduction(date=date(2026, 3, 1)),
        AccrualEvent(date=date(2026, 3, 1)),
        AccrualEvent(date=date(2026, 2, 1)),
    ]
    original = list(events)
    ordered = sort_events(events)
    assert events == original
    assert ordered == [events[2], events[1], events[0]]


# ---------------------------------------------------------------------------
# project_balances
# ---------------------------------------------------------------------------


def test_project_balances_without_vacations(config: PolicyConfig) -> None:
    result = project_balances(date(2025, 1, 15), 0, 0, [], 0, config)
    assert result.standard == pytest.approx(11 * 13.34)
    assert result.flex == pytest.approx(38)


def test_project_balances_deducts_workdays_only(config: PolicyConfig) -> None:
    # Feb 3-5 2025 has three workdays, so only 24 of the 40 hours apply.
    vacation = VacationRequest(id=42, start_date=date(2025, 2, 3), end_date=date(2025, 2, 5), standard_hours=40)
    result = project_balances(date(2025, 1, 15), 0, 0, [vacation], 0, config)
    assert result.standard == pytest.approx(11 * 13.34 - 24)


def test_project_balances_multi_year_rolls_over(config: PolicyConfig) -> None:
    result = project_balances(date(2025, 1, 15), 160, 90, [], 1, config)
    assert result.standard == 160
    # 96 cap during 2025, clamped to 48 at year end, then 48 credited in 2026.
    assert result.flex == 96


# ---------------------------------------------------------------------------
# API
# ---------------------------------------------------------------------------


async def test_balance_endpoint(async_client: AsyncClient) -> None:
    payload = {
        "today": "2025-01-15",
        "initial_standard": 0,
        "initial_flex": 0,
        "vacations": [
            {"id": 42, "start_date": "2025-02-03", "end_date": "2025-02-05", "standard_hours": 40},
        ],
        "years_ahead": 0,
    }
    resp = await async_client.post(BALANCE_URL, json=payload)
    assert resp.status_code == 200
    data = resp.json()
    assert data["standard"] == pytest.approx(11 * 13.34 - 24)
    assert data["flex"] == pytest.approx(38)
    assert data["horizon_end"] == "2025-12-31"


async def test_balance_endpoint_default_horizon(async_client: AsyncClient) -> None:
    resp = await async_client.post(BALANCE_URL, json={"today": "2025-01-15"})
    assert resp.status_code == 200
    assert resp.json()["horizon_end"] == "2027-12-31"


async def test_balance_endpoint_policy_override(async_client: AsyncClient) -> None:
    payload = {"today": "2025-01-15", "years_ahead": 0, "policy": {"standard_monthly_rate": 10}}
    resp = await async_client.post(BALANCE_URL, json=payload)
    assert resp.status_code == 200
    assert resp.json()["standard"] == pytest.approx(110)


async def test_balance_endpoint_rejects_unknown_policy_field(async_client: AsyncClient) -> None:
    payload = {"today": "2025-01-15", "policy": {"tenure_bonus": 5}}
    resp = await async_client.post(BALANCE_URL, json=payload)
    assert resp.status_code == 422


async def test_balance_endpoint_rejects_negative_horizon(async_client: AsyncClient) -> None:
    resp = await async_client.post(BALANCE_URL, json={"today": "2025-01-15", "years_ahead": -1})
    assert resp.status_code == 422
