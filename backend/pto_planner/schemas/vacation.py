# ruff: noqa: TC003
from __future__ import annotations

import math
from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def coerce_hours(value: Any) -> float:
    """Coerce a user-entered hour amount; anything non-numeric becomes 0."""
    if isinstance(value, bool):
        return 0.0
    try:
        hours = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(hours) or math.isinf(hours):
        return 0.0
    return hours


# ---------------------------------------------------------------------------
# Vacation request
# ---------------------------------------------------------------------------


class VacationRequest(BaseModel):
    """A planned absence and the total hours drawn from each pool over its span."""

    model_config = ConfigDict(frozen=True)

    id: str | int
    start_date: date
    end_date: date
    standard_hours: float = 0.0
    flex_hours: float = 0.0
    name: str = ""

    @field_validator("standard_hours", "flex_hours", mode="before")
    @classmethod
    def _coerce_hours(cls, value: Any) -> float:
        return coerce_hours(value)

    @field_validator("name", mode="before")
    @classmethod
    def _coerce_name(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @model_validator(mode="before")
    @classmethod
    def _default_end_date(cls, data: Any) -> Any:
        # Single-day vacations may omit end_date.
        if isinstance(data, dict) and data.get("end_date") is None:
            return {**data, "end_date": data.get("start_date")}
        return data


# ---------------------------------------------------------------------------
# API request / response schemas
# ---------------------------------------------------------------------------


class ExpandVacationPayload(BaseModel):
    """Request body for expanding a vacation into per-workday deductions."""

    vacation: VacationRequest


class VacationDayResponse(BaseModel):
    """One workday's share of a vacation's deduction."""

    model_config = ConfigDict(from_attributes=True)

    date: date
    parent_id: str | int
    standard_hours: float
    flex_hours: float


class VacationDayListResponse(BaseModel):
    """Per-workday deductions for a single vacation."""

    items: list[VacationDayResponse]
    total: int
    standard_hours: float = Field(description="Standard hours actually allocated across the span")
    flex_hours: float = Field(description="Flex hours actually allocated across the span")
