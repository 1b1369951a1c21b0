# ruff: noqa: TC003
from __future__ import annotations

from datetime import date
from typing import Self

from pydantic import BaseModel, ConfigDict, model_validator


class HolidayResponse(BaseModel):
    """An observed holiday."""

    date: date
    name: str


class HolidayListResponse(BaseModel):
    """Observed holidays in date order."""

    items: list[HolidayResponse]
    total: int


# ---------------------------------------------------------------------------
# Workday suggestion
# ---------------------------------------------------------------------------


class SuggestHoursPayload(BaseModel):
    """Request body for suggesting PTO hours over a date range."""

    start_date: date
    end_date: date

    @model_validator(mode="after")
    def _validate_dates(self) -> Self:
        if self.end_date < self.start_date:
            msg = "end_date must not be before start_date"
            raise ValueError(msg)
        return self


class SuggestHoursResponse(BaseModel):
    """Suggested hours and the day breakdown behind them."""

    model_config = ConfigDict(from_attributes=True)

    hours: float
    workdays: int
    weekend_days: int
    holidays_found: list[str]
