# ruff: noqa: TC001, TC003
from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from pto_planner.models.enums import LedgerEntryType
from pto_planner.schemas.policy import PolicyConfig
from pto_planner.schemas.vacation import VacationRequest

# ---------------------------------------------------------------------------
# Ledger schemas
# ---------------------------------------------------------------------------


class YearEndInfo(BaseModel):
    """Hours lost to the rollover caps when moving from one year into the next."""

    model_config = ConfigDict(from_attributes=True)

    from_year: int
    to_year: int
    lost_standard: float
    lost_flex: float


class LedgerEntry(BaseModel):
    """A single display record in a balance timeline.

    Changes are the deltas actually applied (after caps); running balances
    are the balances right after the entry took effect.
    """

    type: LedgerEntryType
    date: date
    description: str
    standard_change: float = 0.0
    flex_change: float = 0.0
    running_standard: float | None
    running_flex: float | None
    year_end_info: YearEndInfo | None = None
    causes_shortage: bool | None = None

    # Vacation entries only.
    vacation_id: str | int | None = None
    name: str | None = None
    start_date: date | None = None
    end_date: date | None = None


class TimelineLedger(BaseModel):
    """Ordered balance timeline and whether any vacation overdraws a pool."""

    events: list[LedgerEntry]
    has_any_shortage: bool


# ---------------------------------------------------------------------------
# Projection request / response schemas
# ---------------------------------------------------------------------------


class ProjectionPayload(BaseModel):
    """Request body for balance projections and timeline ledgers."""

    today: date
    initial_standard: float = 0.0
    initial_flex: float = 0.0
    vacations: list[VacationRequest] = []
    years_ahead: int | None = Field(default=None, ge=0, le=50)
    policy: PolicyConfig | None = Field(
        default=None,
        description="Overrides the configured policy for this call only",
    )


class BalanceProjectionResponse(BaseModel):
    """Projected balances at the end of the horizon."""

    standard: float
    flex: float
    horizon_end: date
