from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Accrual policy configuration
# ---------------------------------------------------------------------------


class PolicyConfig(BaseModel):
    """Accrual, cap and rollover rules for the standard and flex pools.

    Immutable: engine functions receive it explicitly and never mutate it.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    # Standard PTO: deposited on the 1st of every month.
    standard_monthly_rate: float = Field(default=13.34, ge=0, description="Standard hours credited per month")
    standard_cap: float = Field(default=160, ge=0, description="Standard balance and rollover cap")

    # Flex PTO: larger January grant, then a smaller monthly grant.
    flex_jan_monthly: float = Field(default=10, ge=0, description="Flex hours granted on Jan 1")
    flex_other_monthly: float = Field(default=8, ge=0, description="Flex hours granted Feb through Dec")
    flex_annual_accrual_cap: float = Field(default=48, ge=0, description="Max flex hours credited per year")
    flex_carryover_cap: float = Field(default=48, ge=0, description="Max flex balance kept across a year end")
    flex_balance_cap: float = Field(default=96, ge=0, description="Hard ceiling on the flex balance")

    workday_hours: float = Field(default=8, gt=0, description="Hours in one full workday")

    def flex_grant_for_month(self, month: int) -> float:
        """Nominal (pre-cap) flex grant for a calendar month."""
        return self.flex_jan_monthly if month == 1 else self.flex_other_monthly


class PolicyConfigResponse(BaseModel):
    """Response schema exposing the configured default policy."""

    policy: PolicyConfig
    projection_years_ahead: int
