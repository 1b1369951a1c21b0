# ruff: noqa: TC001
from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from pto_planner.config import get_settings
from pto_planner.schemas.policy import PolicyConfig


async def get_policy_config() -> PolicyConfig:
    """Return the configured default accrual policy."""
    return get_settings().policy


PolicyDep = Annotated[PolicyConfig, Depends(get_policy_config)]


async def get_years_ahead() -> int:
    """Return the default projection horizon in years."""
    return get_settings().projection_years_ahead


YearsAheadDep = Annotated[int, Depends(get_years_ahead)]


def resolve_policy(override: PolicyConfig | None, default: PolicyConfig) -> PolicyConfig:
    """Use a per-call policy override when given, else the configured default."""
    return override if override is not None else default
