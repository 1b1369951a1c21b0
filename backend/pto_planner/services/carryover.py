"""Year-end carryover: clamp balances to their rollover caps at a year boundary.

Standard keeps at most ``standard_cap``; flex keeps at most
``flex_carryover_cap``. Whatever exceeds the cap is lost, and the loss is
reported so ledgers can show it next to the new year's first accrual.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pto_planner.schemas.policy import PolicyConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class YearEndRollover:
    """Outcome of clamping balances across one year boundary."""

    from_year: int
    to_year: int
    standard: float
    flex: float
    lost_standard: float = 0.0
    lost_flex: float = 0.0

    @property
    def lost_anything(self) -> bool:
        return self.lost_standard > 0 or self.lost_flex > 0


def roll_over_year(
    standard: float,
    flex: float,
    from_year: int,
    to_year: int,
    config: PolicyConfig,
) -> YearEndRollover:
    """Clamp (standard, flex) for the move from from_year into to_year.

    Balances already under their caps, including negative ones, carry over
    unchanged.
    """
    carried_standard = min(standard, config.standard_cap)
    carried_flex = min(flex, config.flex_carryover_cap)

    rollover = YearEndRollover(
        from_year=from_year,
        to_year=to_year,
        standard=carried_standard,
        flex=carried_flex,
        lost_standard=standard - carried_standard,
        lost_flex=flex - carried_flex,
    )

    if rollover.lost_anything:
        logger.debug(
            "Year-end rollover %d->%d: lost standard=%.2f flex=%.2f",
            from_year,
            to_year,
            rollover.lost_standard,
            rollover.lost_flex,
        )

    return rollover
