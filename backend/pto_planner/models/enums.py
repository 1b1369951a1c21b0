from __future__ import annotations

import enum


class LedgerEntryType(enum.StrEnum):
    """Kind of entry shown in a balance timeline."""

    INITIAL = "initial"
    ACCRUAL = "accrual"
    VACATION = "vacation"

    @property
    def sort_rank(self) -> int:
        """Display order for entries sharing a date."""
        return _LEDGER_SORT_RANK[self]


_LEDGER_SORT_RANK = {
    LedgerEntryType.INITIAL: 0,
    LedgerEntryType.ACCRUAL: 2,
    LedgerEntryType.VACATION: 3,
}
