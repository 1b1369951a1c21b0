from pto_planner.models.enums import LedgerEntryType

__all__ = [
    "LedgerEntryType",
]
