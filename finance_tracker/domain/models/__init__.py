"""Domain models package."""

from .finance import (
    AllocationSlice,
    FinanceSummary,
    InvestmentPosition,
    PortfolioTotals,
)
from .records import (
    Collection,
    Investment,
    Principal,
    RecordId,
    Transaction,
    TransactionKind,
)

__all__ = [
    "AllocationSlice",
    "Collection",
    "FinanceSummary",
    "Investment",
    "InvestmentPosition",
    "PortfolioTotals",
    "Principal",
    "RecordId",
    "Transaction",
    "TransactionKind",
]
