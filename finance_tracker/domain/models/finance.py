"""Domain models for derived financial figures."""

from dataclasses import dataclass
from decimal import Decimal

from finance_tracker.domain.models.records import Investment


@dataclass(frozen=True)
class FinanceSummary:
    """Totals derived from a set of transactions.

    Attributes:
        total_income: Sum of income amounts.
        total_expenses: Sum of expense amounts.
        net_balance: Income minus expenses.
    """

    total_income: Decimal
    total_expenses: Decimal
    net_balance: Decimal


@dataclass(frozen=True)
class InvestmentPosition:
    """Investment paired with its derived display figures."""

    investment: Investment
    current_value: Decimal
    cost_basis: Decimal
    gain_loss: Decimal
    gain_loss_pct: Decimal | None


@dataclass(frozen=True)
class PortfolioTotals:
    """Aggregate figures across a set of investments."""

    total_value: Decimal
    total_cost: Decimal

    @property
    def total_gain_loss(self) -> Decimal:
        """Return total_value minus total_cost."""
        return self.total_value - self.total_cost


@dataclass(frozen=True)
class AllocationSlice:
    """Current value held under a single symbol."""

    symbol: str
    amount: Decimal


__all__ = [
    "FinanceSummary",
    "InvestmentPosition",
    "PortfolioTotals",
    "AllocationSlice",
]
