"""Domain services for finance aggregates."""

from collections.abc import Iterable
from decimal import Decimal

from finance_tracker.domain.models import (
    AllocationSlice,
    FinanceSummary,
    Investment,
    InvestmentPosition,
    PortfolioTotals,
    Transaction,
    TransactionKind,
)
from finance_tracker.utils.decimal_utils import coerce_decimal


ZERO = Decimal("0")
HUNDRED = Decimal("100")


def compute_finance_summary(
    transactions: Iterable[Transaction],
) -> FinanceSummary:
    """Compute income, expense and net balance totals.

    Args:
        transactions: Transactions to aggregate.

    Returns:
        FinanceSummary: Totals for the provided transactions.
    """
    total_income = ZERO
    total_expenses = ZERO
    for transaction in transactions:
        amount = coerce_decimal(transaction.amount)
        if transaction.kind is TransactionKind.INCOME:
            total_income += amount
        elif transaction.kind is TransactionKind.EXPENSE:
            total_expenses += amount
    return FinanceSummary(
        total_income=total_income,
        total_expenses=total_expenses,
        net_balance=total_income - total_expenses,
    )


def current_value(investment: Investment) -> Decimal:
    """Return shares multiplied by the current price."""
    return coerce_decimal(investment.shares) * coerce_decimal(
        investment.current_price
    )


def cost_basis(investment: Investment) -> Decimal:
    """Return shares multiplied by the purchase price."""
    return coerce_decimal(investment.shares) * coerce_decimal(
        investment.purchase_price
    )


def gain_loss_percentage(
    gain_loss: Decimal,
    basis: Decimal,
) -> Decimal | None:
    """Return gain/loss as a percentage of the cost basis.

    Args:
        gain_loss: Absolute gain or loss.
        basis: Cost basis the gain is measured against.

    Returns:
        Decimal | None: Percentage, or None when the basis is zero.
    """
    if basis == 0:
        return None
    return gain_loss / basis * HUNDRED


def compute_position(investment: Investment) -> InvestmentPosition:
    """Derive display figures for a single investment."""
    value = current_value(investment)
    basis = cost_basis(investment)
    gain_loss = value - basis
    return InvestmentPosition(
        investment=investment,
        current_value=value,
        cost_basis=basis,
        gain_loss=gain_loss,
        gain_loss_pct=gain_loss_percentage(gain_loss, basis),
    )


def compute_positions(
    investments: Iterable[Investment],
) -> list[InvestmentPosition]:
    """Derive display figures for each investment, preserving order."""
    return [compute_position(investment) for investment in investments]


def compute_portfolio_totals(
    investments: Iterable[Investment],
) -> PortfolioTotals:
    """Compute total value and total cost across investments.

    Args:
        investments: Investments to aggregate.

    Returns:
        PortfolioTotals: Aggregated value and cost.
    """
    total_value = ZERO
    total_cost = ZERO
    for investment in investments:
        total_value += current_value(investment)
        total_cost += cost_basis(investment)
    return PortfolioTotals(total_value=total_value, total_cost=total_cost)


def compute_allocation(
    investments: Iterable[Investment],
) -> list[AllocationSlice]:
    """Group current value by symbol, largest holdings first.

    Args:
        investments: Investments to group.

    Returns:
        list[AllocationSlice]: One slice per symbol with non-zero value.
    """
    totals: dict[str, Decimal] = {}
    for investment in investments:
        value = current_value(investment)
        totals[investment.symbol] = totals.get(investment.symbol, ZERO) + value
    slices = [
        AllocationSlice(symbol=symbol, amount=amount)
        for symbol, amount in totals.items()
        if amount != 0
    ]
    return sorted(slices, key=lambda item: (-item.amount, item.symbol))


__all__ = [
    "compute_finance_summary",
    "current_value",
    "cost_basis",
    "gain_loss_percentage",
    "compute_position",
    "compute_positions",
    "compute_portfolio_totals",
    "compute_allocation",
]
