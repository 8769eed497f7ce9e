"""Tests for the finance aggregate services."""

from datetime import date
from decimal import Decimal

from finance_tracker.domain.models import (
    AllocationSlice,
    Investment,
    Transaction,
    TransactionKind,
)
from finance_tracker.domain.services import (
    compute_allocation,
    compute_finance_summary,
    compute_portfolio_totals,
    compute_position,
    gain_loss_percentage,
)


def _investment(symbol: str, shares: str, bought: str, now: str) -> Investment:
    return Investment(
        symbol=symbol,
        shares=Decimal(shares),
        purchase_price=Decimal(bought),
        current_price=Decimal(now),
        purchase_date=date(2024, 1, 1),
    )


def _transaction(kind: TransactionKind, amount: str) -> Transaction:
    return Transaction(
        kind=kind,
        amount=Decimal(amount),
        category="Misc",
        description="",
        date=date(2024, 1, 1),
    )


def test_summary_nets_income_against_expenses() -> None:
    summary = compute_finance_summary(
        [
            _transaction(TransactionKind.INCOME, "5000"),
            _transaction(TransactionKind.EXPENSE, "1200"),
        ]
    )

    assert summary.total_income == Decimal("5000")
    assert summary.total_expenses == Decimal("1200")
    assert summary.net_balance == Decimal("3800")


def test_summary_of_nothing_is_zero() -> None:
    summary = compute_finance_summary([])

    assert summary.total_income == 0
    assert summary.total_expenses == 0
    assert summary.net_balance == 0


def test_summary_keeps_cent_precision() -> None:
    """Decimal math avoids binary float drift."""
    summary = compute_finance_summary(
        [
            _transaction(TransactionKind.INCOME, "0.1"),
            _transaction(TransactionKind.INCOME, "0.2"),
        ]
    )

    assert summary.total_income == Decimal("0.3")


def test_position_reports_gain() -> None:
    position = compute_position(_investment("AAPL", "10", "100", "150"))

    assert position.current_value == Decimal("1500")
    assert position.cost_basis == Decimal("1000")
    assert position.gain_loss == Decimal("500")
    assert position.gain_loss_pct == Decimal("50")


def test_position_reports_loss() -> None:
    position = compute_position(_investment("TSLA", "2", "250", "200"))

    assert position.gain_loss == Decimal("-100")
    assert position.gain_loss_pct == Decimal("-20")


def test_zero_cost_basis_has_no_percentage() -> None:
    """A free position has a gain but no meaningful percentage."""
    position = compute_position(_investment("GIFT", "5", "0", "10"))

    assert position.gain_loss == Decimal("50")
    assert position.gain_loss_pct is None
    assert gain_loss_percentage(Decimal("0"), Decimal("0")) is None


def test_portfolio_totals_sum_all_positions() -> None:
    totals = compute_portfolio_totals(
        [
            _investment("AAPL", "10", "100", "150"),
            _investment("TSLA", "2", "250", "200"),
        ]
    )

    assert totals.total_value == Decimal("1900")
    assert totals.total_cost == Decimal("1500")
    assert totals.total_gain_loss == Decimal("400")


def test_allocation_groups_by_symbol_largest_first() -> None:
    slices = compute_allocation(
        [
            _investment("MSFT", "1", "1", "300"),
            _investment("AAPL", "1", "1", "200"),
            _investment("AAPL", "1", "1", "150"),
            _investment("DEAD", "3", "1", "0"),
        ]
    )

    assert slices == [
        AllocationSlice(symbol="AAPL", amount=Decimal("350")),
        AllocationSlice(symbol="MSFT", amount=Decimal("300")),
    ]
