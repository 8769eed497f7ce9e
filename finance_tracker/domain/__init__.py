"""Domain package for business rules and core models."""

from .constants import (
    DEFAULT_INVESTMENTS_KEY,
    DEFAULT_TRANSACTIONS_KEY,
    LOCAL_PRINCIPAL_ID,
)
from .errors import (
    AuthRequiredError,
    BackendUnavailableError,
    FinanceError,
    NotFoundError,
    StoreBusyError,
    ValidationError,
)
from .models import (
    AllocationSlice,
    Collection,
    FinanceSummary,
    Investment,
    InvestmentPosition,
    PortfolioTotals,
    Principal,
    RecordId,
    Transaction,
    TransactionKind,
)
from .services import (
    compute_allocation,
    compute_finance_summary,
    compute_portfolio_totals,
    compute_position,
    compute_positions,
    validate_investment,
    validate_transaction,
)

__all__ = [
    "DEFAULT_INVESTMENTS_KEY",
    "DEFAULT_TRANSACTIONS_KEY",
    "LOCAL_PRINCIPAL_ID",
    "AuthRequiredError",
    "BackendUnavailableError",
    "FinanceError",
    "NotFoundError",
    "StoreBusyError",
    "ValidationError",
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
    "compute_allocation",
    "compute_finance_summary",
    "compute_portfolio_totals",
    "compute_position",
    "compute_positions",
    "validate_investment",
    "validate_transaction",
]
