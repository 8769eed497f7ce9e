"""Domain services package."""

from .finance import (
    compute_allocation,
    compute_finance_summary,
    compute_portfolio_totals,
    compute_position,
    compute_positions,
    cost_basis,
    current_value,
    gain_loss_percentage,
)
from .normalization import (
    normalize_optional_text,
    normalize_symbol,
    normalize_text,
)
from .parsing import parse_date, parse_decimal, parse_kind
from .validation import validate_investment, validate_transaction

__all__ = [
    "compute_allocation",
    "compute_finance_summary",
    "compute_portfolio_totals",
    "compute_position",
    "compute_positions",
    "cost_basis",
    "current_value",
    "gain_loss_percentage",
    "normalize_optional_text",
    "normalize_symbol",
    "normalize_text",
    "parse_date",
    "parse_decimal",
    "parse_kind",
    "validate_investment",
    "validate_transaction",
]
