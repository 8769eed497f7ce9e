"""Application use cases package."""

from .finance_store import FinanceStore, StoreState
from .form_view import RecordFormView
from .investment_view import InvestmentDraft, InvestmentView
from .transaction_view import TransactionDraft, TransactionView

__all__ = [
    "FinanceStore",
    "StoreState",
    "RecordFormView",
    "InvestmentDraft",
    "InvestmentView",
    "TransactionDraft",
    "TransactionView",
]
