"""Persisted finance records."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum


RecordId = str | int


class TransactionKind(str, Enum):
    """Direction of a transaction."""

    INCOME = "income"
    EXPENSE = "expense"


class Collection(str, Enum):
    """Named record collections handled by a backend."""

    TRANSACTIONS = "transactions"
    INVESTMENTS = "investments"


@dataclass(frozen=True)
class Principal:
    """Authenticated user on whose behalf data is read and written."""

    id: str
    display_name: str | None = None


@dataclass(frozen=True)
class Transaction:
    """Income or expense entry.

    Attributes:
        kind: Income or expense.
        amount: Non-negative amount.
        category: Free-text category.
        description: Free-text description.
        date: Calendar date of the transaction.
        id: Backend- or client-assigned identifier, None for drafts.
        owner_id: Identifier of the owning principal.
    """

    kind: TransactionKind
    amount: Decimal
    category: str
    description: str
    date: date
    id: RecordId | None = None
    owner_id: str | None = None


@dataclass(frozen=True)
class Investment:
    """Holding of a single security.

    Attributes:
        symbol: Ticker symbol, required.
        shares: Number of shares held, strictly positive.
        purchase_price: Price per share paid.
        current_price: Latest known price per share.
        purchase_date: Date of purchase.
        name: Optional display name.
        id: Backend- or client-assigned identifier, None for drafts.
        owner_id: Identifier of the owning principal.
    """

    symbol: str
    shares: Decimal
    purchase_price: Decimal
    current_price: Decimal
    purchase_date: date
    name: str | None = None
    id: RecordId | None = None
    owner_id: str | None = None


__all__ = [
    "RecordId",
    "TransactionKind",
    "Collection",
    "Principal",
    "Transaction",
    "Investment",
]
