"""Local-only persistence keeping records in a single JSON document.

The document maps two namespaced keys to serialized record lists, the way a
browser's local storage holds one snapshot per key. There is a single
implicit principal, so owner ids are stored but never used for filtering.
"""

import dataclasses
from datetime import date
from decimal import InvalidOperation
import json
import os
from pathlib import Path
import threading
import time
from typing import Callable

from finance_tracker.application.ports.finance_backend import (
    FinanceBackendPort,
    Record,
)
from finance_tracker.domain.constants import (
    DEFAULT_INVESTMENTS_KEY,
    DEFAULT_TRANSACTIONS_KEY,
)
from finance_tracker.domain.errors import BackendUnavailableError
from finance_tracker.domain.models import (
    Collection,
    Investment,
    RecordId,
    Transaction,
    TransactionKind,
)
from finance_tracker.infrastructure.logging.logger import get_app_logger
from finance_tracker.utils.decimal_utils import coerce_decimal


def transaction_to_dict(record: Transaction) -> dict:
    return {
        "id": record.id,
        "ownerId": record.owner_id,
        "type": record.kind.value,
        "amount": str(record.amount),
        "category": record.category,
        "description": record.description,
        "date": record.date.isoformat(),
    }


def transaction_from_dict(payload: dict) -> Transaction:
    return Transaction(
        id=payload.get("id"),
        owner_id=payload.get("ownerId"),
        kind=TransactionKind(payload["type"]),
        amount=coerce_decimal(payload["amount"]),
        category=payload.get("category") or "",
        description=payload.get("description") or "",
        date=date.fromisoformat(payload["date"]),
    )


def investment_to_dict(record: Investment) -> dict:
    return {
        "id": record.id,
        "ownerId": record.owner_id,
        "symbol": record.symbol,
        "name": record.name,
        "shares": str(record.shares),
        "purchasePrice": str(record.purchase_price),
        "currentPrice": str(record.current_price),
        "purchaseDate": record.purchase_date.isoformat(),
    }


def investment_from_dict(payload: dict) -> Investment:
    return Investment(
        id=payload.get("id"),
        owner_id=payload.get("ownerId"),
        symbol=payload["symbol"],
        name=payload.get("name"),
        shares=coerce_decimal(payload["shares"]),
        purchase_price=coerce_decimal(payload["purchasePrice"]),
        current_price=coerce_decimal(payload["currentPrice"]),
        purchase_date=date.fromisoformat(payload["purchaseDate"]),
    )


_SERIALIZERS = {
    Collection.TRANSACTIONS: transaction_to_dict,
    Collection.INVESTMENTS: investment_to_dict,
}


class LocalStorageFinanceBackend(FinanceBackendPort):
    """Finance backend persisting snapshots to a local JSON document."""

    def __init__(
        self,
        storage_path: Path | str,
        transactions_key: str = DEFAULT_TRANSACTIONS_KEY,
        investments_key: str = DEFAULT_INVESTMENTS_KEY,
        logger=None,
        clock: Callable[[], int] = time.time_ns,
    ) -> None:
        """Initialize the backend.

        Args:
            storage_path: JSON document holding both collections.
            transactions_key: Key under which transactions are stored.
            investments_key: Key under which investments are stored.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Nanosecond clock used to derive record ids.
        """
        if transactions_key == investments_key:
            raise ValueError("Transactions and investments need distinct keys")
        self._path = Path(storage_path)
        self._keys = {
            Collection.TRANSACTIONS: transactions_key,
            Collection.INVESTMENTS: investments_key,
        }
        self._logger = logger or get_app_logger()
        self._clock = clock
        self._lock = threading.Lock()

    def list_transactions(self, owner_id: str | None) -> list[Transaction]:
        """Return every stored transaction, newest first."""
        with self._lock:
            items = self._read_snapshot().get(
                self._keys[Collection.TRANSACTIONS], []
            )
        records = self._decode(items, transaction_from_dict)
        return sorted(records, key=lambda record: record.date, reverse=True)

    def list_investments(self, owner_id: str | None) -> list[Investment]:
        """Return every stored investment, newest purchase first."""
        with self._lock:
            items = self._read_snapshot().get(
                self._keys[Collection.INVESTMENTS], []
            )
        records = self._decode(items, investment_from_dict)
        return sorted(
            records,
            key=lambda record: record.purchase_date,
            reverse=True,
        )

    def insert(self, collection: Collection, record: Record) -> Record:
        """Prepend a record with a client-generated id."""
        key = self._keys[collection]
        with self._lock:
            snapshot = self._read_snapshot()
            items = snapshot.get(key, [])
            saved = dataclasses.replace(record, id=self._next_id(items))
            snapshot[key] = [_SERIALIZERS[collection](saved)] + items
            self._write_snapshot(snapshot)
        return saved

    def replace(
        self,
        collection: Collection,
        record_id: RecordId,
        record: Record,
    ) -> bool:
        """Replace a record by id; a missing id is a no-op."""
        key = self._keys[collection]
        payload = _SERIALIZERS[collection](
            dataclasses.replace(record, id=record_id)
        )
        with self._lock:
            snapshot = self._read_snapshot()
            items = snapshot.get(key, [])
            if not any(item.get("id") == record_id for item in items):
                self._logger.info(
                    f"No local {collection.value} record with id={record_id}"
                )
                return True
            snapshot[key] = [
                payload if item.get("id") == record_id else item
                for item in items
            ]
            self._write_snapshot(snapshot)
        return True

    def remove(
        self,
        collection: Collection,
        record_id: RecordId,
        owner_id: str | None = None,
    ) -> bool:
        """Delete a record by id; a missing id is a no-op."""
        key = self._keys[collection]
        with self._lock:
            snapshot = self._read_snapshot()
            items = snapshot.get(key, [])
            remaining = [item for item in items if item.get("id") != record_id]
            if len(remaining) != len(items):
                snapshot[key] = remaining
                self._write_snapshot(snapshot)
        return True

    def _decode(self, items: list[dict], decoder) -> list:
        try:
            return [decoder(item) for item in items]
        except (KeyError, TypeError, ValueError, InvalidOperation) as exc:
            self._logger.error(
                f"Malformed record in local storage at {self._path}: {exc}"
            )
            raise BackendUnavailableError(
                f"Local storage at {self._path} holds a malformed record"
            ) from exc

    def _next_id(self, items: list[dict]) -> int:
        candidate = self._clock() // 1_000_000
        existing = [item["id"] for item in items if isinstance(item.get("id"), int)]
        if existing and candidate <= max(existing):
            candidate = max(existing) + 1
        return candidate

    def _read_snapshot(self) -> dict:
        if not self._path.exists():
            return {}
        try:
            snapshot = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            self._logger.error(
                f"Failed to read local storage at {self._path}: {exc}"
            )
            raise BackendUnavailableError(
                f"Local storage at {self._path} is unreadable"
            ) from exc
        if not isinstance(snapshot, dict):
            raise BackendUnavailableError(
                f"Local storage at {self._path} is not a JSON object"
            )
        return snapshot

    def _write_snapshot(self, snapshot: dict) -> None:
        tmp_path = self._path.with_name(f"{self._path.name}.tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(
                json.dumps(snapshot, indent=2),
                encoding="utf-8",
            )
            os.replace(tmp_path, self._path)
        except OSError as exc:
            self._logger.error(
                f"Failed to write local storage at {self._path}: {exc}"
            )
            raise BackendUnavailableError(
                f"Local storage at {self._path} is not writable"
            ) from exc


__all__ = [
    "LocalStorageFinanceBackend",
    "transaction_to_dict",
    "transaction_from_dict",
    "investment_to_dict",
    "investment_from_dict",
]
