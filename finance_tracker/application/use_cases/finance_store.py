"""Store synchronizing transactions and investments with a backend.

The store is the single owner of the in-memory collections. Reads replace
them wholesale; writes are applied only after the backend confirms them.
Backend calls are synchronous adapters executed with ``asyncio.to_thread``
so the event loop driving the UI never blocks on I/O.
"""

import asyncio
from dataclasses import replace
from enum import Enum
from typing import Callable

from finance_tracker.application.ports.auth import PrincipalProviderPort
from finance_tracker.application.ports.finance_backend import (
    FinanceBackendPort,
    Record,
)
from finance_tracker.application.ports.notifications import NotifierPort
from finance_tracker.domain.errors import (
    AuthRequiredError,
    FinanceError,
    NotFoundError,
    StoreBusyError,
)
from finance_tracker.domain.models import (
    Collection,
    FinanceSummary,
    Investment,
    Principal,
    RecordId,
    Transaction,
)
from finance_tracker.domain.services import (
    compute_finance_summary,
    validate_investment,
    validate_transaction,
)
from finance_tracker.infrastructure.logging.logger import get_app_logger


class StoreState(str, Enum):
    """Lifecycle of a FinanceStore instance."""

    UNINITIALIZED = "uninitialized"
    LOADING = "loading"
    READY = "ready"
    EMPTY = "empty"


_LABELS = {
    Collection.TRANSACTIONS: "Transaction",
    Collection.INVESTMENTS: "Investment",
}

_VALIDATORS: dict[Collection, Callable[[Record], None]] = {
    Collection.TRANSACTIONS: validate_transaction,
    Collection.INVESTMENTS: validate_investment,
}


class FinanceStore:
    """Single source of truth for the current principal's records.

    Writes issued while a load is in flight are rejected with
    StoreBusyError. When loads overlap, only the most recently started one
    applies its result.
    """

    def __init__(
        self,
        backend: FinanceBackendPort,
        principal_provider: PrincipalProviderPort,
        notifier: NotifierPort | None = None,
        logger=None,
    ) -> None:
        """Initialize the store.

        Args:
            backend: Persistence backend adapter.
            principal_provider: Collaborator supplying the current principal.
            notifier: Optional collaborator informed of write outcomes.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._backend = backend
        self._principal_provider = principal_provider
        self._notifier = notifier
        self._logger = logger or get_app_logger()
        self._collections: dict[Collection, list[Record]] = {
            Collection.TRANSACTIONS: [],
            Collection.INVESTMENTS: [],
        }
        self._state = StoreState.UNINITIALIZED
        self._settled_state = StoreState.UNINITIALIZED
        self._load_generation = 0
        self._loaded_principal_id: str | None = None

    @property
    def state(self) -> StoreState:
        return self._state

    @property
    def loaded_principal_id(self) -> str | None:
        """Principal id the current collections were loaded for."""
        return self._loaded_principal_id

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        return tuple(self._collections[Collection.TRANSACTIONS])

    @property
    def investments(self) -> tuple[Investment, ...]:
        return tuple(self._collections[Collection.INVESTMENTS])

    def summary(self) -> FinanceSummary:
        """Return income, expense and net balance totals."""
        return compute_finance_summary(self._collections[Collection.TRANSACTIONS])

    def report(self, success: bool, message: str) -> None:
        """Forward an outcome to the notification collaborator.

        Args:
            success: Whether the operation succeeded.
            message: Human-readable description.
        """
        if success:
            self._logger.info(message)
        else:
            self._logger.warning(message)
        if self._notifier is not None:
            self._notifier.notify(success, message)

    async def load(self) -> None:
        """Replace both collections with the principal's persisted records.

        Raises:
            BackendUnavailableError: When the backend cannot be read. Any
                other error from the backend is re-raised unchanged; in both
                cases the store returns to its previous settled state.
        """
        self._load_generation += 1
        generation = self._load_generation
        self._state = StoreState.LOADING

        principal = self._principal_provider.current_principal()
        if principal is None:
            self._logger.info("No principal signed in; loading empty data")
            self._apply_load(generation, [], [], None, StoreState.EMPTY)
            return

        try:
            transactions = await self._call(
                self._backend.list_transactions,
                principal.id,
            )
            investments = await self._call(
                self._backend.list_investments,
                principal.id,
            )
        except Exception as exc:
            if generation == self._load_generation:
                self._state = self._settled_state
            self._logger.error(
                f"Failed to load data for principal={principal.id}: {exc}"
            )
            raise

        if self._apply_load(
            generation,
            transactions,
            investments,
            principal.id,
            StoreState.READY,
        ):
            self._logger.info(
                f"Loaded {len(transactions)} transactions and "
                f"{len(investments)} investments for principal={principal.id}"
            )

    async def add_transaction(self, draft: Transaction) -> Transaction:
        """Persist a new transaction and prepend it to the collection."""
        return await self._add(Collection.TRANSACTIONS, draft)

    async def add_investment(self, draft: Investment) -> Investment:
        """Persist a new investment and prepend it to the collection."""
        return await self._add(Collection.INVESTMENTS, draft)

    async def update_transaction(self, record: Transaction) -> Transaction:
        """Replace a stored transaction by id, keeping its position."""
        return await self._update(Collection.TRANSACTIONS, record)

    async def update_investment(self, record: Investment) -> Investment:
        """Replace a stored investment by id, keeping its position."""
        return await self._update(Collection.INVESTMENTS, record)

    async def delete_transaction(self, record_id: RecordId) -> None:
        """Delete a transaction by id; unknown ids are a no-op."""
        await self._delete(Collection.TRANSACTIONS, record_id)

    async def delete_investment(self, record_id: RecordId) -> None:
        """Delete an investment by id; unknown ids are a no-op."""
        await self._delete(Collection.INVESTMENTS, record_id)

    async def _add(self, collection: Collection, draft: Record) -> Record:
        label = _LABELS[collection]
        try:
            principal = self._require_writable(label, "add")
            record = replace(draft, id=None, owner_id=principal.id)
            _VALIDATORS[collection](record)
            saved = await self._call(self._backend.insert, collection, record)
        except FinanceError as exc:
            self.report(False, f"Failed to add {label.lower()}: {exc}")
            raise

        items = self._collections[collection]
        self._collections[collection] = [saved] + [
            item for item in items if item.id != saved.id
        ]
        self.report(True, f"{label} added")
        return saved

    async def _update(self, collection: Collection, record: Record) -> Record:
        label = _LABELS[collection]
        try:
            principal = self._require_writable(label, "update")
            if not self._contains(collection, record.id):
                raise NotFoundError(f"{label} {record.id!r} does not exist")
            stamped = replace(record, owner_id=principal.id)
            _VALIDATORS[collection](stamped)
            replaced = await self._call(
                self._backend.replace,
                collection,
                stamped.id,
                stamped,
            )
            if not replaced:
                raise NotFoundError(
                    f"{label} {record.id!r} no longer exists in the backend"
                )
        except FinanceError as exc:
            self.report(False, f"Failed to update {label.lower()}: {exc}")
            raise

        self._collections[collection] = [
            stamped if item.id == stamped.id else item
            for item in self._collections[collection]
        ]
        self.report(True, f"{label} updated")
        return stamped

    async def _delete(self, collection: Collection, record_id: RecordId) -> None:
        label = _LABELS[collection]
        try:
            principal = self._require_writable(label, "delete")
            removed = await self._call(
                self._backend.remove,
                collection,
                record_id,
                principal.id,
            )
        except FinanceError as exc:
            self.report(False, f"Failed to delete {label.lower()}: {exc}")
            raise

        if not removed:
            self._logger.info(
                f"{label} {record_id!r} was not found; delete is a no-op"
            )
        self._collections[collection] = [
            item
            for item in self._collections[collection]
            if item.id != record_id
        ]
        self.report(True, f"{label} deleted")

    def _require_writable(self, label: str, action: str) -> Principal:
        if self._state is StoreState.LOADING:
            raise StoreBusyError(
                f"Cannot {action} {label.lower()} while data is loading"
            )
        principal = self._principal_provider.current_principal()
        if principal is None:
            raise AuthRequiredError(
                f"Sign in to {action} a {label.lower()}"
            )
        return principal

    def _contains(self, collection: Collection, record_id) -> bool:
        if record_id is None:
            return False
        return any(
            item.id == record_id for item in self._collections[collection]
        )

    def _apply_load(
        self,
        generation: int,
        transactions: list[Transaction],
        investments: list[Investment],
        principal_id: str | None,
        state: StoreState,
    ) -> bool:
        if generation != self._load_generation:
            self._logger.debug(
                f"Discarding stale load generation={generation}"
            )
            return False
        self._collections = {
            Collection.TRANSACTIONS: list(transactions),
            Collection.INVESTMENTS: list(investments),
        }
        self._loaded_principal_id = principal_id
        self._state = state
        self._settled_state = state
        return True

    @staticmethod
    async def _call(func, *args):
        return await asyncio.to_thread(func, *args)


__all__ = ["FinanceStore", "StoreState"]
