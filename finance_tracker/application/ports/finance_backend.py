"""Port for persisting transactions and investments."""

from typing import Protocol

from finance_tracker.domain.models import (
    Collection,
    Investment,
    RecordId,
    Transaction,
)


Record = Transaction | Investment


class FinanceBackendPort(Protocol):
    """Port exposing create/read/update/delete access to finance records.

    Implementations translate their own failures into
    BackendUnavailableError so callers never see driver exceptions.
    """

    def list_transactions(self, owner_id: str | None) -> list[Transaction]:
        """Return the owner's transactions ordered by date, newest first."""

    def list_investments(self, owner_id: str | None) -> list[Investment]:
        """Return the owner's investments ordered by purchase date, newest first."""

    def insert(self, collection: Collection, record: Record) -> Record:
        """Persist a new record and return it with its assigned id."""

    def replace(
        self,
        collection: Collection,
        record_id: RecordId,
        record: Record,
    ) -> bool:
        """Replace the stored record; return False when nothing matched."""

    def remove(
        self,
        collection: Collection,
        record_id: RecordId,
        owner_id: str | None = None,
    ) -> bool:
        """Delete a record by id; return False when nothing matched."""


__all__ = ["FinanceBackendPort", "Record"]
