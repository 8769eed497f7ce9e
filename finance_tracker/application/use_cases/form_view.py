"""Create-or-edit form state shared by the record views."""

from abc import ABC, abstractmethod
from dataclasses import replace
from datetime import date
from typing import Callable

from finance_tracker.application.use_cases.finance_store import FinanceStore
from finance_tracker.domain.errors import ValidationError
from finance_tracker.domain.models import RecordId


class RecordFormView(ABC):
    """Transient draft editing one record at a time.

    Creating and editing are mutually exclusive: opening one discards the
    other. The draft holds text exactly as typed and is parsed on submit.
    Subclasses provide the draft type and the store operations.
    """

    def __init__(
        self,
        store: FinanceStore,
        today: Callable[[], date] | None = None,
    ) -> None:
        """Initialize the view.

        Args:
            store: Store owning the authoritative collections.
            today: Optional clock used for the default draft date.
        """
        self._store = store
        self._today = today or date.today
        self.is_form_open = False
        self.editing_id: RecordId | None = None
        self.draft = self._empty_draft()

    @property
    def is_editing(self) -> bool:
        return self.editing_id is not None

    def open_create(self) -> None:
        """Open an empty form for a new record."""
        self.editing_id = None
        self.draft = self._empty_draft()
        self.is_form_open = True

    def edit(self, record) -> None:
        """Copy a record into the draft and target it for update."""
        self.draft = self._draft_from_record(record)
        self.editing_id = record.id
        self.is_form_open = True

    def cancel(self) -> None:
        """Discard the draft and close the form."""
        self._reset()

    def update_draft(self, **fields: str) -> None:
        """Overwrite draft fields with raw input text."""
        self.draft = replace(self.draft, **fields)

    async def submit(self):
        """Parse the draft and route it to add or update.

        Returns:
            The record acknowledged by the store.

        Raises:
            ValidationError: When the draft cannot be parsed; the form stays
                open so the input can be corrected.
            FinanceError: Any store failure, with the form left open.
        """
        try:
            record = self._parse_draft(self.draft)
        except ValidationError as exc:
            self._store.report(False, str(exc))
            raise
        if self.is_editing:
            saved = await self._update(replace(record, id=self.editing_id))
        else:
            saved = await self._add(record)
        self._reset()
        return saved

    async def delete(self, record_id: RecordId) -> None:
        """Delete a record immediately."""
        await self._delete(record_id)

    def _reset(self) -> None:
        self.draft = self._empty_draft()
        self.editing_id = None
        self.is_form_open = False

    @abstractmethod
    def _empty_draft(self):
        """Return a blank draft for a new record."""

    @abstractmethod
    def _draft_from_record(self, record):
        """Return a draft holding the record's fields as text."""

    @abstractmethod
    def _parse_draft(self, draft):
        """Turn a draft into a record, raising ValidationError on bad input."""

    @abstractmethod
    async def _add(self, record):
        """Persist a new record through the store."""

    @abstractmethod
    async def _update(self, record):
        """Replace an existing record through the store."""

    @abstractmethod
    async def _delete(self, record_id: RecordId) -> None:
        """Delete a record through the store."""


__all__ = ["RecordFormView"]
