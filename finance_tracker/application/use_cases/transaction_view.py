"""Income and expense view built on the shared form state."""

from dataclasses import dataclass

from finance_tracker.application.use_cases.form_view import RecordFormView
from finance_tracker.domain.models import (
    FinanceSummary,
    RecordId,
    Transaction,
    TransactionKind,
)
from finance_tracker.domain.services import (
    normalize_text,
    parse_date,
    parse_decimal,
    parse_kind,
)


@dataclass(frozen=True)
class TransactionDraft:
    """Raw form input for a transaction."""

    kind: str = TransactionKind.EXPENSE.value
    amount: str = ""
    category: str = ""
    description: str = ""
    date: str = ""


class TransactionView(RecordFormView):
    """List transactions with their summary and edit one at a time."""

    def transactions(self) -> tuple[Transaction, ...]:
        return self._store.transactions

    def summary(self) -> FinanceSummary:
        return self._store.summary()

    def _empty_draft(self) -> TransactionDraft:
        return TransactionDraft(date=self._today().isoformat())

    def _draft_from_record(self, record: Transaction) -> TransactionDraft:
        return TransactionDraft(
            kind=record.kind.value,
            amount=str(record.amount),
            category=record.category,
            description=record.description,
            date=record.date.isoformat(),
        )

    def _parse_draft(self, draft: TransactionDraft) -> Transaction:
        return Transaction(
            kind=parse_kind(draft.kind),
            amount=parse_decimal(draft.amount, "Amount"),
            category=normalize_text(draft.category),
            description=normalize_text(draft.description),
            date=parse_date(draft.date, "Date"),
        )

    async def _add(self, record: Transaction) -> Transaction:
        return await self._store.add_transaction(record)

    async def _update(self, record: Transaction) -> Transaction:
        return await self._store.update_transaction(record)

    async def _delete(self, record_id: RecordId) -> None:
        await self._store.delete_transaction(record_id)


__all__ = ["TransactionView", "TransactionDraft"]
