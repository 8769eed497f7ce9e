"""Investment portfolio view: form draft plus derived figures."""

from dataclasses import dataclass

from finance_tracker.application.use_cases.form_view import RecordFormView
from finance_tracker.domain.models import (
    AllocationSlice,
    Investment,
    InvestmentPosition,
    PortfolioTotals,
    RecordId,
)
from finance_tracker.domain.services import (
    compute_allocation,
    compute_portfolio_totals,
    compute_positions,
    normalize_optional_text,
    normalize_symbol,
    parse_date,
    parse_decimal,
)


@dataclass(frozen=True)
class InvestmentDraft:
    """Raw form input for an investment."""

    symbol: str = ""
    name: str = ""
    shares: str = ""
    purchase_price: str = ""
    current_price: str = ""
    purchase_date: str = ""


class InvestmentView(RecordFormView):
    """Render investments with gain/loss figures and edit one at a time.

    Derived figures are recomputed from the store on every call and never
    cached on the records.
    """

    def positions(self) -> list[InvestmentPosition]:
        """Return one row of derived figures per investment."""
        return compute_positions(self._store.investments)

    def totals(self) -> PortfolioTotals:
        """Return total value and cost across all investments."""
        return compute_portfolio_totals(self._store.investments)

    def allocation(self) -> list[AllocationSlice]:
        return compute_allocation(self._store.investments)

    def _empty_draft(self) -> InvestmentDraft:
        return InvestmentDraft(purchase_date=self._today().isoformat())

    def _draft_from_record(self, record: Investment) -> InvestmentDraft:
        return InvestmentDraft(
            symbol=record.symbol,
            name=record.name or "",
            shares=str(record.shares),
            purchase_price=str(record.purchase_price),
            current_price=str(record.current_price),
            purchase_date=record.purchase_date.isoformat(),
        )

    def _parse_draft(self, draft: InvestmentDraft) -> Investment:
        return Investment(
            symbol=normalize_symbol(draft.symbol),
            name=normalize_optional_text(draft.name),
            shares=parse_decimal(draft.shares, "Shares"),
            purchase_price=parse_decimal(
                draft.purchase_price,
                "Purchase price",
            ),
            current_price=parse_decimal(draft.current_price, "Current price"),
            purchase_date=parse_date(draft.purchase_date, "Purchase date"),
        )

    async def _add(self, record: Investment) -> Investment:
        return await self._store.add_investment(record)

    async def _update(self, record: Investment) -> Investment:
        return await self._store.update_investment(record)

    async def _delete(self, record_id: RecordId) -> None:
        await self._store.delete_investment(record_id)


__all__ = ["InvestmentView", "InvestmentDraft"]
