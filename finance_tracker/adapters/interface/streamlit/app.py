"""Streamlit entry point for the finance tracker."""

import asyncio
from collections.abc import Coroutine, Sequence
from dataclasses import dataclass
from decimal import Decimal

import altair as alt
import streamlit as st

from finance_tracker.application.use_cases.finance_store import (
    FinanceStore,
    StoreState,
)
from finance_tracker.application.use_cases.investment_view import (
    InvestmentView,
)
from finance_tracker.application.use_cases.transaction_view import (
    TransactionView,
)
from finance_tracker.domain.errors import FinanceError
from finance_tracker.domain.models import (
    AllocationSlice,
    InvestmentPosition,
    PortfolioTotals,
    TransactionKind,
)
from finance_tracker.infrastructure.auth import StaticPrincipalProvider
from finance_tracker.infrastructure.container import (
    build_finance_store,
    build_principal_provider,
)
from finance_tracker.infrastructure.logging.logger import get_app_logger
from finance_tracker.infrastructure.settings import FinanceSettings


_SESSION_KEY = "finance_tracker_session"


class SessionNotifier:
    """Notifier queuing outcomes until the next Streamlit run."""

    def __init__(self) -> None:
        self._messages: list[tuple[bool, str]] = []

    def notify(self, success: bool, message: str) -> None:
        self._messages.append((success, message))

    def drain(self) -> list[tuple[bool, str]]:
        """Return and clear the queued outcomes."""
        messages, self._messages = self._messages, []
        return messages


@dataclass
class _Session:
    settings: FinanceSettings
    principals: StaticPrincipalProvider
    notifier: SessionNotifier
    store: FinanceStore
    transaction_view: TransactionView
    investment_view: InvestmentView


def _build_session() -> _Session:
    """Wire a store and its views for one browser session."""
    settings = FinanceSettings.from_env()
    principals = build_principal_provider(settings)
    notifier = SessionNotifier()
    store = build_finance_store(
        settings,
        principal_provider=principals,
        notifier=notifier,
    )
    return _Session(
        settings=settings,
        principals=principals,
        notifier=notifier,
        store=store,
        transaction_view=TransactionView(store),
        investment_view=InvestmentView(store),
    )


def _get_session() -> _Session:
    if _SESSION_KEY not in st.session_state:
        st.session_state[_SESSION_KEY] = _build_session()
    return st.session_state[_SESSION_KEY]


def _run(action: Coroutine) -> bool:
    """Drive a store coroutine to completion.

    Failures were already reported through the notifier, so they are only
    logged here.

    Returns:
        bool: True when the action succeeded.
    """
    try:
        asyncio.run(action)
    except FinanceError as exc:
        get_app_logger().warning(f"Action failed: {exc}")
        return False
    return True


def _ensure_loaded(session: _Session) -> None:
    """Load data on first use and whenever the principal changes."""
    principal = session.principals.current_principal()
    principal_id = principal.id if principal else None
    store = session.store
    if (
        store.state is StoreState.UNINITIALIZED
        or store.loaded_principal_id != principal_id
    ):
        _run(store.load())


def _format_currency(value: Decimal) -> str:
    """Format currency values for display."""
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def _format_signed_currency(value: Decimal) -> str:
    """Format a gain or loss with an explicit sign."""
    sign = "+" if value >= 0 else "-"
    return f"{sign}${abs(value):,.2f}"


def _format_percentage(value: Decimal | None) -> str:
    """Format a gain/loss percentage, or n/a without a cost basis."""
    if value is None:
        return "n/a"
    sign = "+" if value >= 0 else ""
    return f"{sign}{value:.2f}%"


def _render_notifications(notifier: SessionNotifier) -> None:
    for success, message in notifier.drain():
        if success:
            st.success(message)
        else:
            st.error(message)


def _render_sidebar(session: _Session) -> str:
    """Render navigation and the sign-in stand-in; return the page name."""
    page = st.sidebar.selectbox("Page", ["Transactions", "Investments"])
    principal = session.principals.current_principal()
    current_id = principal.id if principal else ""
    entered_id = st.sidebar.text_input("Signed in as", value=current_id)
    cleaned_id = entered_id.strip()
    if cleaned_id != current_id:
        if cleaned_id:
            session.principals.sign_in(cleaned_id)
        else:
            session.principals.sign_out()
    st.sidebar.caption(f"Backend: {session.settings.backend}")
    if st.sidebar.button("Reload data"):
        _run(session.store.load())
    return page


def _render_transaction_form(view: TransactionView) -> None:
    draft = view.draft
    kinds = [kind.value for kind in TransactionKind]
    with st.form("transaction_form"):
        st.subheader(
            "Edit Transaction" if view.is_editing else "Add New Transaction"
        )
        left, right = st.columns(2)
        kind = left.selectbox(
            "Type",
            options=kinds,
            index=kinds.index(draft.kind) if draft.kind in kinds else 0,
        )
        amount = right.text_input("Amount", value=draft.amount)
        category = left.text_input(
            "Category",
            value=draft.category,
            placeholder="e.g., Groceries",
        )
        tx_date = right.text_input(
            "Date",
            value=draft.date,
            help="YYYY-MM-DD",
        )
        description = st.text_input("Description", value=draft.description)
        submitted = st.form_submit_button(
            "Update Transaction" if view.is_editing else "Add Transaction"
        )
        cancelled = st.form_submit_button("Cancel")
    if cancelled:
        view.cancel()
        st.rerun()
    if submitted:
        view.update_draft(
            kind=kind,
            amount=amount,
            category=category,
            description=description,
            date=tx_date,
        )
        _run(view.submit())
        st.rerun()


def _render_transactions_page(view: TransactionView) -> None:
    st.subheader("Transactions")
    summary = view.summary()
    income_col, expenses_col, balance_col = st.columns(3)
    income_col.metric("Total Income", _format_currency(summary.total_income))
    expenses_col.metric(
        "Total Expenses",
        _format_currency(summary.total_expenses),
    )
    balance_col.metric("Net Balance", _format_currency(summary.net_balance))

    if st.button("Add Transaction"):
        view.open_create()
        st.rerun()
    if view.is_form_open:
        _render_transaction_form(view)

    transactions = view.transactions()
    if not transactions:
        st.info("No transactions recorded yet.")
        return
    for transaction in transactions:
        cols = st.columns([2, 2, 3, 2, 1, 1])
        cols[0].write(transaction.date.isoformat())
        cols[1].write(transaction.category or "-")
        cols[2].write(transaction.description or "-")
        sign = "+" if transaction.kind is TransactionKind.INCOME else "-"
        cols[3].write(f"{sign}{_format_currency(transaction.amount)}")
        if cols[4].button("Edit", key=f"edit-transaction-{transaction.id}"):
            view.edit(transaction)
            st.rerun()
        if cols[5].button("Delete", key=f"delete-transaction-{transaction.id}"):
            _run(view.delete(transaction.id))
            st.rerun()


def _render_investment_form(view: InvestmentView) -> None:
    draft = view.draft
    with st.form("investment_form"):
        st.subheader(
            "Edit Investment" if view.is_editing else "Add New Investment"
        )
        left, right = st.columns(2)
        symbol = left.text_input(
            "Stock Symbol",
            value=draft.symbol,
            placeholder="e.g., AAPL",
        )
        name = right.text_input(
            "Company Name",
            value=draft.name,
            placeholder="e.g., Apple Inc.",
        )
        shares = left.text_input("Shares", value=draft.shares)
        purchase_price = right.text_input(
            "Purchase Price",
            value=draft.purchase_price,
        )
        current_price = left.text_input(
            "Current Price",
            value=draft.current_price,
        )
        purchase_date = right.text_input(
            "Purchase Date",
            value=draft.purchase_date,
            help="YYYY-MM-DD",
        )
        submitted = st.form_submit_button(
            "Update Investment" if view.is_editing else "Add Investment"
        )
        cancelled = st.form_submit_button("Cancel")
    if cancelled:
        view.cancel()
        st.rerun()
    if submitted:
        view.update_draft(
            symbol=symbol,
            name=name,
            shares=shares,
            purchase_price=purchase_price,
            current_price=current_price,
            purchase_date=purchase_date,
        )
        _run(view.submit())
        st.rerun()


def _render_portfolio_totals(totals: PortfolioTotals) -> None:
    value_col, cost_col, gain_col = st.columns(3)
    value_col.metric(
        "Total Investment Value",
        _format_currency(totals.total_value),
    )
    cost_col.metric("Total Cost", _format_currency(totals.total_cost))
    gain_col.metric(
        "Total Gain/Loss",
        _format_signed_currency(totals.total_gain_loss),
    )


def _render_positions(
    view: InvestmentView,
    positions: Sequence[InvestmentPosition],
) -> None:
    header = st.columns([2, 1, 2, 2, 2, 2, 1, 1])
    for col, label in zip(
        header,
        ["Symbol", "Shares", "Purchase", "Current", "Value", "Gain/Loss"],
    ):
        col.caption(label)
    for position in positions:
        investment = position.investment
        cols = st.columns([2, 1, 2, 2, 2, 2, 1, 1])
        cols[0].write(
            f"**{investment.symbol}** {investment.name or ''}".strip()
        )
        cols[1].write(f"{investment.shares:,}")
        cols[2].write(_format_currency(investment.purchase_price))
        cols[3].write(_format_currency(investment.current_price))
        cols[4].write(_format_currency(position.current_value))
        cols[5].write(
            f"{_format_signed_currency(position.gain_loss)} "
            f"({_format_percentage(position.gain_loss_pct)})"
        )
        if cols[6].button("Edit", key=f"edit-investment-{investment.id}"):
            view.edit(investment)
            st.rerun()
        if cols[7].button("Delete", key=f"delete-investment-{investment.id}"):
            _run(view.delete(investment.id))
            st.rerun()


def _prepare_donut_chart_data(
    slices: Sequence[AllocationSlice],
    max_categories: int = 6,
) -> tuple[list[dict[str, str | float]], Decimal]:
    """Prepare donut chart data with a Top-N + Other grouping.

    Args:
        slices: Current value per symbol.
        max_categories: Maximum symbols to keep before grouping into Other.

    Returns:
        Tuple with Altair-ready chart data and the total amount.
    """
    sorted_items = sorted(slices, key=lambda item: item.amount, reverse=True)
    top_items = list(sorted_items[:max_categories])
    other_items = sorted_items[max_categories:]
    other_amount = sum(
        (item.amount for item in other_items),
        start=Decimal("0"),
    )
    if other_items and other_amount != 0:
        top_items.append(AllocationSlice(symbol="Other", amount=other_amount))
    total_amount = sum(
        (item.amount for item in sorted_items),
        start=Decimal("0"),
    )
    data: list[dict[str, str | float]] = []
    for item in top_items:
        share = (
            (item.amount / total_amount) * Decimal("100")
            if total_amount
            else Decimal("0")
        )
        data.append(
            {
                "symbol": item.symbol,
                "amount": float(item.amount),
                "amount_label": _format_currency(item.amount),
                "share_label": f"{share:.1f}%",
            }
        )
    return data, total_amount


def _render_allocation_chart(
    slices: Sequence[AllocationSlice],
    chart_size: int = 320,
) -> None:
    """Render a donut chart of current value by symbol."""
    if not slices:
        return
    data, _ = _prepare_donut_chart_data(slices)
    hover = alt.selection_point(
        name="hover",
        fields=["symbol"],
        on="mouseover",
        clear="mouseout",
        empty=False,
    )
    base = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.4,
        cornerRadius=8,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "symbol:N",
            legend=alt.Legend(orient="bottom", title=None, columns=3),
        ),
        opacity=alt.condition(hover, alt.value(1.0), alt.value(0.6)),
        order=alt.Order("amount:Q", sort="descending"),
        tooltip=[
            alt.Tooltip("symbol:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    )
    chart = base.add_params(hover).properties(
        width=chart_size,
        height=chart_size,
    )
    st.subheader("Allocation by Symbol")
    st.altair_chart(chart)


def _render_investments_page(view: InvestmentView) -> None:
    st.subheader("Investment Portfolio")
    _render_portfolio_totals(view.totals())

    if st.button("Add Investment"):
        view.open_create()
        st.rerun()
    if view.is_form_open:
        _render_investment_form(view)

    positions = view.positions()
    if not positions:
        st.info("No investments recorded yet.")
        return
    _render_positions(view, positions)
    _render_allocation_chart(view.allocation())


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Finance Tracker", layout="wide")
    st.title("Finance Tracker")

    session = _get_session()
    page = _render_sidebar(session)
    _ensure_loaded(session)
    _render_notifications(session.notifier)

    if session.store.state is StoreState.EMPTY:
        st.warning("Sign in to record transactions and investments.")

    if page == "Investments":
        _render_investments_page(session.investment_view)
    else:
        _render_transactions_page(session.transaction_view)


if __name__ == "__main__":  # pragma: no cover
    main()
