"""FinanceStore wired to the real local storage and database backends."""

import asyncio
from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine

from finance_tracker.application.use_cases.finance_store import (
    FinanceStore,
    StoreState,
)
from finance_tracker.domain.errors import ValidationError
from finance_tracker.domain.models import (
    Investment,
    Principal,
    Transaction,
    TransactionKind,
)
from finance_tracker.domain.services import compute_positions
from finance_tracker.infrastructure.auth import StaticPrincipalProvider
from finance_tracker.infrastructure.local_storage_backend import (
    LocalStorageFinanceBackend,
)
from finance_tracker.infrastructure.sql_finance_backend import (
    SqlAlchemyFinanceBackend,
)


def _store(path) -> FinanceStore:
    backend = LocalStorageFinanceBackend(path, logger=MagicMock())
    return FinanceStore(
        backend=backend,
        principal_provider=StaticPrincipalProvider(Principal(id="local")),
        logger=MagicMock(),
    )


def test_records_survive_a_fresh_store(tmp_path) -> None:
    """Confirmed writes are visible to a new store after reload."""
    path = tmp_path / "storage.json"
    store = _store(path)
    asyncio.run(store.load())
    saved = asyncio.run(
        store.add_investment(
            Investment(
                symbol="VTI",
                shares=Decimal("3"),
                purchase_price=Decimal("200"),
                current_price=Decimal("210.5"),
                purchase_date=date(2023, 6, 1),
            )
        )
    )

    reopened = _store(path)
    asyncio.run(reopened.load())

    assert reopened.state is StoreState.READY
    assert reopened.investments == (saved,)
    assert reopened.investments[0].current_price == Decimal("210.5")


def test_delete_persists(tmp_path) -> None:
    path = tmp_path / "storage.json"
    store = _store(path)
    asyncio.run(store.load())
    saved = asyncio.run(
        store.add_investment(
            Investment(
                symbol="VTI",
                shares=Decimal("1"),
                purchase_price=Decimal("1"),
                current_price=Decimal("1"),
                purchase_date=date(2023, 6, 1),
            )
        )
    )

    asyncio.run(store.delete_investment(saved.id))
    reopened = _store(path)
    asyncio.run(reopened.load())

    assert reopened.investments == ()


def _sql_store(tmp_path) -> FinanceStore:
    engine = create_engine(
        f"sqlite:///{tmp_path / 'finance.db'}",
        connect_args={"check_same_thread": False},
    )
    db_port = MagicMock()
    db_port.get_finance_engine.return_value = engine
    backend = SqlAlchemyFinanceBackend(db_port, logger=MagicMock())
    backend.prepare_schema()
    return FinanceStore(
        backend=backend,
        principal_provider=StaticPrincipalProvider(Principal(id="alice")),
        logger=MagicMock(),
    )


def test_database_reload_keeps_exact_values(tmp_path) -> None:
    """Values at the edge of the stored precision come back unchanged."""
    store = _sql_store(tmp_path)
    asyncio.run(store.load())
    saved_investment = asyncio.run(
        store.add_investment(
            Investment(
                symbol="PEPE",
                shares=Decimal("0.001234"),
                purchase_price=Decimal("0.00001234"),
                current_price=Decimal("0.00002468"),
                purchase_date=date(2024, 2, 1),
            )
        )
    )
    saved_transaction = asyncio.run(
        store.add_transaction(
            Transaction(
                kind=TransactionKind.INCOME,
                amount=Decimal("1234567890123.45"),
                category="Windfall",
                description="",
                date=date(2024, 2, 2),
            )
        )
    )
    before = store.summary()
    [position_before] = compute_positions(store.investments)

    asyncio.run(store.load())

    assert store.investments == (saved_investment,)
    assert store.transactions == (saved_transaction,)
    assert store.summary() == before
    [position_after] = compute_positions(store.investments)
    assert position_after == position_before
    assert position_after.gain_loss_pct == Decimal("100")


def test_values_beyond_stored_precision_are_rejected(tmp_path) -> None:
    store = _sql_store(tmp_path)
    asyncio.run(store.load())

    with pytest.raises(ValidationError, match="decimal places"):
        asyncio.run(
            store.add_transaction(
                Transaction(
                    kind=TransactionKind.EXPENSE,
                    amount=Decimal("10.555"),
                    category="Coffee",
                    description="",
                    date=date(2024, 2, 3),
                )
            )
        )

    asyncio.run(store.load())
    assert store.transactions == ()
