"""Tests for finance backend selection."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from finance_tracker.infrastructure import finance_backend_factory as factory
from finance_tracker.infrastructure.local_storage_backend import (
    LocalStorageFinanceBackend,
)
from finance_tracker.infrastructure.settings import FinanceSettings
from finance_tracker.infrastructure.sql_finance_backend import (
    SqlAlchemyFinanceBackend,
)


def test_factory_defaults_to_sqlalchemy() -> None:
    """Factory should return the SQL backend by default."""
    backend = factory.create_finance_backend(
        MagicMock(),
        logger=MagicMock(),
        settings=FinanceSettings(),
    )

    assert isinstance(backend, SqlAlchemyFinanceBackend)


def test_factory_uses_local_backend(tmp_path: Path) -> None:
    settings = FinanceSettings(
        backend="local",
        local_storage_path=tmp_path / "storage.json",
    )

    backend = factory.create_finance_backend(
        MagicMock(),
        logger=MagicMock(),
        settings=settings,
    )

    assert isinstance(backend, LocalStorageFinanceBackend)


def test_factory_passes_storage_settings(monkeypatch, tmp_path: Path) -> None:
    """Local backend should receive the configured path and keys."""
    dummy_backend = object()
    logger = MagicMock()

    def _fake_backend(path, transactions_key, investments_key, logger=None):
        assert path == tmp_path
        assert transactions_key == "tx"
        assert investments_key == "inv"
        assert logger is not None
        return dummy_backend

    monkeypatch.setattr(factory, "LocalStorageFinanceBackend", _fake_backend)
    settings = FinanceSettings(
        backend="local",
        local_storage_path=tmp_path,
        transactions_key="tx",
        investments_key="inv",
    )

    backend = factory.create_finance_backend(
        MagicMock(),
        logger=logger,
        settings=settings,
    )

    assert backend is dummy_backend


def test_factory_requires_local_path() -> None:
    with pytest.raises(RuntimeError, match="FINANCE_LOCAL_STORAGE"):
        factory.create_finance_backend(
            MagicMock(),
            logger=MagicMock(),
            settings=FinanceSettings(backend="local"),
        )


def test_factory_rejects_unknown_backend() -> None:
    with pytest.raises(ValueError, match="Unsupported finance backend"):
        factory.create_finance_backend(
            MagicMock(),
            logger=MagicMock(),
            settings=FinanceSettings(backend="firebase"),
        )
