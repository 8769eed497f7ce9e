"""Shared fakes for application-layer tests."""

import dataclasses
from unittest.mock import MagicMock

import pytest

from finance_tracker.application.use_cases.finance_store import FinanceStore
from finance_tracker.domain.models import Collection, Principal
from finance_tracker.infrastructure.auth import StaticPrincipalProvider


class FakeFinanceBackend:
    """In-memory backend standing in for the SQL or local adapters."""

    def __init__(self) -> None:
        self.records = {
            Collection.TRANSACTIONS: [],
            Collection.INVESTMENTS: [],
        }
        self.calls: list[tuple] = []
        self.fail_with: Exception | None = None
        self._next_id = 1

    def _record_call(self, *call) -> None:
        self.calls.append(call)
        if self.fail_with is not None:
            raise self.fail_with

    def list_transactions(self, owner_id):
        self._record_call("list_transactions", owner_id)
        items = [
            item
            for item in self.records[Collection.TRANSACTIONS]
            if item.owner_id == owner_id
        ]
        return sorted(items, key=lambda item: item.date, reverse=True)

    def list_investments(self, owner_id):
        self._record_call("list_investments", owner_id)
        items = [
            item
            for item in self.records[Collection.INVESTMENTS]
            if item.owner_id == owner_id
        ]
        return sorted(items, key=lambda item: item.purchase_date, reverse=True)

    def insert(self, collection, record):
        self._record_call("insert", collection, record)
        saved = dataclasses.replace(record, id=self._next_id)
        self._next_id += 1
        self.records[collection].insert(0, saved)
        return saved

    def replace(self, collection, record_id, record):
        self._record_call("replace", collection, record_id, record)
        items = self.records[collection]
        for index, item in enumerate(items):
            if item.id == record_id:
                items[index] = record
                return True
        return False

    def remove(self, collection, record_id, owner_id=None):
        self._record_call("remove", collection, record_id, owner_id)
        items = self.records[collection]
        remaining = [item for item in items if item.id != record_id]
        self.records[collection] = remaining
        return len(remaining) < len(items)


@pytest.fixture
def backend() -> FakeFinanceBackend:
    return FakeFinanceBackend()


@pytest.fixture
def principals() -> StaticPrincipalProvider:
    return StaticPrincipalProvider(Principal(id="alice"))


@pytest.fixture
def notifier() -> MagicMock:
    return MagicMock()


@pytest.fixture
def store(backend, principals, notifier) -> FinanceStore:
    return FinanceStore(
        backend=backend,
        principal_provider=principals,
        notifier=notifier,
        logger=MagicMock(),
    )
