"""Tests for the shared form view base."""

import pytest

from finance_tracker.application.use_cases.form_view import RecordFormView


class _DraftOnlyView(RecordFormView):
    def _empty_draft(self):
        return {}

    def _draft_from_record(self, record):
        return dict(record)

    def _parse_draft(self, draft):
        return draft


def test_base_view_cannot_be_instantiated(store) -> None:
    with pytest.raises(TypeError):
        RecordFormView(store)


def test_view_missing_store_hooks_fails_at_construction(store) -> None:
    """Forgotten store operations surface before any submit."""
    with pytest.raises(TypeError, match="_add"):
        _DraftOnlyView(store)
