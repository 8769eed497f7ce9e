"""Tests for Decimal coercion of stored amounts."""

from decimal import Decimal, InvalidOperation

import pytest

from finance_tracker.utils.decimal_utils import coerce_decimal


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, Decimal("0")),
        (Decimal("1.10"), Decimal("1.10")),
        (" 12.5 ", Decimal("12.5")),
        (0.1, Decimal("0.1")),
        (7, Decimal("7")),
    ],
)
def test_coerce_decimal(raw, expected) -> None:
    assert coerce_decimal(raw) == expected


def test_coerce_decimal_rejects_garbage() -> None:
    with pytest.raises(InvalidOperation):
        coerce_decimal("twelve")
