"""Parsers turning form text into typed values."""

from datetime import date
from decimal import Decimal, InvalidOperation

from finance_tracker.domain.errors import ValidationError
from finance_tracker.domain.models import TransactionKind


def parse_decimal(raw: str | None, field_name: str) -> Decimal:
    """Parse a required decimal field.

    Args:
        raw: Text typed in the form.
        field_name: Label used in error messages.

    Returns:
        Decimal: Parsed value.

    Raises:
        ValidationError: When the text is empty, malformed or not finite.
    """
    cleaned = (raw or "").strip().replace(",", "")
    if not cleaned:
        raise ValidationError(f"{field_name} is required")
    try:
        value = Decimal(cleaned)
    except InvalidOperation as exc:
        raise ValidationError(
            f"{field_name} must be a number, got '{raw}'"
        ) from exc
    if not value.is_finite():
        raise ValidationError(f"{field_name} must be a finite number")
    return value


def parse_date(raw: str | None, field_name: str) -> date:
    """Parse a required ISO date field (YYYY-MM-DD)."""
    cleaned = (raw or "").strip()
    if not cleaned:
        raise ValidationError(f"{field_name} is required")
    try:
        return date.fromisoformat(cleaned)
    except ValueError as exc:
        raise ValidationError(
            f"{field_name} must use the YYYY-MM-DD format, got '{raw}'"
        ) from exc


def parse_kind(raw: str | None) -> TransactionKind:
    """Parse a transaction kind name."""
    cleaned = (raw or "").strip().lower()
    try:
        return TransactionKind(cleaned)
    except ValueError as exc:
        raise ValidationError(
            f"Transaction type must be income or expense, got '{raw}'"
        ) from exc


__all__ = ["parse_decimal", "parse_date", "parse_kind"]
