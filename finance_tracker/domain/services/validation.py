"""Domain validation helpers.

Limits mirror the stored column sizes, so anything accepted here is kept
exactly by every backend.
"""

from decimal import Decimal

from finance_tracker.domain.constants import (
    AMOUNT_DIGITS,
    CATEGORY_MAX_LENGTH,
    NAME_MAX_LENGTH,
    OWNER_ID_MAX_LENGTH,
    PRICE_DIGITS,
    SHARES_DIGITS,
    SYMBOL_MAX_LENGTH,
)
from finance_tracker.domain.errors import ValidationError
from finance_tracker.domain.models import (
    Investment,
    Transaction,
    TransactionKind,
)


def _require_decimal(
    value,
    field_name: str,
    digits: tuple[int, int],
) -> Decimal:
    if not isinstance(value, Decimal):
        raise ValidationError(f"{field_name} must be a decimal number")
    if not value.is_finite():
        raise ValidationError(f"{field_name} must be a finite number")
    precision, scale = digits
    if abs(value) >= Decimal(10) ** (precision - scale):
        raise ValidationError(
            f"{field_name} must have at most {precision - scale} digits "
            "before the decimal point"
        )
    if value.quantize(Decimal(1).scaleb(-scale)) != value:
        raise ValidationError(
            f"{field_name} must have at most {scale} decimal places"
        )
    return value


def _require_max_length(value: str | None, field_name: str, limit: int) -> None:
    if value is not None and len(value) > limit:
        raise ValidationError(
            f"{field_name} must be at most {limit} characters"
        )


def validate_transaction(transaction: Transaction) -> None:
    """Check transaction invariants.

    Args:
        transaction: Record about to enter the store.

    Raises:
        ValidationError: When the kind is unknown, the amount is invalid or
            a text field is too long.
    """
    if not isinstance(transaction.kind, TransactionKind):
        raise ValidationError(
            f"Unknown transaction kind: {transaction.kind!r}"
        )
    amount = _require_decimal(transaction.amount, "Amount", AMOUNT_DIGITS)
    if amount < 0:
        raise ValidationError("Amount must not be negative")
    if transaction.date is None:
        raise ValidationError("Date is required")
    _require_max_length(
        transaction.category,
        "Category",
        CATEGORY_MAX_LENGTH,
    )
    _require_max_length(
        transaction.owner_id,
        "Principal id",
        OWNER_ID_MAX_LENGTH,
    )


def validate_investment(investment: Investment) -> None:
    """Check investment invariants.

    Args:
        investment: Record about to enter the store.

    Raises:
        ValidationError: When the symbol is empty or too long, shares are
            not positive, a price is negative, or a number does not fit its
            stored precision.
    """
    if not investment.symbol or not investment.symbol.strip():
        raise ValidationError("Symbol is required")
    _require_max_length(investment.symbol, "Symbol", SYMBOL_MAX_LENGTH)
    _require_max_length(investment.name, "Name", NAME_MAX_LENGTH)
    shares = _require_decimal(investment.shares, "Shares", SHARES_DIGITS)
    if shares <= 0:
        raise ValidationError("Shares must be greater than zero")
    purchase_price = _require_decimal(
        investment.purchase_price,
        "Purchase price",
        PRICE_DIGITS,
    )
    if purchase_price < 0:
        raise ValidationError("Purchase price must not be negative")
    current_price = _require_decimal(
        investment.current_price,
        "Current price",
        PRICE_DIGITS,
    )
    if current_price < 0:
        raise ValidationError("Current price must not be negative")
    if investment.purchase_date is None:
        raise ValidationError("Purchase date is required")
    _require_max_length(
        investment.owner_id,
        "Principal id",
        OWNER_ID_MAX_LENGTH,
    )


__all__ = ["validate_transaction", "validate_investment"]
