"""Decimal conversion for amounts read back from storage."""

from decimal import Decimal


_ZERO = Decimal("0")


def coerce_decimal(value) -> Decimal:
    """Convert a stored amount to Decimal.

    SQL drivers return Decimal, or float on SQLite; the local JSON document
    keeps amounts as strings. Missing amounts count as zero.

    Args:
        value: Amount as read from a backend.

    Returns:
        Decimal: The amount without binary float artifacts.

    Raises:
        decimal.InvalidOperation: When a string is not a number.
    """
    if value is None:
        return _ZERO
    if isinstance(value, Decimal):
        return value
    if isinstance(value, str):
        return Decimal(value.strip())
    if isinstance(value, float):
        return Decimal(repr(value))
    return Decimal(value)


__all__ = ["coerce_decimal"]
