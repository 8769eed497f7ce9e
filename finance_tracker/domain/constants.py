"""Domain constants for the finance tracker."""

DEFAULT_TRANSACTIONS_KEY = "finance_transactions"
DEFAULT_INVESTMENTS_KEY = "finance_investments"

LOCAL_PRINCIPAL_ID = "local"

# (precision, scale) of stored numbers. Precision stays within 15 digits so
# values survive backends that round-trip numerics through a double.
AMOUNT_DIGITS = (15, 2)
SHARES_DIGITS = (15, 6)
PRICE_DIGITS = (15, 8)

OWNER_ID_MAX_LENGTH = 64
SYMBOL_MAX_LENGTH = 16
NAME_MAX_LENGTH = 200
CATEGORY_MAX_LENGTH = 120


__all__ = [
    "DEFAULT_TRANSACTIONS_KEY",
    "DEFAULT_INVESTMENTS_KEY",
    "LOCAL_PRINCIPAL_ID",
    "AMOUNT_DIGITS",
    "SHARES_DIGITS",
    "PRICE_DIGITS",
    "OWNER_ID_MAX_LENGTH",
    "SYMBOL_MAX_LENGTH",
    "NAME_MAX_LENGTH",
    "CATEGORY_MAX_LENGTH",
]
