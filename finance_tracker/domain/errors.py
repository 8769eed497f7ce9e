"""Domain errors raised across the finance tracker layers."""


class FinanceError(Exception):
    """Base class for every finance tracker failure."""


class AuthRequiredError(FinanceError):
    """A write was attempted without an authenticated principal."""


class BackendUnavailableError(FinanceError):
    """The persistence backend could not complete the request."""


class NotFoundError(FinanceError):
    """The targeted record does not exist."""


class ValidationError(FinanceError):
    """Input failed validation before reaching the backend."""


class StoreBusyError(FinanceError):
    """A write was issued while the store is loading."""


__all__ = [
    "FinanceError",
    "AuthRequiredError",
    "BackendUnavailableError",
    "NotFoundError",
    "ValidationError",
    "StoreBusyError",
]
