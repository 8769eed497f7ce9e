"""Factory helpers to select the finance persistence backend."""

from finance_tracker.application.ports.database import DatabaseEnginePort
from finance_tracker.application.ports.finance_backend import FinanceBackendPort
from finance_tracker.infrastructure.local_storage_backend import (
    LocalStorageFinanceBackend,
)
from finance_tracker.infrastructure.logging.logger import get_app_logger
from finance_tracker.infrastructure.settings import (
    SUPPORTED_BACKENDS,
    FinanceSettings,
)
from finance_tracker.infrastructure.sql_finance_backend import (
    SqlAlchemyFinanceBackend,
)


def create_finance_backend(
    db_port: DatabaseEnginePort,
    logger=None,
    settings: FinanceSettings | None = None,
) -> FinanceBackendPort:
    """Return a finance backend implementation based on configuration.

    Args:
        db_port: Port providing access to the finance engine (SQL backend).
        logger: Optional logger compatible with logging.Logger-like API.
        settings: Optional settings override; read from the environment
            when omitted.

    Returns:
        FinanceBackendPort: Concrete backend implementation.

    Raises:
        RuntimeError: When the local backend has no storage path.
        ValueError: When the backend name is unknown.
    """
    resolved_logger = logger or get_app_logger()
    resolved_settings = settings or FinanceSettings.from_env()
    selected_backend = resolved_settings.backend.strip().lower()

    if selected_backend == "database":
        return SqlAlchemyFinanceBackend(db_port, logger=resolved_logger)

    if selected_backend == "local":
        if resolved_settings.local_storage_path is None:
            raise RuntimeError(
                "Local backend requires a FINANCE_LOCAL_STORAGE path."
            )
        return LocalStorageFinanceBackend(
            resolved_settings.local_storage_path,
            transactions_key=resolved_settings.transactions_key,
            investments_key=resolved_settings.investments_key,
            logger=resolved_logger,
        )

    raise ValueError(
        "Unsupported finance backend: "
        f"{selected_backend}. Expected one of: {', '.join(SUPPORTED_BACKENDS)}."
    )


__all__ = ["create_finance_backend"]
