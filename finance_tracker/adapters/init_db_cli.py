"""CLI adapter creating the finance tables in the configured database.

This module wires the SQL backend to the concrete database adapter and
provides a command-line entry point for preparing a fresh database.
"""

from finance_tracker.infrastructure.container import build_database_adapter
from finance_tracker.infrastructure.logging.logger import get_app_logger
from finance_tracker.infrastructure.settings import FinanceSettings
from finance_tracker.infrastructure.sql_finance_backend import (
    SqlAlchemyFinanceBackend,
)


def main() -> None:
    """Create the transactions and investments tables."""
    logger = get_app_logger()
    settings = FinanceSettings.from_env()
    if settings.backend != "database":
        logger.warning(
            f"FINANCE_BACKEND={settings.backend}; nothing to initialize."
        )
        return

    db_adapter = build_database_adapter(settings)
    backend = SqlAlchemyFinanceBackend(db_adapter, logger=logger)
    backend.prepare_schema()

    engine = db_adapter.get_finance_engine()
    logger.info(f"Finance DB: {engine.url}")
    print("Created the transactions and investments tables.")


if __name__ == "__main__":  # pragma: no cover
    main()
