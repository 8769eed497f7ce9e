"""Composition root for wiring infrastructure adapters."""

from finance_tracker.application.ports.auth import PrincipalProviderPort
from finance_tracker.application.ports.database import DatabaseEnginePort
from finance_tracker.application.ports.finance_backend import FinanceBackendPort
from finance_tracker.application.ports.notifications import NotifierPort
from finance_tracker.application.use_cases.finance_store import FinanceStore
from finance_tracker.domain.constants import LOCAL_PRINCIPAL_ID
from finance_tracker.domain.models import Principal
from finance_tracker.infrastructure.auth import StaticPrincipalProvider
from finance_tracker.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from finance_tracker.infrastructure.finance_backend_factory import (
    create_finance_backend,
)
from finance_tracker.infrastructure.logging.logger import get_app_logger
from finance_tracker.infrastructure.notifications import LoggingNotifier
from finance_tracker.infrastructure.settings import FinanceSettings


def build_database_adapter(
    settings: FinanceSettings | None = None,
) -> DatabaseEnginePort:
    """Return the database adapter instance."""
    resolved = settings or FinanceSettings.from_env()
    return SqlAlchemyDatabaseEngineAdapter(resolved.database_url)


def build_finance_backend(
    settings: FinanceSettings | None = None,
    db_port: DatabaseEnginePort | None = None,
) -> FinanceBackendPort:
    """Return the configured finance backend."""
    resolved = settings or FinanceSettings.from_env()
    resolved_db = db_port or build_database_adapter(resolved)
    return create_finance_backend(
        resolved_db,
        logger=get_app_logger(),
        settings=resolved,
    )


def build_principal_provider(
    settings: FinanceSettings | None = None,
) -> StaticPrincipalProvider:
    """Return a provider for the configured principal.

    The local backend has a single implicit principal, used whenever no
    principal id is configured.
    """
    resolved = settings or FinanceSettings.from_env()
    principal_id = resolved.principal_id
    if principal_id is None and resolved.backend == "local":
        principal_id = LOCAL_PRINCIPAL_ID
    if principal_id is None:
        return StaticPrincipalProvider()
    return StaticPrincipalProvider(Principal(id=principal_id))


def build_finance_store(
    settings: FinanceSettings | None = None,
    principal_provider: PrincipalProviderPort | None = None,
    notifier: NotifierPort | None = None,
    backend: FinanceBackendPort | None = None,
) -> FinanceStore:
    """Return a finance store wired to the configured backend."""
    resolved = settings or FinanceSettings.from_env()
    return FinanceStore(
        backend=backend or build_finance_backend(resolved),
        principal_provider=(
            principal_provider or build_principal_provider(resolved)
        ),
        notifier=notifier or LoggingNotifier(),
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_finance_backend",
    "build_principal_provider",
    "build_finance_store",
]
