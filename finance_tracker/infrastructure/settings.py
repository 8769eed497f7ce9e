"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Optional
from urllib.parse import unquote, urlparse

import dotenv

from finance_tracker.domain.constants import (
    DEFAULT_INVESTMENTS_KEY,
    DEFAULT_TRANSACTIONS_KEY,
)
from finance_tracker.utils.utils import get_project_root


SUPPORTED_BACKENDS = ("database", "local")


@dataclass(frozen=True)
class FinanceSettings:
    """Settings for selecting and configuring the persistence backend.

    Attributes:
        backend: Backend identifier (database or local).
        database_url: Optional URL overriding FINANCE_DB_URL lookups.
        local_storage_path: JSON document used by the local backend.
        transactions_key: Namespace holding serialized transactions.
        investments_key: Namespace holding serialized investments.
        principal_id: Optional fixed principal id.
    """

    backend: str = "database"
    database_url: Optional[str] = None
    local_storage_path: Optional[Path] = None
    transactions_key: str = DEFAULT_TRANSACTIONS_KEY
    investments_key: str = DEFAULT_INVESTMENTS_KEY
    principal_id: Optional[str] = None

    @classmethod
    def from_env(cls) -> "FinanceSettings":
        """Build settings from environment variables.

        Returns:
            FinanceSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        backend = os.getenv("FINANCE_BACKEND", "database").strip().lower()
        raw_path = os.getenv("FINANCE_LOCAL_STORAGE")
        local_storage_path = (
            cls._normalize_path(raw_path)
            if raw_path
            else cls._default_local_storage_path()
        )
        return cls(
            backend=backend,
            database_url=os.getenv("FINANCE_DB_URL") or None,
            local_storage_path=local_storage_path,
            transactions_key=os.getenv(
                "FINANCE_TRANSACTIONS_KEY",
                DEFAULT_TRANSACTIONS_KEY,
            ),
            investments_key=os.getenv(
                "FINANCE_INVESTMENTS_KEY",
                DEFAULT_INVESTMENTS_KEY,
            ),
            principal_id=os.getenv("FINANCE_PRINCIPAL_ID") or None,
        )

    @staticmethod
    def _normalize_path(raw_path: str) -> Path:
        """Normalize a local storage path or file URI.

        Args:
            raw_path: Raw file path string.

        Returns:
            Path: Absolute filesystem path.
        """
        parsed = urlparse(raw_path)
        if parsed.scheme == "file":
            raw_path = unquote(parsed.path)
        return Path(raw_path).expanduser().resolve()

    @staticmethod
    def _default_local_storage_path() -> Path:
        return get_project_root() / "data" / "local_storage.json"


__all__ = ["FinanceSettings", "SUPPORTED_BACKENDS"]
