"""Application ports package."""

from .auth import PrincipalProviderPort
from .database import DatabaseEnginePort
from .finance_backend import FinanceBackendPort, Record
from .notifications import NotifierPort

__all__ = [
    "DatabaseEnginePort",
    "FinanceBackendPort",
    "NotifierPort",
    "PrincipalProviderPort",
    "Record",
]
