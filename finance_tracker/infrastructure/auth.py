"""Principal providers for environments without an identity service."""

from finance_tracker.application.ports.auth import PrincipalProviderPort
from finance_tracker.domain.models import Principal


class StaticPrincipalProvider(PrincipalProviderPort):
    """Provider returning a fixed principal, or nobody."""

    def __init__(self, principal: Principal | None = None) -> None:
        self._principal = principal

    def current_principal(self) -> Principal | None:
        return self._principal

    def sign_in(self, principal_id: str) -> Principal:
        """Switch to the given principal id."""
        self._principal = Principal(id=principal_id)
        return self._principal

    def sign_out(self) -> None:
        self._principal = None


__all__ = ["StaticPrincipalProvider"]
