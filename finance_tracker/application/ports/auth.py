"""Port supplying the authenticated principal."""

from typing import Protocol

from finance_tracker.domain.models import Principal


class PrincipalProviderPort(Protocol):
    """Port exposing the current principal, if any."""

    def current_principal(self) -> Principal | None:
        """Return the signed-in principal or None."""


__all__ = ["PrincipalProviderPort"]
