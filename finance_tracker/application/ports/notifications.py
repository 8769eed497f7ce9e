"""Port for reporting write outcomes to the user."""

from typing import Protocol


class NotifierPort(Protocol):
    """Port receiving one human-readable message per write outcome."""

    def notify(self, success: bool, message: str) -> None:
        """Display or record the outcome of a write operation."""


__all__ = ["NotifierPort"]
