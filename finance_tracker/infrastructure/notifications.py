"""Notifier writing write outcomes to the usage log."""

from finance_tracker.application.ports.notifications import NotifierPort
from finance_tracker.infrastructure.logging.logger import get_usage_logger


class LoggingNotifier(NotifierPort):
    """Notifier recording outcomes for later inspection."""

    def __init__(self, logger=None) -> None:
        self._logger = logger or get_usage_logger()

    def notify(self, success: bool, message: str) -> None:
        if success:
            self._logger.info(f"[ok] {message}")
        else:
            self._logger.warning(f"[failed] {message}")


__all__ = ["LoggingNotifier"]
