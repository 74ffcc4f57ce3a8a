"""Notifiers that write toasts to the log, or fan out to several notifiers."""

import logging

from classroom_admin.application.interfaces import Notifier

_notification_logger = logging.getLogger("classroom_admin.notifications")


class LoggingNotifier(Notifier):
    """Writes every toast to the ``classroom_admin.notifications`` logger."""

    def __init__(self, logger: logging.Logger | None = None):
        self._logger = logger or _notification_logger

    async def success(self, message: str) -> None:
        self._logger.info("✅ %s", message)

    async def error(self, message: str) -> None:
        self._logger.warning("❌ %s", message)


class CompositeNotifier(Notifier):
    """Delivers each toast to every wrapped notifier in order."""

    def __init__(self, *notifiers: Notifier):
        self._notifiers = notifiers

    async def success(self, message: str) -> None:
        for notifier in self._notifiers:
            await notifier.success(message)

    async def error(self, message: str) -> None:
        for notifier in self._notifiers:
            await notifier.error(message)
