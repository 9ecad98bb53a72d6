"""Notifier protocol for dependency injection."""
from typing import Protocol, runtime_checkable

from ..models.notification import Notification


@runtime_checkable
class NotifierProtocol(Protocol):
    """Protocol for transient user notifications."""

    async def notify(self, notification: Notification) -> None:
        """Show a non-blocking, auto-dismissing message."""
        ...
