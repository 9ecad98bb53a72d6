import logging

from resume_search.core.models.notification import Notification, NotificationLevel

logger = logging.getLogger(__name__)


class LoggingNotifier:
    """Notifier for terminal use: notifications go to the log."""

    async def notify(self, notification: Notification) -> None:
        if notification.level is NotificationLevel.ERROR:
            logger.error(notification.message)
        else:
            logger.info(notification.message)
