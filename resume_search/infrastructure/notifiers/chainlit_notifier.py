import logging

import chainlit as cl

from resume_search.core.models.notification import Notification

logger = logging.getLogger(__name__)


class ChainlitToastNotifier:
    """Notifier showing Chainlit toasts in the current chat session."""

    async def notify(self, notification: Notification) -> None:
        logger.debug(f"Toast [{notification.level.value}]: {notification.message}")
        await cl.context.emitter.send_toast(
            notification.message, notification.level.value
        )
