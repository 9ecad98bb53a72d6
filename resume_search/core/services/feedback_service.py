"""Feedback service - reports relevance judgments."""

import logging

import httpx

from ..errors import SearchApiError
from ..models.notification import Notification, NotificationLevel
from ..models.search import FeedbackEvent
from ..protocols.notifier import NotifierProtocol
from ..protocols.search_api import SearchApiProtocol

logger = logging.getLogger(__name__)

MARKED_RELEVANT = "Marked Relevant"
MARKED_NOT_RELEVANT = "Marked Not Relevant"
FEEDBACK_FAILED = "Feedback failed"


class FeedbackSubmitter:
    """Fire-and-forget feedback, independent of the search session."""

    def __init__(self, api: SearchApiProtocol, notifier: NotifierProtocol):
        self._api = api
        self._notifier = notifier

    async def send_feedback(
        self, query: str, sentence_hash: str, is_relevant: bool
    ) -> bool:
        """Send one judgment and notify the user of the outcome.

        Args:
            query: Current query input value.
            sentence_hash: Result the judgment is about.
            is_relevant: Relevance judgment.

        Returns:
            True if the backend accepted the feedback.
        """
        event = FeedbackEvent(
            query=query, sentence_hash=sentence_hash, is_relevant=is_relevant
        )

        try:
            await self._api.send_feedback(event)
        except (SearchApiError, httpx.HTTPError) as e:
            logger.warning(f"Feedback for {sentence_hash} failed: {e}")
            await self._notifier.notify(
                Notification(NotificationLevel.ERROR, FEEDBACK_FAILED)
            )
            return False

        logger.info(f"Feedback for {sentence_hash}: relevant={is_relevant}")
        message = MARKED_RELEVANT if is_relevant else MARKED_NOT_RELEVANT
        await self._notifier.notify(Notification(NotificationLevel.SUCCESS, message))
        return True
