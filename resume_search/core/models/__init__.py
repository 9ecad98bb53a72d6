"""Domain models."""
from .search import (
    FeedbackEvent,
    SearchRequest,
    SearchAttempt,
    SearchResult,
    SessionState,
    SessionStatus,
    clamp_top_k,
)
from .notification import Notification, NotificationLevel
from .preference import Theme

__all__ = [
    "FeedbackEvent",
    "SearchRequest",
    "SearchAttempt",
    "SearchResult",
    "SessionState",
    "SessionStatus",
    "clamp_top_k",
    "Notification",
    "NotificationLevel",
    "Theme",
]
