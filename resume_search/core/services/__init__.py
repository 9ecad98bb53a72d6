"""Core client services."""
from .session_controller import SearchSessionController
from .feedback_service import FeedbackSubmitter
from .preference_store import DisplayPreferenceStore

__all__ = [
    "SearchSessionController",
    "FeedbackSubmitter",
    "DisplayPreferenceStore",
]
