"""Notification domain models."""
from dataclasses import dataclass
from enum import Enum


class NotificationLevel(Enum):
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"


@dataclass
class Notification:
    """Transient, non-blocking message for the user."""
    level: NotificationLevel
    message: str
