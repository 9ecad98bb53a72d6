"""Protocol interfaces for dependency injection."""
from .search_api import SearchApiProtocol
from .notifier import NotifierProtocol
from .storage import KeyValueStorageProtocol

__all__ = [
    "SearchApiProtocol",
    "NotifierProtocol",
    "KeyValueStorageProtocol",
]
