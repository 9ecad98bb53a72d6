"""
Pytest fixtures for the resume search client tests.
Fakes stand in for the backend, the notifier and local storage.
"""

from typing import Optional
from unittest.mock import AsyncMock

import pytest

from resume_search.core.models.search import SearchResult


class MemoryStorage:
    """In-memory key-value storage."""

    def __init__(self, items: Optional[dict] = None):
        self.items = dict(items or {})
        self.writes: list[tuple[str, str]] = []

    def get_item(self, key: str) -> Optional[str]:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.items[key] = value
        self.writes.append((key, value))


@pytest.fixture
def result_payloads():
    return [
        {
            "sentence_hash": "abc123",
            "text": "Built REST APIs in Python for 5 years.",
            "source": "alice.pdf",
            "score": 0.912345,
            "justification": "Direct backend experience.",
        },
        {
            "sentence_hash": "def456",
            "text": "Maintained PostgreSQL clusters.",
            "source": None,
            "score": 0.81,
        },
        {
            "sentence_hash": "ghi789",
            "text": "Led a team of four engineers.",
            "source": "bob.docx",
            "score": 0.5,
        },
    ]


@pytest.fixture
def results(result_payloads):
    return [SearchResult.from_payload(p) for p in result_payloads]


@pytest.fixture
def mock_api(results):
    """Search backend returning three results."""
    api = AsyncMock()
    api.search = AsyncMock(return_value=results)
    api.send_feedback = AsyncMock(return_value=None)
    return api


@pytest.fixture
def mock_notifier():
    notifier = AsyncMock()
    notifier.notify = AsyncMock()
    return notifier


@pytest.fixture
def memory_storage():
    return MemoryStorage()


@pytest.fixture
def make_storage():
    return MemoryStorage
