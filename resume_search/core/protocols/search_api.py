"""Search backend protocol for dependency injection."""
from typing import Protocol, runtime_checkable

from ..models.search import FeedbackEvent, SearchRequest, SearchResult


@runtime_checkable
class SearchApiProtocol(Protocol):
    """Protocol for the remote search and feedback endpoints."""

    async def search(self, request: SearchRequest) -> list[SearchResult]:
        """Request ranked matches for a query.

        Args:
            request: Query, result count and rerank flag.

        Returns:
            Results in backend order.

        Raises:
            SearchApiError: Backend answered with a non-2xx status.
            httpx.HTTPError: Transport failure.
        """
        ...

    async def send_feedback(self, event: FeedbackEvent) -> None:
        """Report a relevance judgment for one result.

        Args:
            event: Query, sentence hash and judgment.
        """
        ...
