import logging
from typing import Any, Optional

import httpx

from resume_search.core.errors import SearchApiError
from resume_search.core.models.search import FeedbackEvent, SearchRequest, SearchResult

logger = logging.getLogger(__name__)

API_KEY_HEADER = "X-API-Key"


class SearchApiClient:
    """Client for the resume search backend HTTP API."""

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        api_key: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize API client.

        Args:
            base_url: Backend base address.
            api_key: Key sent with search calls only.
            transport: Custom httpx transport (tests).
        """
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def client(self) -> httpx.AsyncClient:
        # No client-side timeout, the transport decides.
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._base_url, timeout=None, transport=self._transport
            )
        return self._client

    async def search(self, request: SearchRequest) -> list[SearchResult]:
        headers = {}
        if self._api_key:
            headers[API_KEY_HEADER] = self._api_key

        resp = await self.client.post(
            "/search", json=request.to_payload(), headers=headers
        )
        self._raise_for_status(resp)

        try:
            body = resp.json()
        except ValueError:
            raise SearchApiError(resp.status_code)
        if not isinstance(body, list):
            logger.error(f"Unexpected search response: {type(body).__name__}")
            raise SearchApiError(resp.status_code)

        try:
            return [SearchResult.from_payload(item) for item in body]
        except (KeyError, TypeError, ValueError) as e:
            logger.error(f"Malformed search result: {e}")
            raise SearchApiError(resp.status_code)

    async def send_feedback(self, event: FeedbackEvent) -> None:
        resp = await self.client.post("/feedback", json=event.to_payload())
        self._raise_for_status(resp)

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "SearchApiClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    @staticmethod
    def _raise_for_status(resp: httpx.Response) -> None:
        if resp.is_success:
            return
        detail = None
        try:
            body = resp.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and isinstance(body.get("detail"), str):
            detail = body["detail"]
        logger.warning(f"{resp.request.method} {resp.request.url.path} -> {resp.status_code}")
        raise SearchApiError(resp.status_code, detail)
