"""Search session controller - owns the session state machine."""

import logging
from typing import Any, Callable

import httpx

from ..errors import GENERIC_SEARCH_ERROR, SearchApiError
from ..models.search import SearchAttempt, SessionState, clamp_top_k
from ..protocols.search_api import SearchApiProtocol

logger = logging.getLogger(__name__)

StateListener = Callable[[SessionState], None]


class SearchSessionController:
    """Mediates between user input and the backend search call.

    Overlapping submits are allowed. Each attempt gets a sequence number
    and only the most recently issued attempt may write its outcome.
    """

    def __init__(
        self,
        api: SearchApiProtocol,
        top_k: int = 5,
        rerank: bool = True,
    ):
        """Initialize controller.

        Args:
            api: Search backend client.
            top_k: Initial number of results to request.
            rerank: Initial rerank flag.
        """
        self._api = api
        self._state = SessionState(top_k=clamp_top_k(top_k), rerank=rerank)
        self._sequence = 0
        self._listeners: list[StateListener] = []

    @property
    def state(self) -> SessionState:
        return self._state

    def set_query(self, query: str) -> None:
        self._state.query = query

    def set_top_k(self, value: Any) -> None:
        self._state.top_k = clamp_top_k(value)

    def set_rerank(self, rerank: bool) -> None:
        self._state.rerank = bool(rerank)

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Call listener after every state transition.

        Returns:
            Function removing the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def submit(self) -> SessionState:
        """Run one search and fold its outcome into the session state.

        Returns:
            The session state after this attempt resolved.
        """
        attempt = await self.attempt()
        return attempt.state

    async def attempt(self) -> SearchAttempt:
        """Run one search, reporting whether its outcome was applied.

        Every failure becomes session state. Cancellation still propagates,
        but never leaves the session loading.
        """
        self._sequence += 1
        sequence = self._sequence

        self._state.error = ""
        self._state.loading = True
        self._emit()

        request = self._state.to_request()
        logger.info(
            f"Search #{sequence}: '{request.query[:50]}' "
            f"top_k={request.top_k} rerank={request.rerank}"
        )

        applied = False
        try:
            results = await self._api.search(request)
        except SearchApiError as e:
            applied = self._fail(sequence, e.detail or GENERIC_SEARCH_ERROR)
        except httpx.HTTPError as e:
            logger.warning(f"Search #{sequence} transport error: {e}")
            applied = self._fail(sequence, GENERIC_SEARCH_ERROR)
        except Exception:
            logger.exception(f"Search #{sequence} crashed")
            applied = self._fail(sequence, GENERIC_SEARCH_ERROR)
        else:
            if not self._is_stale(sequence):
                self._state.results = list(results)
                self._state.loading = False
                self._state.completed_searches += 1
                logger.info(f"Search #{sequence}: {len(results)} results")
                self._emit()
                applied = True
        finally:
            if self._state.loading and sequence == self._sequence:
                logger.info(f"Search #{sequence} interrupted")
                self._state.loading = False
                self._emit()

        return SearchAttempt(sequence=sequence, applied=applied, state=self._state)

    def _fail(self, sequence: int, message: str) -> bool:
        if self._is_stale(sequence):
            return False
        logger.warning(f"Search #{sequence} failed: {message}")
        self._state.error = message
        self._state.loading = False
        self._state.completed_searches += 1
        self._emit()
        return True

    def _is_stale(self, sequence: int) -> bool:
        if sequence != self._sequence:
            logger.debug(
                f"Search #{sequence} discarded, #{self._sequence} is newer"
            )
            return True
        return False

    def _emit(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self._state)
            except Exception:
                logger.exception(f"State listener {listener!r} failed")
