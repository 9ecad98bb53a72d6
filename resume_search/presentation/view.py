"""Screen regions of one search chat: a single inline error and the result list."""

import logging
from typing import Any, Callable, Optional, Protocol

from resume_search.core.formatting import ThemedRenderer
from resume_search.core.models.search import SearchAttempt, SearchResult

logger = logging.getLogger(__name__)

NO_RESULTS = "No results"


class MessageProtocol(Protocol):
    content: str

    async def send(self) -> Any: ...

    async def update(self) -> Any: ...

    async def remove(self) -> Any: ...


MessageFactory = Callable[..., MessageProtocol]


class SearchView:
    """Keeps at most one error region and one result list on screen."""

    def __init__(
        self,
        renderer: ThemedRenderer,
        message_factory: MessageFactory,
        error_factory: Callable[[str], MessageProtocol],
        actions_factory: Optional[Callable[[SearchResult], list]] = None,
    ):
        """Initialize view.

        Args:
            renderer: Themed result renderer.
            message_factory: Builds a message from content and actions.
            error_factory: Builds the inline error message.
            actions_factory: Feedback actions for one result.
        """
        self._renderer = renderer
        self._message_factory = message_factory
        self._error_factory = error_factory
        self._actions_factory = actions_factory or (lambda result: [])
        self.error_message: Optional[MessageProtocol] = None
        self.result_messages: list[tuple[MessageProtocol, Optional[SearchResult]]] = []

    async def begin_search(self) -> MessageProtocol:
        """Clear the error region and show a loading placeholder."""
        await self.clear_error()
        placeholder = self._message_factory(content=self._renderer.placeholder())
        await placeholder.send()
        return placeholder

    async def show_outcome(
        self, attempt: SearchAttempt, placeholder: MessageProtocol
    ) -> bool:
        """Render a finished attempt.

        Returns:
            False if the attempt was superseded and nothing was rendered.
        """
        await placeholder.remove()

        if not attempt.applied:
            logger.debug(f"Search #{attempt.sequence} superseded, not rendered")
            return False

        state = attempt.state
        if state.error:
            await self.clear_error()
            self.error_message = self._error_factory(state.error)
            await self.error_message.send()
            return True

        await self.clear_results()
        if not state.results:
            empty = self._message_factory(content=NO_RESULTS)
            await empty.send()
            self.result_messages = [(empty, None)]
            return True

        for result in state.results:
            msg = self._message_factory(
                content=self._renderer.result(result),
                actions=self._actions_factory(result),
            )
            await msg.send()
            self.result_messages.append((msg, result))
        return True

    async def clear_error(self) -> None:
        if self.error_message is not None:
            await self.error_message.remove()
        self.error_message = None

    async def clear_results(self) -> None:
        for msg, _ in self.result_messages:
            await msg.remove()
        self.result_messages = []

    async def rerender(self) -> None:
        """Re-apply the current theme to the results on screen."""
        for msg, result in self.result_messages:
            if result is None:
                continue
            msg.content = self._renderer.result(result)
            await msg.update()
