"""
Chat view tests with fake messages.
One inline error region, one result list, superseded searches not rendered.
"""

import asyncio

import pytest

from resume_search.core.errors import SearchApiError
from resume_search.core.formatting import ThemedRenderer, format_result_markdown
from resume_search.core.models.preference import Theme
from resume_search.core.services.preference_store import DisplayPreferenceStore
from resume_search.core.services.session_controller import SearchSessionController
from resume_search.presentation.view import NO_RESULTS, SearchView


class FakeScreen:
    """Records which messages are currently shown."""

    def __init__(self):
        self.shown = []

    def visible(self, kind=None):
        return [m for m in self.shown if kind is None or m.kind == kind]


class FakeMessage:
    def __init__(self, screen, kind, content, actions=None):
        self.screen = screen
        self.kind = kind
        self.content = content
        self.actions = actions or []
        self.updates = 0

    async def send(self):
        self.screen.shown.append(self)

    async def update(self):
        self.updates += 1

    async def remove(self):
        self.screen.shown.remove(self)


@pytest.fixture
def screen():
    return FakeScreen()


@pytest.fixture
def renderer():
    return ThemedRenderer(Theme.LIGHT)


@pytest.fixture
def view(screen, renderer):
    return SearchView(
        renderer,
        lambda content, actions=None: FakeMessage(screen, "message", content, actions),
        lambda content: FakeMessage(screen, "error", content),
        lambda result: [("Relevant", result.sentence_hash), ("Not Relevant", result.sentence_hash)],
    )


async def run_search(view, controller):
    placeholder = await view.begin_search()
    attempt = await controller.attempt()
    return await view.show_outcome(attempt, placeholder)


@pytest.mark.asyncio
async def test_results_rendered_in_order_with_actions(view, screen, mock_api, results):
    controller = SearchSessionController(mock_api)

    assert await run_search(view, controller) is True

    shown = screen.visible("message")
    assert [m.content for m in shown] == [format_result_markdown(r) for r in results]
    assert shown[0].actions == [("Relevant", "abc123"), ("Not Relevant", "abc123")]
    assert screen.visible("error") == []


@pytest.mark.asyncio
async def test_placeholder_shown_only_while_loading(view, screen, mock_api, results):
    release = asyncio.Event()

    async def slow_search(request):
        await release.wait()
        return results

    mock_api.search.side_effect = slow_search
    controller = SearchSessionController(mock_api)

    task = asyncio.create_task(run_search(view, controller))
    await asyncio.sleep(0)
    assert [m.content.splitlines()[0] for m in screen.visible()] == ["Searching..."]

    release.set()
    await task
    assert all("Searching..." not in m.content for m in screen.visible())


@pytest.mark.asyncio
async def test_error_region_replaced_then_cleared(view, screen, mock_api, results):
    controller = SearchSessionController(mock_api)
    await run_search(view, controller)

    mock_api.search.side_effect = SearchApiError(500, "index unavailable")
    await run_search(view, controller)
    mock_api.search.side_effect = SearchApiError(503)
    await run_search(view, controller)

    errors = screen.visible("error")
    assert [m.content for m in errors] == ["Search failed"]
    assert len(screen.visible("message")) == len(results)

    mock_api.search.side_effect = None
    await run_search(view, controller)
    assert screen.visible("error") == []


@pytest.mark.asyncio
async def test_error_cleared_as_soon_as_next_search_starts(view, screen, mock_api):
    controller = SearchSessionController(mock_api)
    mock_api.search.side_effect = SearchApiError(500, "boom")
    await run_search(view, controller)
    assert len(screen.visible("error")) == 1

    placeholder = await view.begin_search()
    assert screen.visible("error") == []
    await placeholder.remove()


@pytest.mark.asyncio
async def test_superseded_search_not_rendered(view, screen, mock_api, results):
    release = asyncio.Event()

    async def search(request):
        if request.query == "first":
            await release.wait()
        return results[:1] if request.query == "first" else results

    mock_api.search.side_effect = search
    controller = SearchSessionController(mock_api)

    controller.set_query("first")
    first = asyncio.create_task(run_search(view, controller))
    await asyncio.sleep(0)
    controller.set_query("second")
    assert await run_search(view, controller) is True

    release.set()
    assert await first is False

    assert len(screen.visible("message")) == len(results)
    assert all("Searching..." not in m.content for m in screen.visible())


@pytest.mark.asyncio
async def test_empty_results(view, screen, mock_api):
    mock_api.search.return_value = []
    controller = SearchSessionController(mock_api)

    await run_search(view, controller)

    assert [m.content for m in screen.visible()] == [NO_RESULTS]


@pytest.mark.asyncio
async def test_theme_change_rerenders_results(view, screen, renderer, mock_api, results, memory_storage):
    store = DisplayPreferenceStore(memory_storage)
    store.subscribe(renderer.apply)
    controller = SearchSessionController(mock_api)
    await run_search(view, controller)

    store.set(True)
    await view.rerender()

    shown = screen.visible("message")
    assert [m.content for m in shown] == [
        format_result_markdown(r, Theme.DARK) for r in results
    ]
    assert all(m.updates == 1 for m in shown)
