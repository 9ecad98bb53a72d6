import asyncio
import logging

import chainlit as cl
from chainlit.input_widget import NumberInput, Switch

from resume_search.config.settings import settings
from resume_search.container import configure_container, container
from resume_search.core.formatting import ThemedRenderer
from resume_search.core.models.search import SearchResult
from resume_search.core.services.feedback_service import FeedbackSubmitter
from resume_search.core.services.preference_store import DisplayPreferenceStore
from resume_search.core.services.session_controller import SearchSessionController
from resume_search.infrastructure.notifiers.chainlit_notifier import (
    ChainlitToastNotifier,
)
from resume_search.presentation.view import SearchView

logger = logging.getLogger(__name__)

configure_container(settings, notifier_factory=ChainlitToastNotifier)

FEEDBACK_ACTION = "feedback"


def _controller() -> SearchSessionController:
    return cl.user_session.get("controller")


def _view() -> SearchView:
    return cl.user_session.get("view")


def _result_actions(result: SearchResult) -> list[cl.Action]:
    return [
        cl.Action(
            name=FEEDBACK_ACTION,
            payload={"sentence_hash": result.sentence_hash, "is_relevant": True},
            label="Relevant",
        ),
        cl.Action(
            name=FEEDBACK_ACTION,
            payload={"sentence_hash": result.sentence_hash, "is_relevant": False},
            label="Not Relevant",
        ),
    ]


def _message(content: str, actions: list | None = None) -> cl.Message:
    return cl.Message(content=content, actions=actions or [])


def _error(content: str) -> cl.ErrorMessage:
    return cl.ErrorMessage(content=content)


@cl.on_chat_start
async def start():
    controller = container.resolve(SearchSessionController)
    cl.user_session.set("controller", controller)
    cl.user_session.set("feedback", container.resolve(FeedbackSubmitter))

    store = container.resolve(DisplayPreferenceStore)
    dark_mode = store.load()
    renderer = ThemedRenderer(store.theme)
    store.subscribe(renderer.apply)
    cl.user_session.set("preferences", store)
    cl.user_session.set(
        "view", SearchView(renderer, _message, _error, _result_actions)
    )

    await cl.ChatSettings(
        [
            NumberInput(
                id="top_k",
                label="Results",
                initial=controller.state.top_k,
            ),
            Switch(id="rerank", label="Use LLM Reranking", initial=controller.state.rerank),
            Switch(id="dark_mode", label="Dark Mode", initial=dark_mode),
        ]
    ).send()

    await cl.send_window_message({"type": "theme", "theme": store.theme.value})
    await cl.Message(
        content="Resume Search\n\nEnter a job requirement to find matching resume sentences."
    ).send()


@cl.on_settings_update
async def update_settings(values: dict):
    controller = _controller()
    controller.set_top_k(values.get("top_k", controller.state.top_k))
    controller.set_rerank(values.get("rerank", controller.state.rerank))

    store: DisplayPreferenceStore = cl.user_session.get("preferences")
    dark_mode = bool(values.get("dark_mode", store.value))
    if dark_mode != store.value:
        store.set(dark_mode)
        # Host pages embedding the app switch their own theme on this message.
        await cl.send_window_message({"type": "theme", "theme": store.theme.value})
        await _view().rerender()


@cl.on_message
async def main(message: cl.Message):
    controller = _controller()
    view = _view()
    controller.set_query(message.content)

    placeholder = await view.begin_search()
    try:
        attempt = await controller.attempt()
    except asyncio.CancelledError:
        await placeholder.remove()
        raise
    await view.show_outcome(attempt, placeholder)


@cl.action_callback(FEEDBACK_ACTION)
async def on_feedback(action: cl.Action):
    submitter: FeedbackSubmitter = cl.user_session.get("feedback")
    await submitter.send_feedback(
        _controller().state.query,
        action.payload["sentence_hash"],
        bool(action.payload["is_relevant"]),
    )
