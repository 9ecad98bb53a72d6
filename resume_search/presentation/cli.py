import argparse
import asyncio
import logging
import subprocess
import sys
from pathlib import Path

from resume_search.config.settings import settings
from resume_search.container import configure_container, container
from resume_search.core.formatting import format_result_plain
from resume_search.core.models.search import SessionState, SessionStatus
from resume_search.core.protocols.search_api import SearchApiProtocol
from resume_search.core.services.feedback_service import FeedbackSubmitter
from resume_search.core.services.preference_store import DisplayPreferenceStore
from resume_search.core.services.session_controller import SearchSessionController

logger = logging.getLogger(__name__)

CHAINLIT_APP = Path(__file__).with_name("chainlit_app.py")


def _log_transition(state: SessionState) -> None:
    logger.debug(f"Session: {state.status.value}")


async def _close_api() -> None:
    await container.resolve(SearchApiProtocol).aclose()


async def run_search(query: str, top_k: int, rerank: bool) -> SessionState:
    """Run one search session and close the HTTP client."""
    controller = container.resolve(SearchSessionController)
    controller.subscribe(_log_transition)
    controller.set_query(query)
    controller.set_top_k(top_k)
    controller.set_rerank(rerank)
    try:
        return await controller.submit()
    finally:
        await _close_api()


async def run_feedback(query: str, sentence_hash: str, is_relevant: bool) -> bool:
    submitter = container.resolve(FeedbackSubmitter)
    try:
        return await submitter.send_feedback(query, sentence_hash, is_relevant)
    finally:
        await _close_api()


def cmd_ui(args: argparse.Namespace) -> int:
    """UI command - launch the Chainlit app."""
    logger.info(f"Starting Chainlit against {settings.api_url}...")
    completed = subprocess.run(
        [
            sys.executable,
            "-m",
            "chainlit",
            "run",
            str(CHAINLIT_APP),
            "--host",
            settings.chainlit_host,
            "--port",
            str(settings.chainlit_port),
        ]
    )
    return completed.returncode


def cmd_search(args: argparse.Namespace) -> int:
    """Search command - one query, results printed to stdout."""
    state = asyncio.run(run_search(args.query, args.top_k, not args.no_rerank))

    if state.status is SessionStatus.ERRORED:
        print(f"Error: {state.error}")
        return 1

    if not state.results:
        print("No results")
        return 0

    store = container.resolve(DisplayPreferenceStore)
    store.load()
    color = sys.stdout.isatty()
    for i, result in enumerate(state.results, 1):
        print(format_result_plain(i, result, store.theme, color=color))
    return 0


def cmd_feedback(args: argparse.Namespace) -> int:
    ok = asyncio.run(run_feedback(args.query, args.sentence_hash, args.relevant))
    return 0 if ok else 1


def cmd_theme(args: argparse.Namespace) -> int:
    """Theme command - show or change the dark mode preference."""
    store = container.resolve(DisplayPreferenceStore)
    store.load()
    store.subscribe(lambda value: logger.info(f"Theme set to {store.theme.value}"))

    if args.mode == "toggle":
        store.toggle()
    elif args.mode is not None:
        store.set(args.mode == "dark")

    print(store.theme.value)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="resume-search", description="Resume semantic search client"
    )
    sub = parser.add_subparsers(dest="command")

    ui = sub.add_parser("ui", help="Launch the chat UI")
    ui.set_defaults(func=cmd_ui)

    search = sub.add_parser("search", help="Run a single search")
    search.add_argument("query", help="Job requirement to match")
    search.add_argument("--top-k", type=int, default=settings.default_top_k)
    search.add_argument(
        "--no-rerank", action="store_true", default=not settings.default_rerank
    )
    search.set_defaults(func=cmd_search)

    feedback = sub.add_parser("feedback", help="Mark a result relevant or not")
    feedback.add_argument("query")
    feedback.add_argument("sentence_hash")
    judgment = feedback.add_mutually_exclusive_group(required=True)
    judgment.add_argument("--relevant", dest="relevant", action="store_true")
    judgment.add_argument("--not-relevant", dest="relevant", action="store_false")
    feedback.set_defaults(func=cmd_feedback)

    theme = sub.add_parser("theme", help="Show or change the display theme")
    theme.add_argument("mode", nargs="?", choices=["dark", "light", "toggle"])
    theme.set_defaults(func=cmd_theme)

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_usage()
        return 1

    logging.basicConfig(level=settings.log_level, format="%(message)s")
    configure_container(settings)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
