#!/usr/bin/env python3
"""
Smoke test of a running search backend through the client package.

Run:
  python scripts/smoke_search.py

Options:
  --api-url          Backend base address (default: settings.api_url)
  --api-key          Search API key (default: settings.api_key)
  --print-results    Print every result
  --feedback         Also send a feedback judgment for the first result
"""

import argparse
import asyncio
import sys

from resume_search.config.settings import settings
from resume_search.core.formatting import format_result_plain
from resume_search.core.models.notification import Notification
from resume_search.core.models.search import SessionStatus
from resume_search.core.services.feedback_service import FeedbackSubmitter
from resume_search.core.services.session_controller import SearchSessionController
from resume_search.infrastructure.api.search_api_client import SearchApiClient

TESTS = [
    {"q": "backend engineer with Python and PostgreSQL", "top_k": 5, "rerank": True},
    {"q": "data scientist experienced in NLP", "top_k": 3, "rerank": False},
    {"q": "kubernetes", "top_k": 1, "rerank": True},
]


class PrintNotifier:
    async def notify(self, notification: Notification) -> None:
        print(f"  [{notification.level.value}] {notification.message}")


def check_results(state, test: dict) -> list[str]:
    errors = []
    if state.status is not SessionStatus.READY:
        errors.append(f"status {state.status.value}: {state.error}")
        return errors

    if len(state.results) > test["top_k"]:
        errors.append(f"got {len(state.results)} results for top_k={test['top_k']}")

    hashes = [r.sentence_hash for r in state.results]
    if len(set(hashes)) != len(hashes):
        errors.append("duplicate sentence_hash in results")

    if not test["rerank"] and any(r.justification for r in state.results):
        errors.append("justification returned without rerank")

    return errors


async def run(args) -> int:
    failures = 0
    async with SearchApiClient(args.api_url, args.api_key) as api:
        controller = SearchSessionController(api)
        submitter = FeedbackSubmitter(api, PrintNotifier())

        for idx, test in enumerate(TESTS, start=1):
            print(f"\nQ{idx}: {test['q']}")
            controller.set_query(test["q"])
            controller.set_top_k(test["top_k"])
            controller.set_rerank(test["rerank"])
            state = await controller.submit()

            if args.print_results:
                for i, result in enumerate(state.results, 1):
                    print(format_result_plain(i, result))

            errors = check_results(state, test)
            if errors:
                failures += 1
                print("FAIL:", "; ".join(errors))
                continue
            print(f"OK ({len(state.results)} results)")

            if args.feedback and state.results:
                ok = await submitter.send_feedback(
                    test["q"], state.results[0].sentence_hash, True
                )
                if not ok:
                    failures += 1

    if failures:
        print(f"\nFAILED: {failures} test(s) failed")
        return 1
    print("\nALL OK")
    return 0


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--api-url", default=settings.api_url)
    parser.add_argument("--api-key", default=settings.api_key)
    parser.add_argument("--print-results", action="store_true")
    parser.add_argument("--feedback", action="store_true")
    args = parser.parse_args()

    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
