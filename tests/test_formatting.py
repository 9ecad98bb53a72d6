"""Themed rendering tests: the preference store drives what gets rendered."""

from resume_search.core.formatting import (
    ANSI_RESET,
    PALETTES,
    ThemedRenderer,
    format_result_markdown,
    format_result_plain,
    loading_placeholder,
)
from resume_search.core.models.preference import Theme
from resume_search.core.models.search import SearchResult
from resume_search.core.services.preference_store import DisplayPreferenceStore

RESULT = SearchResult(
    "abc123", "Built REST APIs.", source="alice.pdf", score=0.9, justification="fits"
)


def test_markdown_uses_theme_badges():
    light = format_result_markdown(RESULT, Theme.LIGHT)
    dark = format_result_markdown(RESULT, Theme.DARK)

    assert light.startswith(PALETTES[Theme.LIGHT].score_badge)
    assert dark.startswith(PALETTES[Theme.DARK].score_badge)
    assert f"> {PALETTES[Theme.DARK].justification_badge} fits" in dark
    assert light != dark


def test_placeholder_uses_theme_skeleton():
    dark_lines = loading_placeholder(Theme.DARK).splitlines()[2:]
    assert len(dark_lines) == 3
    assert all(set(line) == {PALETTES[Theme.DARK].skeleton} for line in dark_lines)


def test_plain_color_only_when_requested():
    plain = format_result_plain(1, RESULT, Theme.DARK)
    colored = format_result_plain(1, RESULT, Theme.DARK, color=True)

    assert "\033[" not in plain
    assert colored.startswith(PALETTES[Theme.DARK].ansi_accent)
    assert ANSI_RESET in colored


def test_renderer_follows_preference_store(memory_storage):
    store = DisplayPreferenceStore(memory_storage)
    renderer = ThemedRenderer(Theme.from_dark_mode(store.load()))
    store.subscribe(renderer.apply)
    assert renderer.result(RESULT) == format_result_markdown(RESULT, Theme.LIGHT)

    store.set(True)
    assert renderer.theme is Theme.DARK
    assert renderer.result(RESULT) == format_result_markdown(RESULT, Theme.DARK)
    assert renderer.placeholder() == loading_placeholder(Theme.DARK)

    store.toggle()
    assert renderer.result(RESULT) == format_result_markdown(RESULT, Theme.LIGHT)
