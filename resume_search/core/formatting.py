"""Text rendering of search results shared by the UI and the CLI."""
from dataclasses import dataclass

from .models.preference import Theme
from .models.search import SearchResult

SKELETON_COUNT = 3


@dataclass(frozen=True)
class Palette:
    """Theme-dependent markers used in rendered results."""
    skeleton: str
    score_badge: str
    justification_badge: str
    ansi_accent: str
    ansi_muted: str


PALETTES = {
    Theme.LIGHT: Palette(
        skeleton="▒",
        score_badge="🔵",
        justification_badge="💡",
        ansi_accent="\033[34m",
        ansi_muted="\033[90m",
    ),
    Theme.DARK: Palette(
        skeleton="░",
        score_badge="🟣",
        justification_badge="✨",
        ansi_accent="\033[96m",
        ansi_muted="\033[37m",
    ),
}

ANSI_RESET = "\033[0m"


def format_result_header(result: SearchResult) -> str:
    return f"Source: {result.display_source} | Score: {result.display_score}"


def format_result_markdown(result: SearchResult, theme: Theme = Theme.LIGHT) -> str:
    """Markdown card for one result: header, sentence, optional justification."""
    palette = PALETTES[theme]
    parts = [f"{palette.score_badge} *{format_result_header(result)}*", "", result.text]
    if result.justification:
        parts.extend(["", f"> {palette.justification_badge} {result.justification}"])
    return "\n".join(parts)


def format_result_plain(
    index: int, result: SearchResult, theme: Theme = Theme.LIGHT, color: bool = False
) -> str:
    palette = PALETTES[theme]
    accent, muted, reset = (
        (palette.ansi_accent, palette.ansi_muted, ANSI_RESET) if color else ("", "", "")
    )
    lines = [
        f"{accent}[{index}] {format_result_header(result)}{reset}",
        f"    {result.text}",
    ]
    if result.justification:
        lines.append(f"    {muted}Why: {result.justification}{reset}")
    lines.append(f"    {muted}id: {result.sentence_hash}{reset}")
    return "\n".join(lines)


def loading_placeholder(theme: Theme = Theme.LIGHT) -> str:
    """Skeleton shown while a search is in flight."""
    line = PALETTES[theme].skeleton * 40
    return "\n".join(["Searching...", ""] + [line] * SKELETON_COUNT)


class ThemedRenderer:
    """Renders results with the current theme.

    Subscribe `apply` to the preference store to re-theme on every change.
    """

    def __init__(self, theme: Theme = Theme.LIGHT):
        self.theme = theme

    def apply(self, dark_mode: bool) -> None:
        self.theme = Theme.from_dark_mode(dark_mode)

    def result(self, result: SearchResult) -> str:
        return format_result_markdown(result, self.theme)

    def placeholder(self) -> str:
        return loading_placeholder(self.theme)
