"""Search domain models."""
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

UNKNOWN_SOURCE = "Unknown"


class SessionStatus(Enum):
    """Phase of the search session, derived from SessionState fields."""
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    ERRORED = "errored"


@dataclass
class SearchRequest:
    """Body of a search call."""
    query: str
    top_k: int
    rerank: bool

    def to_payload(self) -> dict:
        return {"query": self.query, "top_k": self.top_k, "rerank": self.rerank}


@dataclass
class SearchResult:
    """Single matched sentence returned by the backend."""
    sentence_hash: str
    text: str
    source: Optional[str] = None
    score: Optional[float] = None
    justification: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "SearchResult":
        """Build a result from one item of the /search response body."""
        score = payload.get("score")
        return cls(
            sentence_hash=str(payload["sentence_hash"]),
            text=payload.get("text") or "",
            source=payload.get("source"),
            score=float(score) if score is not None else None,
            justification=payload.get("justification"),
        )

    @property
    def display_source(self) -> str:
        return self.source or UNKNOWN_SOURCE

    @property
    def display_score(self) -> str:
        """Score rounded to 4 decimals, empty when the backend sent none."""
        if self.score is None:
            return ""
        return f"{self.score:.4f}"


@dataclass
class FeedbackEvent:
    """Relevance judgment for one result."""
    query: str
    sentence_hash: str
    is_relevant: bool

    def to_payload(self) -> dict:
        return {
            "query": self.query,
            "sentence_hash": self.sentence_hash,
            "is_relevant": self.is_relevant,
        }


def clamp_top_k(value: Any) -> int:
    """Coerce a result-count edit to an int >= 1.

    Numeric strings and floats are truncated; anything non-numeric becomes 1.
    """
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 1
    if math.isnan(number) or math.isinf(number):
        return 1
    return max(1, int(number))


@dataclass
class SessionState:
    """Mutable state of one search session."""
    query: str = ""
    top_k: int = 5
    rerank: bool = True
    results: list[SearchResult] = field(default_factory=list)
    loading: bool = False
    error: str = ""
    completed_searches: int = 0

    @property
    def status(self) -> SessionStatus:
        if self.loading:
            return SessionStatus.LOADING
        if self.error:
            return SessionStatus.ERRORED
        if self.completed_searches:
            return SessionStatus.READY
        return SessionStatus.IDLE

    def to_request(self) -> SearchRequest:
        return SearchRequest(query=self.query, top_k=self.top_k, rerank=self.rerank)


@dataclass
class SearchAttempt:
    """Outcome of one submit: whether it was the latest and wrote the state."""
    sequence: int
    applied: bool
    state: SessionState
