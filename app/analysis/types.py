"""Core types and DTOs for response scoring and analytics."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field


# ---------------------------------------------------------------------------
# Scoring
# ---------------------------------------------------------------------------


@dataclass
class AnalysisInput:
    """Text returned by an engine plus the domain keywords it is scored against."""

    text: str = ""
    keywords: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class AnalysisResult:
    """Output of the scoring pipeline for a single response."""

    sentiment_score: int = 75  # 0–100, 75 = neutral
    keyword_relevance: tuple[str, ...] = ()  # subset of input keywords, input order
    performance_score: int = 0  # 0–100

    def to_dict(self) -> dict:
        return {
            "sentiment_score": self.sentiment_score,
            "keyword_relevance": list(self.keyword_relevance),
            "performance_score": self.performance_score,
        }


@dataclass
class EngineAnalysis:
    """A scored engine response, in the shape callers persist."""

    engine: str = ""
    response: str = ""
    response_time_ms: int = 0
    sentiment_score: int = 75
    keyword_relevance: list[str] = field(default_factory=list)
    performance_score: int = 0

    def to_dict(self) -> dict:
        return asdict(self)


# ---------------------------------------------------------------------------
# Analytics over stored analyses
# ---------------------------------------------------------------------------


@dataclass
class AnalysisRecord:
    """A previously stored analysis, as handed back by the storage layer.

    Score fields are nullable because older rows may not carry them.
    """

    engine: str = ""
    sentiment_score: int | None = None
    performance_score: int | None = None
    response_time_ms: int | None = None
    keyword_relevance: list[str] = field(default_factory=list)


@dataclass
class KeywordRanking:
    keyword: str = ""
    total_mentions: int = 0
    avg_sentiment_score: int = 0
    avg_performance_score: int = 0


@dataclass
class EnginePerformance:
    engine: str = ""
    avg_sentiment_score: int = 0
    avg_performance_score: int = 0
    avg_response_time_ms: int = 0
    total_analyses: int = 0
