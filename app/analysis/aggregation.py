"""Analytics over stored analyses: keyword rankings and per-engine performance.

Both functions work on records the storage layer already holds; nothing
is re-scored here. Missing or zero scores are skipped in the sums but
still count toward the divisors where noted, matching how the dashboard
numbers have always been computed.
"""

from __future__ import annotations

from collections.abc import Iterable

from app.analysis.numbers import round_half_up
from app.analysis.types import AnalysisRecord, EnginePerformance, KeywordRanking


def _average(total: float, count: int) -> int:
    return round_half_up(total / count) if count > 0 else 0


def rank_keyword(keyword: str, records: list[AnalysisRecord]) -> KeywordRanking:
    total_mentions = 0
    sentiment_total = 0
    sentiment_count = 0
    performance_total = 0

    for record in records:
        if keyword not in record.keyword_relevance:
            continue
        total_mentions += 1
        if record.sentiment_score:
            sentiment_total += record.sentiment_score
            sentiment_count += 1
        if record.performance_score:
            performance_total += record.performance_score

    return KeywordRanking(
        keyword=keyword,
        total_mentions=total_mentions,
        avg_sentiment_score=_average(sentiment_total, sentiment_count),
        # Divided by all mentions, not only the ones carrying a score
        avg_performance_score=_average(performance_total, total_mentions),
    )


def build_keyword_rankings(
    keywords: Iterable[str],
    records: Iterable[AnalysisRecord],
) -> list[KeywordRanking]:
    """Rank keywords by how often analyses found them relevant.

    Sorted by mentions, then average performance (both descending);
    ties keep the keyword order.
    """
    records = list(records)
    rankings = [rank_keyword(keyword, records) for keyword in keywords]
    rankings.sort(key=lambda r: (-r.total_mentions, -r.avg_performance_score))
    return rankings


def build_engine_performance(records: Iterable[AnalysisRecord]) -> list[EnginePerformance]:
    """Average scores and latency per engine, engines in first-seen order."""
    stats: dict[str, dict[str, int]] = {}

    for record in records:
        engine_stats = stats.setdefault(
            record.engine,
            {"sentiment": 0, "performance": 0, "response_time": 0, "count": 0},
        )
        engine_stats["count"] += 1
        if record.sentiment_score:
            engine_stats["sentiment"] += record.sentiment_score
        if record.performance_score:
            engine_stats["performance"] += record.performance_score
        if record.response_time_ms:
            engine_stats["response_time"] += record.response_time_ms

    return [
        EnginePerformance(
            engine=engine,
            avg_sentiment_score=_average(s["sentiment"], s["count"]),
            avg_performance_score=_average(s["performance"], s["count"]),
            avg_response_time_ms=_average(s["response_time"], s["count"]),
            total_analyses=s["count"],
        )
        for engine, s in stats.items()
    ]
