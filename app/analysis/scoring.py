"""Performance score composer and the top-level ``score`` entry point.

Performance score (additive, then clamped to 0–100):

    sentiment score
  + length bonus    min(20, len(text) // 100)
  + speed bonus     +10 under 3 s, +5 under 5 s
  + quality bonus   +2 per occurrence of each quality word (substring count)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from app.analysis.numbers import clamp, round_half_up
from app.analysis.relevance import analyze_keyword_relevance
from app.analysis.sentiment import calculate_sentiment_score
from app.analysis.types import AnalysisInput, AnalysisResult

logger = logging.getLogger(__name__)

MAX_LENGTH_BONUS = 20
LENGTH_BONUS_STEP = 100  # characters per bonus point

FAST_RESPONSE_MS = 3000
FAST_RESPONSE_BONUS = 10
MODERATE_RESPONSE_MS = 5000
MODERATE_RESPONSE_BONUS = 5

QUALITY_WORD_BONUS = 2
QUALITY_WORDS: tuple[str, ...] = (
    "strategy",
    "analysis",
    "recommendation",
    "insight",
    "opportunity",
    "potential",
    "market",
    "competitive",
    "growth",
)


def calculate_length_bonus(text: str) -> int:
    return min(MAX_LENGTH_BONUS, len(text) // LENGTH_BONUS_STEP)


def calculate_speed_bonus(response_time_ms: float) -> int:
    if response_time_ms < FAST_RESPONSE_MS:
        return FAST_RESPONSE_BONUS
    if response_time_ms < MODERATE_RESPONSE_MS:
        return MODERATE_RESPONSE_BONUS
    return 0


def calculate_quality_bonus(text: str) -> int:
    text_lower = text.lower()
    occurrences = sum(text_lower.count(word) for word in QUALITY_WORDS)
    return occurrences * QUALITY_WORD_BONUS


def calculate_performance_score(text: str, sentiment_score: float, response_time_ms: float) -> int:
    """Blend sentiment, length, latency and quality vocabulary into 0–100."""
    text = text or ""
    length_bonus = calculate_length_bonus(text)
    speed_bonus = calculate_speed_bonus(response_time_ms)
    quality_bonus = calculate_quality_bonus(text)

    total = sentiment_score + length_bonus + speed_bonus + quality_bonus
    score = round_half_up(clamp(total))

    logger.debug(
        "Performance: sentiment=%s length=+%d speed=+%d quality=+%d → %d",
        sentiment_score,
        length_bonus,
        speed_bonus,
        quality_bonus,
        score,
    )
    return score


def score(text: str, keywords: Iterable[str] = (), elapsed_ms: float = 0) -> AnalysisResult:
    """Score a single engine response.

    Pure and total: empty text, no keywords or a non-positive elapsed time
    all produce a valid, clamped result.
    """
    text = text or ""
    sentiment = calculate_sentiment_score(text)
    relevance = analyze_keyword_relevance(text, keywords)
    performance = calculate_performance_score(text, sentiment, elapsed_ms)
    return AnalysisResult(
        sentiment_score=sentiment,
        keyword_relevance=tuple(relevance),
        performance_score=performance,
    )


def score_input(analysis_input: AnalysisInput, elapsed_ms: float = 0) -> AnalysisResult:
    return score(analysis_input.text, analysis_input.keywords, elapsed_ms)
