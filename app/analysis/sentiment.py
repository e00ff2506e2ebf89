"""Word-list sentiment scorer.

Counts whitespace tokens that contain a positive or a negative marker
(substring containment, so "strongly" counts as "strong" and "risky" as
"risk"). A single token can count toward both sides.

    score = round(positive / (positive + negative) × 100)

With no marker hits at all the response is treated as neutral (75).
"""

from __future__ import annotations

import logging

from app.analysis.numbers import round_half_up

logger = logging.getLogger(__name__)

NEUTRAL_SENTIMENT_SCORE = 75

POSITIVE_MARKERS: tuple[str, ...] = (
    "excellent",
    "great",
    "good",
    "positive",
    "strong",
    "potential",
    "opportunity",
    "success",
    "effective",
    "valuable",
)

NEGATIVE_MARKERS: tuple[str, ...] = (
    "poor",
    "bad",
    "negative",
    "weak",
    "problem",
    "issue",
    "challenge",
    "difficulty",
    "risk",
    "concern",
)


def count_sentiment_tokens(text: str) -> tuple[int, int]:
    """Return (positive, negative) token counts for *text*."""
    positive = 0
    negative = 0
    for token in (text or "").lower().split():
        if any(marker in token for marker in POSITIVE_MARKERS):
            positive += 1
        if any(marker in token for marker in NEGATIVE_MARKERS):
            negative += 1
    return positive, negative


def calculate_sentiment_score(text: str) -> int:
    """Score *text* on 0–100, where 0 is all-negative and 100 all-positive."""
    positive, negative = count_sentiment_tokens(text)
    total = positive + negative
    if total == 0:
        return NEUTRAL_SENTIMENT_SCORE

    score = round_half_up(positive / total * 100)
    logger.debug("Sentiment: positive=%d negative=%d → %d", positive, negative, score)
    return score
