"""Keyword relevance matcher.

A keyword is relevant to a response when any of these loose tests holds
(everything lowercased):

  1. the keyword is a substring of the text;
  2. the keyword with its whitespace removed is a substring of the text
     ("market share" matches "marketshare");
  3. some whitespace token of the text is a substring of the keyword, or
     contains it ("cat" matches "category", and "market" matches the
     keyword "market share").

Over-matching on short keywords is accepted; stored rankings depend on it.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

_WHITESPACE_RE = re.compile(r"\s+")


def is_keyword_relevant(text_lower: str, tokens: list[str], keyword: str) -> bool:
    """Check a single keyword against pre-lowercased text and its tokens."""
    keyword_lower = keyword.lower()
    if keyword_lower in text_lower:
        return True
    if _WHITESPACE_RE.sub("", keyword_lower) in text_lower:
        return True
    return any(token in keyword_lower or keyword_lower in token for token in tokens)


def analyze_keyword_relevance(text: str, keywords: Iterable[str]) -> list[str]:
    """Return the keywords relevant to *text*, in input order, without repeats.

    Keywords keep the caller's spelling. Empty text and blank keywords never match.
    """
    text_lower = (text or "").lower()
    if not text_lower.strip():
        return []

    tokens = text_lower.split()
    relevant: list[str] = []
    seen: set[str] = set()
    for keyword in keywords:
        if not keyword or not keyword.strip() or keyword in seen:
            continue
        seen.add(keyword)
        if is_keyword_relevant(text_lower, tokens, keyword):
            relevant.append(keyword)
    return relevant
