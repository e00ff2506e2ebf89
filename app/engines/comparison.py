"""Engine comparison runner.

Sends one prompt to several engines at once, times each call and scores
each answer against the domain keywords. An engine that fails is logged
and left out; the remaining results are returned in engine order.
"""

from __future__ import annotations

import asyncio
import logging
import time

from app.analysis.scoring import score
from app.analysis.types import EngineAnalysis
from app.core.metrics import ENGINE_FAILURES, record_score
from app.engines.base import BaseEngine, EngineError

logger = logging.getLogger(__name__)


async def analyze_with_engine(engine: BaseEngine, prompt: str, keywords: list[str]) -> EngineAnalysis:
    """Run *prompt* through *engine* and score the answer.

    Elapsed time covers only the ``generate`` call. Non-``EngineError``
    exceptions are wrapped so callers deal with a single error type.
    """
    start = time.perf_counter()
    try:
        text = await engine.generate(prompt, keywords)
    except EngineError as e:
        if not e.engine:
            e.engine = engine.name
        raise
    except Exception as e:
        raise EngineError(f"{type(e).__name__}: {e}", engine=engine.name) from e
    response_time_ms = int((time.perf_counter() - start) * 1000)

    result = score(text, keywords, response_time_ms)
    record_score(engine.name, result.performance_score)

    return EngineAnalysis(
        engine=engine.name,
        response=text or "",
        response_time_ms=response_time_ms,
        sentiment_score=result.sentiment_score,
        keyword_relevance=list(result.keyword_relevance),
        performance_score=result.performance_score,
    )


async def compare_engines(
    prompt: str,
    keywords: list[str],
    engines: list[BaseEngine],
) -> list[EngineAnalysis]:
    """Analyze *prompt* with every engine concurrently.

    Returns:
        One EngineAnalysis per engine that succeeded, in the order given.
    """
    outcomes = await asyncio.gather(
        *(analyze_with_engine(engine, prompt, keywords) for engine in engines),
        return_exceptions=True,
    )

    analyses: list[EngineAnalysis] = []
    for engine, outcome in zip(engines, outcomes):
        if isinstance(outcome, EngineError):
            ENGINE_FAILURES.labels(engine=engine.name, kind=outcome.kind).inc()
            logger.warning(
                "Engine %s failed (%s): %s",
                engine.name,
                outcome.kind,
                outcome,
                extra={"engine": engine.name},
            )
            continue
        if isinstance(outcome, BaseException):
            raise outcome
        logger.info(
            "Engine %s: %dms, sentiment=%d, performance=%d, relevant=%d/%d",
            engine.name,
            outcome.response_time_ms,
            outcome.sentiment_score,
            outcome.performance_score,
            len(outcome.keyword_relevance),
            len(keywords),
            extra={"engine": engine.name},
        )
        analyses.append(outcome)
    return analyses
