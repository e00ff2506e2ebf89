"""Scoring API: score a single response or compare engines on one prompt."""

import logging

from fastapi import APIRouter, HTTPException, Request

from app.analysis.scoring import score
from app.core.rate_limit import limiter, scoring_limit
from app.engines.comparison import compare_engines
from app.engines.registry import available_engines, get_engine
from app.schemas.scoring import CompareRequest, EngineAnalysisResponse, ScoreRequest, ScoreResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/scoring", tags=["scoring"])


@router.post("/score", response_model=ScoreResponse)
@limiter.limit(scoring_limit)
async def score_response(request: Request, body: ScoreRequest):
    """Score text the caller already obtained from an engine."""
    result = score(body.text, body.keywords, body.elapsed_ms)
    return result.to_dict()


@router.post("/compare", response_model=list[EngineAnalysisResponse])
@limiter.limit(scoring_limit)
async def compare(request: Request, body: CompareRequest):
    """Send one prompt to the requested engines and score every answer.

    Engines that fail are skipped; the response lists only successful ones.
    """
    engines = []
    for name in dict.fromkeys(body.engines):
        try:
            engines.append(get_engine(name))
        except KeyError:
            raise HTTPException(
                status_code=400,
                detail=f"Unknown engine '{name}'. Available: {', '.join(available_engines()) or 'none'}",
            )

    analyses = await compare_engines(body.prompt, body.keywords, engines)
    if len(analyses) < len(engines):
        logger.warning("Compare: %d of %d engines returned results", len(analyses), len(engines))
    return [a.to_dict() for a in analyses]


@router.get("/engines")
async def list_engines():
    """Engines the compare endpoint accepts."""
    return {"engines": available_engines()}
