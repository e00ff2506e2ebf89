"""Profiling API: domain description/keywords and category prompt generation."""

import logging

from fastapi import APIRouter, HTTPException, Request

from app.core.config import settings
from app.core.rate_limit import limiter, scoring_limit
from app.engines.base import BaseEngine, EngineError
from app.engines.profiling import analyze_domain, generate_prompts
from app.engines.registry import available_engines, get_engine
from app.schemas.profiling import (
    DomainAnalyzeRequest,
    DomainProfileResponse,
    GeneratedPromptResponse,
    PromptGenerateRequest,
)

logger = logging.getLogger(__name__)

domains_router = APIRouter(prefix="/domains", tags=["domains"])
prompts_router = APIRouter(prefix="/prompts", tags=["prompts"])


def _resolve_engine(name: str | None) -> BaseEngine:
    name = name or settings.profile_engine
    try:
        return get_engine(name)
    except KeyError:
        raise HTTPException(
            status_code=400,
            detail=f"Unknown engine '{name}'. Available: {', '.join(available_engines()) or 'none'}",
        )


def _engine_failure(e: EngineError) -> HTTPException:
    """Quota failures surface as 429, everything else as a bad gateway."""
    logger.warning("Engine %s failed (%s): %s", e.engine, e.kind, e, extra={"engine": e.engine})
    return HTTPException(status_code=429 if e.is_quota_error else 502, detail=str(e))


@domains_router.post("/analyze", response_model=DomainProfileResponse)
@limiter.limit(scoring_limit)
async def analyze(request: Request, body: DomainAnalyzeRequest):
    """Describe a domain and suggest keywords for it."""
    engine = _resolve_engine(body.engine)
    domain_name = body.domain_name.strip().lower()
    try:
        profile = await analyze_domain(engine, domain_name)
    except EngineError as e:
        raise _engine_failure(e)

    return {
        "domain_name": domain_name,
        "engine": engine.name,
        "description": profile.description,
        "keywords": profile.keywords,
    }


@prompts_router.post("/generate", response_model=list[GeneratedPromptResponse])
@limiter.limit(scoring_limit)
async def generate(request: Request, body: PromptGenerateRequest):
    """Generate category prompts from a domain profile."""
    engine = _resolve_engine(body.engine)
    try:
        prompts = await generate_prompts(
            engine,
            body.domain_name,
            body.description,
            body.keywords,
            body.category,
        )
    except EngineError as e:
        raise _engine_failure(e)
    return [p.model_dump() for p in prompts]
