"""Analytics API: keyword rankings and engine performance over stored analyses.

The caller sends the analyses it holds; nothing is read from storage here.
"""

from fastapi import APIRouter

from app.analysis.aggregation import build_engine_performance, build_keyword_rankings
from app.analysis.types import AnalysisRecord
from app.schemas.analytics import (
    AnalysisRecordIn,
    EnginePerformanceRequest,
    EnginePerformanceResponse,
    KeywordRankingResponse,
    KeywordRankingsRequest,
)

router = APIRouter(prefix="/analytics", tags=["analytics"])


def _to_records(items: list[AnalysisRecordIn]) -> list[AnalysisRecord]:
    return [AnalysisRecord(**item.model_dump()) for item in items]


@router.post("/keyword-rankings", response_model=list[KeywordRankingResponse])
async def keyword_rankings(body: KeywordRankingsRequest):
    """Rank domain keywords by how many analyses found them relevant."""
    return build_keyword_rankings(body.keywords, _to_records(body.analyses))


@router.post("/engine-performance", response_model=list[EnginePerformanceResponse])
async def engine_performance(body: EnginePerformanceRequest):
    """Average sentiment, performance and latency per engine."""
    return build_engine_performance(_to_records(body.analyses))
