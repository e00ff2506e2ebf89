from pydantic import BaseModel, Field


class AnalysisRecordIn(BaseModel):
    engine: str = Field(min_length=1, max_length=100)
    sentiment_score: int | None = None
    performance_score: int | None = None
    response_time_ms: int | None = None
    keyword_relevance: list[str] = Field(default_factory=list)


class KeywordRankingsRequest(BaseModel):
    keywords: list[str] = Field(max_length=1000)
    analyses: list[AnalysisRecordIn] = Field(default_factory=list, max_length=10_000)


class EnginePerformanceRequest(BaseModel):
    analyses: list[AnalysisRecordIn] = Field(default_factory=list, max_length=10_000)


class KeywordRankingResponse(BaseModel):
    keyword: str
    total_mentions: int
    avg_sentiment_score: int
    avg_performance_score: int

    model_config = {"from_attributes": True}


class EnginePerformanceResponse(BaseModel):
    engine: str
    avg_sentiment_score: int
    avg_performance_score: int
    avg_response_time_ms: int
    total_analyses: int

    model_config = {"from_attributes": True}
