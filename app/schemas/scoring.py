from pydantic import BaseModel, Field


class ScoreRequest(BaseModel):
    text: str = Field("", max_length=200_000)
    keywords: list[str] = Field(default_factory=list, max_length=500)
    elapsed_ms: int = 0


class ScoreResponse(BaseModel):
    sentiment_score: int = Field(ge=0, le=100)
    keyword_relevance: list[str]
    performance_score: int = Field(ge=0, le=100)

    model_config = {"from_attributes": True}


class CompareRequest(BaseModel):
    prompt: str = Field(min_length=1, max_length=20_000)
    keywords: list[str] = Field(default_factory=list, max_length=500)
    engines: list[str] = Field(min_length=1, max_length=10)


class EngineAnalysisResponse(BaseModel):
    engine: str
    response: str
    response_time_ms: int
    sentiment_score: int = Field(ge=0, le=100)
    keyword_relevance: list[str]
    performance_score: int = Field(ge=0, le=100)

    model_config = {"from_attributes": True}
