from pydantic import BaseModel, Field


class DomainAnalyzeRequest(BaseModel):
    domain_name: str = Field(min_length=1, max_length=253)
    engine: str | None = None  # defaults to PROFILE_ENGINE


class DomainProfileResponse(BaseModel):
    domain_name: str
    engine: str
    description: str
    keywords: list[str]


class PromptGenerateRequest(BaseModel):
    domain_name: str = Field(min_length=1, max_length=253)
    description: str = Field("", max_length=20_000)
    keywords: list[str] = Field(default_factory=list, max_length=500)
    category: str = Field("Marketing Prompts", min_length=1, max_length=200)
    engine: str | None = None


class GeneratedPromptResponse(BaseModel):
    content: str
    category: str

    model_config = {"from_attributes": True}
