"""Tests for the domain profiling and prompt generation API."""

import httpx
import pytest
from httpx import AsyncClient

from app.core.config import settings
from app.engines.base import BaseEngine, EngineError
from app.engines.openai_engine import OpenAiEngine
from app.engines.registry import ENGINE_REGISTRY


class _StaticEngine(BaseEngine):
    name = "static"

    def __init__(self, answer: str = "", error: EngineError | None = None):
        self.answer = answer
        self.error = error

    async def generate(self, prompt: str, keywords: list[str] | None = None) -> str:
        if self.error:
            raise self.error
        return self.answer


@pytest.fixture
def use_static(monkeypatch):
    """Register a static engine answering with the given text or error."""
    monkeypatch.setattr(settings, "enabled_engines", "simulated,static")

    def _use(answer: str = "", error: EngineError | None = None):
        monkeypatch.setitem(ENGINE_REGISTRY, "static", lambda: _StaticEngine(answer, error))

    return _use


# ---------------------------------------------------------------------------
# POST /api/v1/domains/analyze
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_analyze_domain(client: AsyncClient, use_static):
    use_static('{"description": "Online shoe retailer.", "keywords": ["shoes", "fashion"]}')
    response = await client.post(
        "/api/v1/domains/analyze", json={"domain_name": "  Shoes.Example ", "engine": "static"}
    )
    assert response.status_code == 200
    assert response.json() == {
        "domain_name": "shoes.example",
        "engine": "static",
        "description": "Online shoe retailer.",
        "keywords": ["shoes", "fashion"],
    }


@pytest.mark.asyncio
async def test_analyze_domain_fallbacks(client: AsyncClient, use_static):
    use_static('```json\n{"keywords": "not a list"}\n```')
    response = await client.post(
        "/api/v1/domains/analyze", json={"domain_name": "x.example", "engine": "static"}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["description"] == "Unable to analyze domain"
    assert data["keywords"] == []


@pytest.mark.asyncio
async def test_analyze_domain_quota(client: AsyncClient, use_static):
    use_static(error=EngineError("Rate limit reached", status_code=429))
    response = await client.post(
        "/api/v1/domains/analyze", json={"domain_name": "x.example", "engine": "static"}
    )
    assert response.status_code == 429
    assert "quota exceeded" in response.json()["detail"]


@pytest.mark.asyncio
async def test_analyze_domain_engine_failure(client: AsyncClient, use_static):
    use_static("not json at all")
    response = await client.post(
        "/api/v1/domains/analyze", json={"domain_name": "x.example", "engine": "static"}
    )
    assert response.status_code == 502
    assert response.json()["detail"].startswith("Failed to analyze domain")


@pytest.mark.asyncio
async def test_analyze_domain_unknown_engine(client: AsyncClient):
    response = await client.post(
        "/api/v1/domains/analyze", json={"domain_name": "x.example", "engine": "nope"}
    )
    assert response.status_code == 400
    assert "nope" in response.json()["detail"]


@pytest.mark.asyncio
async def test_analyze_domain_default_engine_without_key(client: AsyncClient):
    """The default profile engine is openai; without a key the call fails upstream."""
    response = await client.post("/api/v1/domains/analyze", json={"domain_name": "x.example"})
    assert response.status_code == 502
    assert "OPENAI_API_KEY" in response.json()["detail"]


@pytest.mark.asyncio
async def test_analyze_domain_openai(client: AsyncClient, monkeypatch):
    def handler(request: httpx.Request) -> httpx.Response:
        content = '{"description": "A bakery.", "keywords": ["bread"]}'
        return httpx.Response(200, json={"choices": [{"message": {"content": content}}]})

    monkeypatch.setitem(
        ENGINE_REGISTRY,
        "openai",
        lambda: OpenAiEngine(api_key="sk-test-fake-key", transport=httpx.MockTransport(handler)),
    )
    response = await client.post("/api/v1/domains/analyze", json={"domain_name": "bakery.example"})
    assert response.status_code == 200
    assert response.json()["engine"] == "openai"
    assert response.json()["keywords"] == ["bread"]


@pytest.mark.asyncio
async def test_analyze_domain_requires_name(client: AsyncClient):
    response = await client.post("/api/v1/domains/analyze", json={"domain_name": ""})
    assert response.status_code == 422


# ---------------------------------------------------------------------------
# POST /api/v1/prompts/generate
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_generate_prompts(client: AsyncClient, use_static):
    use_static(
        '{"prompts": ['
        '{"content": "Audit on-page SEO for product pages", "category": "SEO Prompts"},'
        '{"content": "Find long-tail keywords for running shoes"},'
        '{"content": ""}'
        "]}"
    )
    response = await client.post(
        "/api/v1/prompts/generate",
        json={
            "domain_name": "shoes.example",
            "description": "Online shoe retailer.",
            "keywords": ["shoes"],
            "category": "SEO Prompts",
            "engine": "static",
        },
    )
    assert response.status_code == 200
    assert response.json() == [
        {"content": "Audit on-page SEO for product pages", "category": "SEO Prompts"},
        {"content": "Find long-tail keywords for running shoes", "category": "SEO Prompts"},
    ]


@pytest.mark.asyncio
async def test_generate_prompts_without_list(client: AsyncClient, use_static):
    use_static('{"prompts": "none"}')
    response = await client.post(
        "/api/v1/prompts/generate", json={"domain_name": "x.example", "engine": "static"}
    )
    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
async def test_generate_prompts_quota(client: AsyncClient, use_static):
    use_static(error=EngineError("insufficient billing balance", status_code=402))
    response = await client.post(
        "/api/v1/prompts/generate", json={"domain_name": "x.example", "engine": "static"}
    )
    assert response.status_code == 429
