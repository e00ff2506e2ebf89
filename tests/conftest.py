from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from app.core.config import settings

# Override settings for tests
settings.app_env = "development"
settings.simulated_engine_delay_seconds = 0.0
settings.enabled_engines = "simulated,gemini,openai"
settings.openai_api_key = ""
settings.profile_engine = "openai"
settings.scoring_rate_limit = "1000/minute"

from app.main import app  # noqa: E402


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
def domain_keywords() -> list[str]:
    """Keyword set as produced for a typical e-commerce domain."""
    return ["ecommerce", "market share", "growth", "customer retention", "logistics"]
