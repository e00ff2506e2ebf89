"""Tests for the OpenAI chat-completions engine (mocked HTTP)."""

import json

import httpx
import pytest

from app.core.config import settings
from app.engines.base import EngineError
from app.engines.openai_engine import ANALYST_SYSTEM_PROMPT, QUOTA_MESSAGE, OpenAiEngine


def _completion(content, model="gpt-4o"):
    return {
        "choices": [{"message": {"content": content}, "finish_reason": "stop"}],
        "model": model,
        "usage": {"prompt_tokens": 20, "completion_tokens": 40, "total_tokens": 60},
    }


def _engine(handler, **kwargs) -> OpenAiEngine:
    return OpenAiEngine(api_key="sk-test-fake-key", transport=httpx.MockTransport(handler), **kwargs)


class TestGenerate:
    @pytest.mark.asyncio
    async def test_success(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["auth"] = request.headers["Authorization"]
            seen["payload"] = json.loads(request.content)
            return httpx.Response(200, json=_completion("Strong growth strategy."))

        text = await _engine(handler).generate("Assess shop.example", ["growth"])

        assert text == "Strong growth strategy."
        assert seen["url"] == settings.openai_api_url
        assert seen["auth"] == "Bearer sk-test-fake-key"
        payload = seen["payload"]
        assert payload["model"] == settings.openai_model
        assert payload["messages"][0] == {"role": "system", "content": ANALYST_SYSTEM_PROMPT}
        assert payload["messages"][1] == {"role": "user", "content": "Assess shop.example"}
        assert "response_format" not in payload

    @pytest.mark.asyncio
    async def test_null_content_is_empty(self):
        engine = _engine(lambda request: httpx.Response(200, json=_completion(None)))
        assert await engine.generate("p") == ""

    @pytest.mark.asyncio
    async def test_model_override(self):
        seen = {}

        def handler(request):
            seen["model"] = json.loads(request.content)["model"]
            return httpx.Response(200, json=_completion("ok"))

        await _engine(handler, model="gpt-4.1-mini").generate("p")
        assert seen["model"] == "gpt-4.1-mini"

    @pytest.mark.asyncio
    async def test_json_mode(self):
        seen = {}

        def handler(request):
            seen["payload"] = json.loads(request.content)
            return httpx.Response(200, json=_completion('{"description": "d", "keywords": []}'))

        raw = await _engine(handler).generate_json("Analyze the domain")
        assert json.loads(raw)["description"] == "d"
        assert seen["payload"]["response_format"] == {"type": "json_object"}
        assert seen["payload"]["messages"] == [{"role": "user", "content": "Analyze the domain"}]


class TestErrors:
    @pytest.mark.asyncio
    async def test_missing_api_key(self):
        def handler(request):
            raise AssertionError("no request expected without an API key")

        engine = OpenAiEngine(api_key="", transport=httpx.MockTransport(handler))
        with pytest.raises(EngineError) as exc_info:
            await engine.generate("p")
        assert exc_info.value.status_code == 401
        assert exc_info.value.engine == "openai"

    @pytest.mark.asyncio
    async def test_rate_limited(self):
        engine = _engine(
            lambda request: httpx.Response(429, json={"error": {"message": "Rate limit reached"}})
        )
        with pytest.raises(EngineError) as exc_info:
            await engine.generate("p")
        assert exc_info.value.status_code == 429
        assert exc_info.value.is_quota_error
        assert str(exc_info.value) == QUOTA_MESSAGE

    @pytest.mark.asyncio
    async def test_quota_message_without_429(self):
        engine = _engine(
            lambda request: httpx.Response(
                403, json={"error": {"message": "You exceeded your current quota"}}
            )
        )
        with pytest.raises(EngineError) as exc_info:
            await engine.generate("p")
        assert exc_info.value.status_code == 403
        assert exc_info.value.kind == "quota"

    @pytest.mark.asyncio
    async def test_server_error(self):
        engine = _engine(lambda request: httpx.Response(500, text="upstream exploded"))
        with pytest.raises(EngineError) as exc_info:
            await engine.generate("p")
        assert exc_info.value.status_code == 500
        assert exc_info.value.kind == "error"
        assert "upstream exploded" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_transport_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(EngineError) as exc_info:
            await _engine(handler).generate("p")
        assert "ConnectError" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_malformed_body(self):
        engine = _engine(lambda request: httpx.Response(200, json={"unexpected": True}))
        with pytest.raises(EngineError) as exc_info:
            await engine.generate("p")
        assert "Malformed" in str(exc_info.value)
