"""OpenAI chat-completions engine."""

from __future__ import annotations

import logging

import httpx

from app.core.config import settings
from app.engines.base import BaseEngine, EngineError

logger = logging.getLogger(__name__)

ANALYST_SYSTEM_PROMPT = (
    "You are an expert business analyst. Provide detailed, actionable insights based on "
    "the given prompt. Include key findings, recommendations, and strategic considerations. "
    "Pay attention to any keywords mentioned and rate their relevance."
)

QUOTA_MESSAGE = (
    "OpenAI API quota exceeded. Please check your billing and usage limits at "
    "https://platform.openai.com/settings/billing"
)


def _error_message(resp: httpx.Response) -> str:
    try:
        error_body = resp.json()
    except ValueError:
        return resp.text[:500]
    error = error_body.get("error") if isinstance(error_body, dict) else None
    if isinstance(error, dict) and error.get("message"):
        return error["message"]
    return resp.text[:500]


class OpenAiEngine(BaseEngine):
    """Answer prompts through the OpenAI Chat Completions API.

    *transport* replaces the network layer (``httpx.MockTransport`` in tests).
    """

    name = "openai"

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        api_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = settings.openai_api_key if api_key is None else api_key
        self.model = model or settings.openai_model
        self.api_url = api_url or settings.openai_api_url
        self.timeout = settings.openai_timeout_seconds if timeout is None else timeout
        self.transport = transport

    async def generate(self, prompt: str, keywords: list[str] | None = None) -> str:
        messages = [
            {"role": "system", "content": ANALYST_SYSTEM_PROMPT},
            {"role": "user", "content": prompt},
        ]
        return await self._complete(messages)

    async def generate_json(self, prompt: str) -> str:
        messages = [{"role": "user", "content": prompt}]
        return await self._complete(messages, json_mode=True)

    async def _complete(self, messages: list[dict], json_mode: bool = False) -> str:
        if not self.api_key:
            raise EngineError("OPENAI_API_KEY is not configured", engine=self.name, status_code=401)

        payload: dict = {"model": self.model, "messages": messages}
        if json_mode:
            payload["response_format"] = {"type": "json_object"}

        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                resp = await client.post(self.api_url, json=payload, headers=headers)
        except httpx.HTTPError as e:
            raise EngineError(f"OpenAI request failed: {type(e).__name__}: {e}", engine=self.name) from e

        if resp.status_code >= 400:
            error_msg = _error_message(resp)
            logger.error("OpenAI API %d for model=%s: %s", resp.status_code, self.model, error_msg)
            err = EngineError(error_msg, engine=self.name, status_code=resp.status_code)
            if err.is_quota_error:
                raise EngineError(QUOTA_MESSAGE, engine=self.name, status_code=resp.status_code)
            raise err

        try:
            data = resp.json()
            text = data["choices"][0]["message"]["content"] or ""
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise EngineError(f"Malformed OpenAI response: {e}", engine=self.name) from e

        logger.debug("OpenAI model=%s returned %d chars", data.get("model", self.model), len(text))
        return text
