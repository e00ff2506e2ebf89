"""Domain profiling and prompt generation on top of an engine.

  1. analyze_domain: domain name → {description, keywords}
  2. generate_prompts: domain profile + category → 3–4 category prompts

Both ask the engine for JSON and parse it leniently: missing or
mistyped fields fall back to defaults instead of failing the call.
Only an unparseable answer or an engine error is raised.
"""

from __future__ import annotations

import json
import logging
import re

from pydantic import BaseModel, Field, ValidationError, field_validator

from app.engines.base import BaseEngine, EngineError

logger = logging.getLogger(__name__)

UNKNOWN_DESCRIPTION = "Unable to analyze domain"

PROMPT_CATEGORIES: tuple[str, ...] = (
    "Marketing Prompts",
    "SEO Prompts",
    "Content Strategy",
    "Business Analysis",
    "Competitive Research",
    "Customer Insights",
)

_DOMAIN_PROMPT = """Analyze the domain "{domain}" and provide:
1. A comprehensive description of what this domain likely represents
2. A list of relevant keywords that describe this domain's purpose, industry, or target audience

Respond in JSON format with the following structure:
{{
  "description": "detailed description here",
  "keywords": ["keyword1", "keyword2", "keyword3", "keyword4", "keyword5"]
}}"""

_PROMPTS_PROMPT = """Based on the domain "{domain}" with description "{description}" and keywords [{keywords}], generate 3-4 AI prompts for the category "{category}".

Each prompt should be specific, actionable, and tailored to this domain's context.

Respond in JSON format:
{{
  "prompts": [
    {{
      "content": "prompt content here",
      "category": "{category}"
    }}
  ]
}}"""


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class DomainProfile(BaseModel):
    description: str = UNKNOWN_DESCRIPTION
    keywords: list[str] = Field(default_factory=list)

    @field_validator("description", mode="before")
    @classmethod
    def _description_or_default(cls, value):
        if isinstance(value, str) and value.strip():
            return value
        return UNKNOWN_DESCRIPTION

    @field_validator("keywords", mode="before")
    @classmethod
    def _string_keywords(cls, value):
        if not isinstance(value, list):
            return []
        return [str(item).strip() for item in value if isinstance(item, (str, int, float)) and str(item).strip()]


class GeneratedPrompt(BaseModel):
    model_config = {"str_strip_whitespace": True}

    content: str = Field(min_length=1)
    category: str = ""

    @field_validator("category", mode="before")
    @classmethod
    def _category_as_string(cls, value):
        return value if isinstance(value, str) else ""


# ---------------------------------------------------------------------------
# JSON parsing
# ---------------------------------------------------------------------------


def parse_json_object(text: str) -> dict:
    """Extract a JSON object from an engine answer.

    Handles markdown code fences and prose around the object.

    Raises:
        ValueError: no JSON object found.
    """
    cleaned = re.sub(r"```(?:json)?\s*", "", text or "").strip()
    cleaned = re.sub(r"```\s*$", "", cleaned).strip()
    if not cleaned:
        return {}

    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError:
        m = re.search(r"\{.*\}", cleaned, re.DOTALL)
        if not m:
            raise ValueError("no JSON object in engine response")
        try:
            data = json.loads(m.group(0))
        except json.JSONDecodeError as e:
            raise ValueError(f"invalid JSON in engine response: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    return data


def _wrap_engine_error(engine: BaseEngine, action: str, error: EngineError) -> EngineError:
    if error.is_quota_error:
        return EngineError(
            f"{engine.name} API quota exceeded. Please check your billing and usage limits.",
            engine=engine.name,
            status_code=error.status_code or 429,
        )
    return EngineError(f"Failed to {action}: {error}", engine=engine.name, status_code=error.status_code)


# ---------------------------------------------------------------------------
# Operations
# ---------------------------------------------------------------------------


async def analyze_domain(engine: BaseEngine, domain_name: str) -> DomainProfile:
    """Ask *engine* for a description and keyword list for *domain_name*.

    Raises:
        EngineError: engine failure (quota failures get a dedicated message)
            or an answer that is not JSON.
    """
    try:
        raw = await engine.generate_json(_DOMAIN_PROMPT.format(domain=domain_name))
    except EngineError as e:
        raise _wrap_engine_error(engine, "analyze domain", e) from e

    try:
        profile = DomainProfile.model_validate(parse_json_object(raw))
    except ValueError as e:
        raise EngineError(f"Failed to analyze domain: {e}", engine=engine.name) from e

    logger.info("Domain %s profiled by %s: %d keywords", domain_name, engine.name, len(profile.keywords))
    return profile


async def generate_prompts(
    engine: BaseEngine,
    domain_name: str,
    description: str,
    keywords: list[str],
    category: str,
) -> list[GeneratedPrompt]:
    """Ask *engine* for prompts tailored to the domain in *category*.

    Entries without content are dropped; a missing category defaults to
    the requested one.
    """
    prompt = _PROMPTS_PROMPT.format(
        domain=domain_name,
        description=description,
        keywords=", ".join(keywords),
        category=category,
    )
    try:
        raw = await engine.generate_json(prompt)
    except EngineError as e:
        raise _wrap_engine_error(engine, "generate prompts", e) from e

    try:
        data = parse_json_object(raw)
    except ValueError as e:
        raise EngineError(f"Failed to generate prompts: {e}", engine=engine.name) from e

    items = data.get("prompts")
    if not isinstance(items, list):
        items = []

    prompts: list[GeneratedPrompt] = []
    for item in items:
        if not isinstance(item, dict):
            continue
        try:
            generated = GeneratedPrompt.model_validate(item)
        except ValidationError:
            logger.debug("Skipping malformed prompt entry: %r", item)
            continue
        if not generated.category.strip():
            generated.category = category
        prompts.append(generated)

    logger.info("Generated %d %r prompts for %s via %s", len(prompts), category, domain_name, engine.name)
    return prompts
