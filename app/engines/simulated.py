"""Simulated engine: deterministic stand-in for a hosted model.

Sleeps for a configurable delay and returns a canned analysis that names
the first two domain keywords, so the comparison view has a second engine
to line up against without a real vendor key.
"""

from __future__ import annotations

import asyncio

from app.core.config import settings
from app.engines.base import BaseEngine

_TEMPLATE = (
    "{label} Analysis: Based on the provided prompt, here are the key insights and "
    "recommendations. The analysis suggests strong potential for market positioning "
    "and user engagement strategies. Keywords like {keywords} show high relevance "
    "for strategic implementation."
)


class SimulatedEngine(BaseEngine):
    name = "simulated"

    def __init__(
        self,
        delay_seconds: float | None = None,
        label: str = "Simulated",
        name: str | None = None,
    ):
        self.delay_seconds = (
            settings.simulated_engine_delay_seconds if delay_seconds is None else delay_seconds
        )
        self.label = label
        if name:
            self.name = name

    async def generate(self, prompt: str, keywords: list[str] | None = None) -> str:
        if self.delay_seconds > 0:
            await asyncio.sleep(self.delay_seconds)
        return _TEMPLATE.format(label=self.label, keywords=", ".join((keywords or [])[:2]))
