"""Engine registry: maps engine names to factories."""

from __future__ import annotations

from collections.abc import Callable

from app.core.config import settings
from app.engines.base import BaseEngine
from app.engines.openai_engine import OpenAiEngine
from app.engines.simulated import SimulatedEngine

ENGINE_REGISTRY: dict[str, Callable[[], BaseEngine]] = {}


def register_engine(name: str, factory: Callable[[], BaseEngine]) -> None:
    ENGINE_REGISTRY[name] = factory


def available_engines() -> list[str]:
    """Registered engines that are also switched on in settings."""
    return [name for name in settings.enabled_engine_names if name in ENGINE_REGISTRY]


def get_engine(name: str) -> BaseEngine:
    """Build the engine registered as *name*.

    Raises:
        KeyError: unknown or disabled engine.
    """
    if name not in available_engines():
        raise KeyError(f"Unknown engine: {name}")
    return ENGINE_REGISTRY[name]()


register_engine(OpenAiEngine.name, OpenAiEngine)
# Canned stand-in for a Gemini integration, compared side by side with openai
register_engine("gemini", lambda: SimulatedEngine(label="Gemini", name="gemini"))
register_engine(SimulatedEngine.name, SimulatedEngine)
