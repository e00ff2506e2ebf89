"""Analysis engines and the side-by-side comparison runner."""

from app.engines.base import BaseEngine, EngineError
from app.engines.comparison import analyze_with_engine, compare_engines
from app.engines.profiling import analyze_domain, generate_prompts
from app.engines.registry import ENGINE_REGISTRY, available_engines, get_engine, register_engine

__all__ = [
    "ENGINE_REGISTRY",
    "BaseEngine",
    "EngineError",
    "analyze_domain",
    "analyze_with_engine",
    "available_engines",
    "compare_engines",
    "generate_prompts",
    "get_engine",
    "register_engine",
]
