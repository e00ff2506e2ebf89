"""Base class and errors for analysis engines.

An engine turns a prompt into free-form text. How it does so (hosted LLM,
local model, canned answer) is its own business; the comparison runner
only needs ``name`` and ``generate``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

_QUOTA_MARKERS = ("429", "quota", "billing")


class EngineError(Exception):
    """Raised when an engine fails to produce a response."""

    def __init__(self, message: str, engine: str = "", status_code: int = 0):
        super().__init__(message)
        self.engine = engine
        self.status_code = status_code

    @property
    def is_quota_error(self) -> bool:
        """True for rate-limit / quota / billing failures."""
        if self.status_code == 429:
            return True
        message = str(self).lower()
        return any(marker in message for marker in _QUOTA_MARKERS)

    @property
    def kind(self) -> str:
        return "quota" if self.is_quota_error else "error"


class BaseEngine(ABC):
    """Base class for all analysis engines."""

    name: str = ""

    @abstractmethod
    async def generate(self, prompt: str, keywords: list[str] | None = None) -> str:
        """Return the engine's answer to *prompt*.

        *keywords* are the domain keywords; engines may use them as context.
        Raise ``EngineError`` on failure.
        """
        ...

    async def generate_json(self, prompt: str) -> str:
        """Return a raw JSON document answering *prompt*.

        Engines with a native JSON mode override this; the default asks
        for plain text and leaves parsing to the caller.
        """
        return await self.generate(prompt)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name!r}>"
