"""
Provider used when no model backend is available on this device.
"""

from codenote.core.llm.base import LLMProvider
from codenote.utils.exceptions import ModelUnavailableError


class DisabledLLM(LLMProvider):
    """Always fails with ModelUnavailableError, forcing the heuristic fallback."""

    def __init__(self, reason: str = "No model backend configured"):
        self.reason = reason

    async def complete(
        self,
        prompt: str,
        max_tokens: int = 256,
        temperature: float = 0.0,
        **kwargs,
    ) -> str:
        raise ModelUnavailableError(self.reason)

    async def close(self):
        pass
